from __future__ import annotations

import json
import logging

from tablekit.core.config import settings


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=level or settings.TABLEKIT_LOG_LEVEL, format="%(message)s")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_json(logger: logging.Logger, payload: dict, level: int = logging.INFO) -> None:
    if not logger.isEnabledFor(level):
        return
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))
