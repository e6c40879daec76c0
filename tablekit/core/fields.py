"""Field access and value coercion shared by every table stage.

Records are opaque: a mapping, a dataclass, a pydantic model or any object
with attributes. Stages never index a record with a runtime key directly;
they resolve a :data:`FieldAccessor` for the key and call it.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterator, Mapping
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel


class _Missing:
    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()

FieldAccessor = Callable[[Any], Any]


def field_getter(key: str) -> FieldAccessor:
    def _get(record: Any) -> Any:
        if isinstance(record, Mapping):
            value = record.get(key, MISSING)
        else:
            value = getattr(record, key, MISSING)
        return MISSING if value is None else value

    _get.__name__ = f"get_{key}"
    return _get


def resolve_accessor(key: str, accessors: Mapping[str, FieldAccessor] | None = None) -> FieldAccessor:
    if accessors:
        accessor = accessors.get(key)
        if accessor is not None:
            return accessor
    return field_getter(key)


def read_field(record: Any, accessor: FieldAccessor) -> Any:
    value = accessor(record)
    return MISSING if value is None else value


def record_fields(record: Any) -> Iterator[tuple[str, Any]]:
    """Yield the top-level ``(name, value)`` pairs of a record."""
    if isinstance(record, Mapping):
        yield from record.items()
    elif isinstance(record, BaseModel):
        # pydantic iterates declared fields followed by extras
        yield from record
    elif dataclasses.is_dataclass(record) and not isinstance(record, type):
        for item in dataclasses.fields(record):
            yield item.name, getattr(record, item.name)
    elif hasattr(record, "__dict__"):
        yield from vars(record).items()


def has_field(record: Any, key: str) -> bool:
    if isinstance(record, Mapping):
        return key in record
    return hasattr(record, key)


def is_missing(value: Any) -> bool:
    return value is MISSING or value is None


def coerce_text(value: Any) -> str | None:
    """String form used for filter equality and default cells; ``None`` when missing."""
    if is_missing(value):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def sort_value(value: Any) -> tuple:
    # numbers < strings < dates < other; missing after everything
    if is_missing(value):
        return (1, 0, "")
    if isinstance(value, (int, float, Decimal)):
        return (0, 0, value)
    if isinstance(value, str):
        return (0, 1, value)
    if isinstance(value, (datetime, date)):
        return (0, 2, value.isoformat())
    return (0, 3, coerce_text(value) or "")
