from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from tablekit.core.fields import FieldAccessor, coerce_text, read_field, resolve_accessor
from tablekit.schemas.table import FILTER_ALL


def clean_filters(filters: Mapping[str, Any]) -> dict[str, str]:
    return {key: value for key, value in filters.items() if value not in (None, FILTER_ALL)}


def apply_filters(
    records: Iterable[Any],
    filter_state: Mapping[str, str],
    accessors: Mapping[str, FieldAccessor] | None = None,
) -> list[Any]:
    result = list(records)
    for key, expected in clean_filters(filter_state).items():
        accessor = resolve_accessor(key, accessors)
        result = [record for record in result if coerce_text(read_field(record, accessor)) == expected]
    return result
