from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from tablekit.core.fields import FieldAccessor, read_field, resolve_accessor, sort_value
from tablekit.schemas.table import SortCriterion, SortDirection


def toggle_sort(current: SortCriterion | None, key: str) -> SortCriterion:
    if current is not None and current.key == key:
        return SortCriterion(key=key, direction=current.direction.flipped())
    return SortCriterion(key=key, direction=SortDirection.ASC)


def apply_sort(
    records: Iterable[Any],
    criterion: SortCriterion | None,
    accessors: Mapping[str, FieldAccessor] | None = None,
) -> list[Any]:
    if criterion is None:
        return list(records)
    accessor = resolve_accessor(criterion.key, accessors)
    # sorted() stays stable with reverse=True, equal keys keep input order
    return sorted(records, key=lambda record: sort_value(read_field(record, accessor)), reverse=criterion.descending)
