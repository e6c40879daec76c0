from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from tablekit.core.fields import FieldAccessor, coerce_text, read_field, resolve_accessor

CellRenderer = Callable[[Any], Any]


@dataclass(frozen=True)
class ColumnDescriptor:
    key: str
    header: str
    cell: CellRenderer | None = None
    sortable: bool = False
    hidden: bool = False
    accessor: FieldAccessor | None = None


def visible_columns(columns: Sequence[ColumnDescriptor]) -> list[ColumnDescriptor]:
    return [column for column in columns if not column.hidden]


def column_accessors(
    columns: Sequence[ColumnDescriptor],
    overrides: Mapping[str, FieldAccessor] | None = None,
) -> dict[str, FieldAccessor]:
    accessors = {column.key: column.accessor for column in columns if column.accessor is not None}
    accessors.update(overrides or {})
    return accessors


def render_cell(
    record: Any,
    column: ColumnDescriptor,
    accessors: Mapping[str, FieldAccessor] | None = None,
    empty_cell: str = "-",
) -> Any:
    if column.cell is not None:
        return column.cell(record)
    text = coerce_text(read_field(record, resolve_accessor(column.key, accessors)))
    return text or empty_cell
