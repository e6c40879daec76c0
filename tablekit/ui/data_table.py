from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from tablekit.core.config import Settings, settings as default_settings
from tablekit.core.error_catalog import ErrorCatalog, ErrorDefinition, TableConfigError, WarningCatalog
from tablekit.core.fields import MISSING, FieldAccessor, has_field, read_field, resolve_accessor
from tablekit.core.logging import get_logger, log_json
from tablekit.schemas.table import FILTER_ALL, FilterDescriptor, Page, PaginationState, SortCriterion
from tablekit.services.filters import apply_filters, clean_filters
from tablekit.services.pagination import (
    goto_page,
    next_page as advance_page,
    page_range,
    page_window,
    paginate,
    prev_page as rewind_page,
    total_pages_for,
)
from tablekit.services.search import apply_search
from tablekit.services.sorting import apply_sort, toggle_sort
from tablekit.ui.columns import ColumnDescriptor, column_accessors, render_cell, visible_columns
from tablekit.ui.view_state import resolve_state

logger = get_logger(__name__)

RowActions = Callable[[Any], Any]


class DataTable:
    """Search, filter, sort and paginate one in-memory record collection.

    Criteria live on the instance and change only through the ``set_*``
    mutators. Projections (:meth:`compute_visible`, :meth:`render`) rerun the
    whole pipeline on every call and never modify the stored records.
    """

    def __init__(
        self,
        columns: Sequence[ColumnDescriptor],
        filters: Sequence[FilterDescriptor | Mapping[str, Any]] = (),
        *,
        records: Iterable[Any] = (),
        page_size: int | None = None,
        loading: bool = False,
        row_actions: RowActions | None = None,
        accessors: Mapping[str, FieldAccessor] | None = None,
        search_placeholder: str | None = None,
        no_data_message: str | None = None,
        all_option_label: str | None = None,
        empty_cell: str | None = None,
        loading_message: str | None = None,
        name: str = "table",
        config: Settings | None = None,
    ) -> None:
        self.config = config or default_settings
        self.name = name
        self.columns = list(columns)
        self.filters = [item if isinstance(item, FilterDescriptor) else FilterDescriptor.model_validate(item) for item in filters]
        _ensure_unique([column.key for column in self.columns], ErrorCatalog.DUPLICATE_COLUMN_KEY)
        _ensure_unique([item.key for item in self.filters], ErrorCatalog.DUPLICATE_FILTER_KEY)

        size = self.config.TABLEKIT_PAGE_SIZE if page_size is None else page_size
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise TableConfigError(ErrorCatalog.INVALID_PAGE_SIZE, details={"page_size": size})

        self.row_actions = row_actions
        self.accessors = column_accessors(self.columns, accessors)
        self.search_placeholder = search_placeholder or self.config.TABLEKIT_SEARCH_PLACEHOLDER
        self.no_data_message = no_data_message or self.config.TABLEKIT_NO_DATA_MESSAGE
        self.all_option_label = all_option_label or self.config.TABLEKIT_ALL_OPTION_LABEL
        self.empty_cell = self.config.TABLEKIT_EMPTY_CELL if empty_cell is None else empty_cell
        self.loading_message = loading_message or self.config.TABLEKIT_LOADING_MESSAGE

        self.search = ""
        self.filter_state: dict[str, str] = {}
        self.sort: SortCriterion | None = None
        self.pagination = PaginationState(page=1, page_size=size)
        self.records: tuple[Any, ...] = ()
        self.loading = loading
        self._warned: set[tuple[str, str]] = set()

        for descriptor in self.filters:
            if FILTER_ALL in descriptor.option_values():
                self._warn(WarningCatalog.RESERVED_FILTER_VALUE, descriptor.key)
        self.set_records(records, loading=loading)

    # -- mutators ---------------------------------------------------------

    def set_records(self, records: Iterable[Any], loading: bool = False) -> None:
        self.records = tuple(records)
        self.loading = loading
        if not loading:
            self._check_keys_against_records()

    def set_loading(self, loading: bool) -> None:
        was_loading = self.loading
        self.loading = loading
        if was_loading and not loading:
            self._check_keys_against_records()

    def set_search(self, query: str) -> None:
        self.search = query or ""
        self.pagination.page = 1
        self._log_change("table.search", query=self.search)

    def set_filter(self, key: str, value: str | None) -> None:
        self.filter_state[key] = FILTER_ALL if value is None else value
        self.pagination.page = 1
        self._log_change("table.filter", key=key, value=self.filter_state[key])

    def reset_filters(self) -> None:
        for key in self.filter_state:
            self.filter_state[key] = FILTER_ALL
        self.pagination.page = 1
        self._log_change("table.filter_reset")

    def set_sort(self, key: str) -> SortCriterion:
        if key not in {column.key for column in self.columns if column.sortable}:
            self._warn(WarningCatalog.UNKNOWN_SORT_KEY, key)
        self.sort = toggle_sort(self.sort, key)
        self._log_change("table.sort", key=key, direction=self.sort.direction.value)
        return self.sort

    def set_page(self, page: int) -> int:
        total = None if self.loading else total_pages_for(len(self._filtered()), self.pagination.page_size)
        goto_page(self.pagination, page, total)
        self._log_change("table.page")
        return self.pagination.page

    def next_page(self) -> int:
        if self.loading:
            goto_page(self.pagination, self.pagination.page + 1)
            return self.pagination.page
        advance_page(self.pagination, total_pages_for(len(self._filtered()), self.pagination.page_size))
        return self.pagination.page

    def prev_page(self) -> int:
        rewind_page(self.pagination)
        return self.pagination.page

    # -- projections ------------------------------------------------------

    def filter_value(self, key: str) -> str:
        return self.filter_state.get(key, FILTER_ALL)

    def visible_columns(self) -> list[ColumnDescriptor]:
        return visible_columns(self.columns)

    def row_key(self, record: Any) -> Any:
        value = read_field(record, resolve_accessor("id", self.accessors))
        return None if value is MISSING else value

    def compute_visible(self) -> Page:
        if self.loading:
            return Page(current_page=self.pagination.page, page_size=self.pagination.page_size, loading=True)
        rows = apply_sort(self._filtered(), self.sort, self.accessors)
        total = total_pages_for(len(rows), self.pagination.page_size)
        state = PaginationState(page=min(self.pagination.page, total), page_size=self.pagination.page_size)
        return paginate(rows, state)

    def page_window(self) -> list[int]:
        page = self.compute_visible()
        return page_window(page.current_page, page.total_pages)

    def render(self) -> dict[str, Any]:
        page = self.compute_visible()
        columns = self.visible_columns()
        state = resolve_state(
            is_loading=page.loading,
            has_data=not page.is_empty,
            loading_message=self.loading_message,
            empty_message=self.no_data_message,
        )
        return {
            "loading": page.loading,
            "view_state": state.render(),
            "search": {"value": self.search, "placeholder": self.search_placeholder},
            "filters": [self._render_filter(item) for item in self.filters],
            "columns": [self._render_header(column) for column in columns],
            "has_actions": self.row_actions is not None,
            "colspan": len(columns) + (1 if self.row_actions is not None else 0),
            "rows": [self._render_row(record, columns) for record in page.page_items],
            "empty_message": self.no_data_message if not page.loading and page.is_empty else None,
            "pagination": self._render_pagination(page),
        }

    # -- internals --------------------------------------------------------

    def _filtered(self) -> list[Any]:
        return apply_filters(apply_search(self.records, self.search), self.filter_state, self.accessors)

    def _render_filter(self, descriptor: FilterDescriptor) -> dict[str, Any]:
        options = [{"value": FILTER_ALL, "label": self.all_option_label}]
        options.extend({"value": option.value, "label": option.label} for option in descriptor.options)
        return {
            "key": descriptor.key,
            "label": descriptor.label,
            "value": self.filter_value(descriptor.key),
            "options": options,
        }

    def _render_header(self, column: ColumnDescriptor) -> dict[str, Any]:
        direction = None
        if column.sortable and self.sort is not None and self.sort.key == column.key:
            direction = self.sort.direction.value
        return {"key": column.key, "header": column.header, "sortable": column.sortable, "sort_direction": direction}

    def _render_row(self, record: Any, columns: list[ColumnDescriptor]) -> dict[str, Any]:
        return {
            "id": self.row_key(record),
            "cells": [
                {"key": column.key, "value": render_cell(record, column, self.accessors, self.empty_cell)}
                for column in columns
            ],
            "actions": self.row_actions(record) if self.row_actions is not None else None,
        }

    def _render_pagination(self, page: Page) -> dict[str, Any]:
        start, end = page_range(page)
        return {
            "visible": not page.loading and page.total_pages > 1,
            "current_page": page.current_page,
            "total_pages": page.total_pages,
            "total_count": page.total_count,
            "page_size": page.page_size,
            "range_start": start,
            "range_end": end,
            "summary": self.config.TABLEKIT_RANGE_TEMPLATE.format(start=start, end=end, total=page.total_count),
            "prev_disabled": page.current_page <= 1,
            "next_disabled": page.current_page >= page.total_pages,
            "pages": [
                {"number": number, "active": number == page.current_page}
                for number in page_window(page.current_page, page.total_pages)
            ],
        }

    def _check_keys_against_records(self) -> None:
        if not self.records:
            return
        for column in self.columns:
            if column.cell is not None and not column.sortable:
                continue
            if not self._key_reachable(column.key):
                self._warn(WarningCatalog.UNMATCHED_COLUMN_KEY, column.key)
        for descriptor in self.filters:
            if not self._key_reachable(descriptor.key):
                self._warn(WarningCatalog.UNMATCHED_FILTER_KEY, descriptor.key)

        counts = Counter(self.row_key(record) for record in self.records)
        duplicates = sorted(str(key) for key, count in counts.items() if count > 1)
        if duplicates:
            self._warn(WarningCatalog.DUPLICATE_ROW_ID, "id", ids=duplicates)

    def _key_reachable(self, key: str) -> bool:
        if key in self.accessors:
            return True
        return any(has_field(record, key) for record in self.records)

    def _warn(self, definition: ErrorDefinition, key: str, **details: Any) -> None:
        if not self.config.TABLEKIT_CONFIG_WARNINGS or (definition.code, key) in self._warned:
            return
        self._warned.add((definition.code, key))
        log_json(
            logger,
            {
                "event": "table.config_warning",
                "table": self.name,
                "code": definition.code,
                "message": definition.message,
                "key": key,
                **details,
            },
            level=logging.WARNING,
        )

    def _log_change(self, event: str, **fields: Any) -> None:
        log_json(
            logger,
            {"event": event, "table": self.name, "page": self.pagination.page, "filters": clean_filters(self.filter_state), **fields},
            level=logging.DEBUG,
        )


def _ensure_unique(keys: list[str], error: ErrorDefinition) -> None:
    duplicates = sorted(key for key, count in Counter(keys).items() if count > 1)
    if duplicates:
        raise TableConfigError(error, details={"keys": duplicates})
