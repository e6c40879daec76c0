from .core.config import Settings, settings
from .core.error_catalog import ErrorCatalog, ErrorDefinition, TableConfigError, WarningCatalog
from .core.fields import MISSING, FieldAccessor, coerce_text, field_getter, record_fields
from .schemas.table import (
    FILTER_ALL,
    FilterDescriptor,
    FilterOption,
    Page,
    PaginationState,
    SortCriterion,
    SortDirection,
)
from .services.filters import apply_filters, clean_filters
from .services.pagination import MAX_PAGE_BUTTONS, page_range, page_window, paginate
from .services.search import apply_search
from .services.sorting import apply_sort, toggle_sort
from .ui.columns import ColumnDescriptor, render_cell, visible_columns
from .ui.data_table import DataTable
from .ui.table_printer import print_table

__all__ = [
    "ColumnDescriptor",
    "DataTable",
    "ErrorCatalog",
    "ErrorDefinition",
    "FILTER_ALL",
    "FieldAccessor",
    "FilterDescriptor",
    "FilterOption",
    "MAX_PAGE_BUTTONS",
    "MISSING",
    "Page",
    "PaginationState",
    "Settings",
    "SortCriterion",
    "SortDirection",
    "TableConfigError",
    "WarningCatalog",
    "apply_filters",
    "apply_search",
    "apply_sort",
    "clean_filters",
    "coerce_text",
    "field_getter",
    "page_range",
    "page_window",
    "paginate",
    "print_table",
    "record_fields",
    "render_cell",
    "settings",
    "toggle_sort",
    "visible_columns",
]
