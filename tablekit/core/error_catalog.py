from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorDefinition:
    code: str
    message: str


class ErrorCatalog:
    INVALID_PAGE_SIZE = ErrorDefinition("INVALID_PAGE_SIZE", "Page size must be a positive integer")
    DUPLICATE_COLUMN_KEY = ErrorDefinition("DUPLICATE_COLUMN_KEY", "Column keys must be unique")
    DUPLICATE_FILTER_KEY = ErrorDefinition("DUPLICATE_FILTER_KEY", "Filter keys must be unique")


class WarningCatalog:
    UNMATCHED_COLUMN_KEY = ErrorDefinition(
        "UNMATCHED_COLUMN_KEY",
        "Column key does not match any field of the current records",
    )
    UNMATCHED_FILTER_KEY = ErrorDefinition(
        "UNMATCHED_FILTER_KEY",
        "Filter key does not match any field of the current records",
    )
    RESERVED_FILTER_VALUE = ErrorDefinition(
        "RESERVED_FILTER_VALUE",
        "Filter option uses the reserved 'all' value and can never be selected",
    )
    UNKNOWN_SORT_KEY = ErrorDefinition("UNKNOWN_SORT_KEY", "Sort requested on a key that is not a sortable column")
    DUPLICATE_ROW_ID = ErrorDefinition("DUPLICATE_ROW_ID", "Records share the same id")


class TableConfigError(Exception):
    def __init__(self, error: ErrorDefinition, details: object | None = None):
        self.error = error
        self.details = details
        super().__init__(error.message)

    def __str__(self) -> str:
        suffix = f" details={self.details}" if self.details is not None else ""
        return f"{self.error.code}: {self.error.message}{suffix}"
