from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    TABLEKIT_PAGE_SIZE: int = 10
    TABLEKIT_SEARCH_PLACEHOLDER: str = "Search..."
    TABLEKIT_NO_DATA_MESSAGE: str = "No data to display"
    TABLEKIT_ALL_OPTION_LABEL: str = "All"
    TABLEKIT_EMPTY_CELL: str = "-"
    TABLEKIT_LOADING_MESSAGE: str = "Loading data..."
    TABLEKIT_RANGE_TEMPLATE: str = "Showing {start} - {end} of {total} records"
    TABLEKIT_CONFIG_WARNINGS: bool = True
    TABLEKIT_LOG_LEVEL: str = "INFO"

    @field_validator("TABLEKIT_PAGE_SIZE")
    @classmethod
    def _page_size_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("TABLEKIT_PAGE_SIZE must be >= 1")
        return value

    @field_validator("TABLEKIT_LOG_LEVEL")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"


settings = Settings()
