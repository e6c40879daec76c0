from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from tablekit.core.fields import coerce_text

FILTER_ALL = "all"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class SortCriterion(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC


class FilterOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: str

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, value: Any) -> Any:
        text = coerce_text(value)
        return value if text is None else text


class FilterDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    options: tuple[FilterOption, ...] = ()

    @field_validator("key")
    @classmethod
    def _key_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("filter key must not be blank")
        return value

    @field_validator("options", mode="before")
    @classmethod
    def _accept_pairs(cls, value: Any) -> Any:
        if value is None:
            return ()
        options = []
        for item in value:
            if isinstance(item, (tuple, list)) and len(item) == 2:
                options.append({"value": item[0], "label": item[1]})
            else:
                options.append(item)
        return tuple(options)

    def option_values(self) -> list[str]:
        return [option.value for option in self.options]


@dataclass
class PaginationState:
    page: int = 1
    page_size: int = 10


@dataclass(frozen=True)
class Page:
    page_items: list[Any] = field(default_factory=list)
    total_pages: int = 1
    total_count: int = 0
    current_page: int = 1
    page_size: int = 10
    loading: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.page_items
