from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from tablekit.schemas.table import Page, PaginationState

MAX_PAGE_BUTTONS = 5


def total_pages_for(total_count: int, page_size: int) -> int:
    return max(1, math.ceil(total_count / page_size))


def paginate(records: Sequence[Any], state: PaginationState, loading: bool = False) -> Page:
    items = list(records)
    total_count = len(items)
    total_pages = total_pages_for(total_count, state.page_size)
    if state.page < 1:
        page_items: list[Any] = []
    else:
        start = (state.page - 1) * state.page_size
        page_items = items[start : start + state.page_size]
    return Page(
        page_items=page_items,
        total_pages=total_pages,
        total_count=total_count,
        current_page=state.page,
        page_size=state.page_size,
        loading=loading,
    )


def page_window(current_page: int, total_pages: int) -> list[int]:
    """Page numbers for the pager, at most ``MAX_PAGE_BUTTONS`` of them.

    Near the start: ``1 2 3 4 N``. Near the end: ``1 N-3 N-2 N-1 N``.
    Otherwise: ``1 k-1 k k+1 N``.
    """
    if total_pages <= MAX_PAGE_BUTTONS:
        return list(range(1, total_pages + 1))
    if current_page <= 3:
        return [1, 2, 3, 4, total_pages]
    if current_page >= total_pages - 2:
        return [1] + [total_pages - offset for offset in (3, 2, 1, 0)]
    return [1, current_page - 1, current_page, current_page + 1, total_pages]


def page_range(page: Page) -> tuple[int, int]:
    if page.total_count == 0 or not page.page_items:
        return (0, 0)
    start = (page.current_page - 1) * page.page_size + 1
    return (start, min(page.current_page * page.page_size, page.total_count))


def goto_page(state: PaginationState, page: int, total_pages: int | None = None) -> PaginationState:
    if total_pages is not None:
        page = min(page, total_pages)
    state.page = max(1, page)
    return state


def next_page(state: PaginationState, total_pages: int) -> PaginationState:
    if state.page >= total_pages:
        return state
    state.page += 1
    return state


def prev_page(state: PaginationState) -> PaginationState:
    state.page = max(1, state.page - 1)
    return state
