import pytest

from tablekit.schemas.table import PaginationState
from tablekit.services.pagination import (
    MAX_PAGE_BUTTONS,
    goto_page,
    next_page,
    page_range,
    page_window,
    paginate,
    prev_page,
)


def test_twelve_records_page_size_ten(sales) -> None:
    first = paginate(sales, PaginationState(page=1, page_size=10))
    second = paginate(sales, PaginationState(page=2, page_size=10))

    assert first.total_pages == 2
    assert first.total_count == 12
    assert len(first.page_items) == 10
    assert [item["id"] for item in second.page_items] == ["s-11", "s-12"]


def test_empty_collection_still_has_one_page() -> None:
    page = paginate([], PaginationState(page=1, page_size=10))

    assert page.total_pages == 1
    assert page.total_count == 0
    assert page.page_items == []
    assert page_range(page) == (0, 0)


@pytest.mark.parametrize("current", range(1, 2 + 5 + 1))
def test_paginate_never_raises_out_of_range(sales, current) -> None:
    page = paginate(sales, PaginationState(page=current, page_size=10))

    assert page.total_pages >= 1
    if current > page.total_pages:
        assert page.page_items == []


def test_page_below_one_yields_empty_slice(sales) -> None:
    assert paginate(sales, PaginationState(page=0, page_size=10)).page_items == []
    assert paginate(sales, PaginationState(page=-2, page_size=10)).page_items == []


@pytest.mark.parametrize(
    ("current", "total", "expected"),
    [
        (1, 10, [1, 2, 3, 4, 10]),
        (10, 10, [1, 7, 8, 9, 10]),
        (5, 10, [1, 4, 5, 6, 10]),
        (3, 10, [1, 2, 3, 4, 10]),
        (4, 10, [1, 3, 4, 5, 10]),
        (8, 10, [1, 7, 8, 9, 10]),
        (7, 10, [1, 6, 7, 8, 10]),
        (3, 6, [1, 2, 3, 4, 6]),
        (4, 6, [1, 3, 4, 5, 6]),
        (2, 5, [1, 2, 3, 4, 5]),
        (1, 1, [1]),
    ],
)
def test_page_window(current, total, expected) -> None:
    window = page_window(current, total)

    assert window == expected
    assert len(window) <= MAX_PAGE_BUTTONS


def test_page_range_reports_visible_rows(sales) -> None:
    assert page_range(paginate(sales, PaginationState(page=1, page_size=5))) == (1, 5)
    assert page_range(paginate(sales, PaginationState(page=3, page_size=5))) == (11, 12)


def test_pagination_next_prev_goto_bounds() -> None:
    state = PaginationState(page=1, page_size=20)

    next_page(state, total_pages=2)
    assert state.page == 2

    next_page(state, total_pages=2)
    assert state.page == 2

    prev_page(state)
    prev_page(state)
    assert state.page == 1

    goto_page(state, 0)
    assert state.page == 1

    goto_page(state, 9, total_pages=3)
    assert state.page == 3
