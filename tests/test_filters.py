from decimal import Decimal

from tablekit.schemas.table import FILTER_ALL
from tablekit.services.filters import apply_filters, clean_filters


def test_all_sentinel_returns_full_input(sales) -> None:
    assert apply_filters(sales, {"status": FILTER_ALL, "clientId": FILTER_ALL}) == sales
    assert apply_filters(sales, {}) == sales


def test_filter_exact_match_is_subset(sales) -> None:
    completed = apply_filters(sales, {"status": "completed"})

    assert [item["id"] for item in completed] == ["s-03", "s-06", "s-09", "s-12"]
    assert all(item in sales for item in completed)
    assert apply_filters(sales, {"status": "Completed"}) == []


def test_filters_combine_with_and(sales) -> None:
    result = apply_filters(sales, {"status": "completed", "clientId": "c-3"})

    assert [item["id"] for item in result] == ["s-06"]


def test_missing_field_never_passes_active_filter() -> None:
    records = [{"id": "1", "status": "pending"}, {"id": "2"}, {"id": "3", "status": None}]

    assert [item["id"] for item in apply_filters(records, {"status": "pending"})] == ["1"]
    assert apply_filters(records, {"status": "None"}) == []
    assert apply_filters(records, {"status": "undefined"}) == []


def test_values_are_coerced_before_comparison() -> None:
    records = [
        {"id": "1", "vip": True, "score": 3.0, "balance": Decimal("10.50")},
        {"id": "2", "vip": False, "score": 4, "balance": Decimal("2")},
    ]

    assert [item["id"] for item in apply_filters(records, {"vip": "true"})] == ["1"]
    assert [item["id"] for item in apply_filters(records, {"score": "3"})] == ["1"]
    assert [item["id"] for item in apply_filters(records, {"balance": "10.50"})] == ["1"]


def test_filter_uses_supplied_accessor() -> None:
    records = [{"id": "1", "client": {"tier": "gold"}}, {"id": "2", "client": {"tier": "silver"}}]

    result = apply_filters(records, {"tier": "gold"}, accessors={"tier": lambda record: record["client"]["tier"]})

    assert [item["id"] for item in result] == ["1"]


def test_clean_filters_drops_sentinel_and_none() -> None:
    assert clean_filters({"status": FILTER_ALL, "clientId": "c-1", "region": None}) == {"clientId": "c-1"}
