from __future__ import annotations

from typing import Any

import pytest

from tablekit.ui.columns import ColumnDescriptor

STATUSES = ("completed", "pending", "cancelled")


def build_sales(count: int = 12) -> list[dict[str, Any]]:
    return [
        {
            "id": f"s-{idx:02d}",
            "clientId": f"c-{idx % 4 + 1}",
            "amount": (idx * 7 % 13) * 100,
            "status": STATUSES[idx % 3],
            "date": f"2024-03-{idx:02d}",
        }
        for idx in range(1, count + 1)
    ]


@pytest.fixture()
def sales() -> list[dict[str, Any]]:
    return build_sales()


@pytest.fixture()
def sale_columns() -> list[ColumnDescriptor]:
    return [
        ColumnDescriptor(key="id", header="Sale ID", sortable=True),
        ColumnDescriptor(key="clientId", header="Client ID", sortable=True),
        ColumnDescriptor(key="amount", header="Amount", sortable=True, cell=lambda sale: f"{sale['amount']} RUB"),
        ColumnDescriptor(key="status", header="Status", sortable=True),
        ColumnDescriptor(key="date", header="Date", sortable=True, hidden=True),
    ]


@pytest.fixture()
def status_filter() -> dict[str, Any]:
    return {
        "key": "status",
        "label": "Status",
        "options": [("completed", "Completed"), ("pending", "In progress"), ("cancelled", "Cancelled")],
    }
