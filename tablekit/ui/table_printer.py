from __future__ import annotations

from typing import Any


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def print_table(title: str, view: dict[str, Any]) -> None:
    """Print a :meth:`DataTable.render` payload as a plain text grid."""
    print(f"\n{title}")
    state = view["view_state"]
    if view["loading"] or not view["rows"]:
        print(f"({state['message']})")
        return

    headers = [column["header"] + _sort_marker(column) for column in view["columns"]]
    rows = [[_text(cell["value"]) for cell in row["cells"]] for row in view["rows"]]
    if view["has_actions"]:
        headers.append("")
        for row, payload in zip(rows, view["rows"]):
            row.append(_text(payload["actions"]))

    widths = [max(len(header), *(len(row[idx]) for row in rows)) for idx, header in enumerate(headers)]
    print(" | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers)))
    print("-+-".join("-" * width for width in widths))
    for row in rows:
        print(" | ".join(cell.ljust(widths[idx]) for idx, cell in enumerate(row)))

    pagination = view["pagination"]
    if pagination["visible"]:
        pages = " ".join(
            f"[{item['number']}]" if item["active"] else str(item["number"]) for item in pagination["pages"]
        )
        print(f"{pagination['summary']}  < {pages} >")


def _sort_marker(column: dict[str, Any]) -> str:
    direction = column.get("sort_direction")
    if direction == "asc":
        return " ^"
    if direction == "desc":
        return " v"
    return ""
