from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

from tablekit.core.fields import record_fields


def matches_query(record: Any, needle: str, fields: Callable[[Any], Iterator[tuple[str, Any]]] = record_fields) -> bool:
    return any(isinstance(value, str) and needle in value.lower() for _, value in fields(record))


def apply_search(
    records: Sequence[Any] | Iterable[Any],
    query: str,
    fields: Callable[[Any], Iterator[tuple[str, Any]]] = record_fields,
) -> list[Any]:
    """Keep records where any string field contains ``query``, ignoring case.

    Only values that are ``str`` at runtime are inspected; numbers, booleans
    and nested structures never match. An empty query returns every record
    in its original order.
    """
    if not query:
        return list(records)
    needle = query.lower()
    return [record for record in records if matches_query(record, needle, fields)]
