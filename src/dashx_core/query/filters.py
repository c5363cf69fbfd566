"""Shorthand filter normalization for content search."""
from typing import Any, Optional


OPERATOR_PREFIX = "_"


def parse_filter_object(filter_object: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """Convert a shorthand filter into the nested shape searchContent expects.

    Keys starting with ``_`` are top-level fields (prefix stripped). All other
    keys are field predicates nested under ``data``.

    Each new ``data`` key is placed ahead of the keys merged before it, so
    ``data`` ends up in reverse input order. Kept for wire compatibility; the
    API does not depend on key order.

    Example:
        >>> parse_filter_object({"_status": "active", "title": "Hi"})
        {'status': 'active', 'data': {'title': 'Hi'}}
    """
    filter_by: dict[str, Any] = {}

    for key, value in (filter_object or {}).items():
        if key.startswith(OPERATOR_PREFIX):
            filter_by[key[len(OPERATOR_PREFIX):]] = value
            continue

        filter_by["data"] = {key: value, **filter_by.get("data", {})}

    return filter_by
