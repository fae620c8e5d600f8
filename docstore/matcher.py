from __future__ import annotations

from typing import Any

from .values import MISSING, field_of, json_equal


def matches(document: Any, where: Any) -> bool:
    """
    Exact-match conjunction over top-level fields.

    - non-object `where` matches nothing
    - `{}` matches everything
    - otherwise every field must be present in the document with an equal value
    """
    if not isinstance(where, dict):
        return False
    for name, expected in where.items():
        actual = field_of(document, name)
        if actual is MISSING or not json_equal(actual, expected):
            return False
    return True
