"""
Query-parameter formatting for repeated IDs and OAuth scopes.
Values are joined as-is; callers must not pass values containing the delimiter.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Union

Scalar = Union[int, str]


def _join(values: Iterable[Scalar], sep: str) -> str:
    items: Sequence[Scalar] = list(values)
    if not items:
        return ""

    # bool is an int subclass but never a valid ID
    if all(isinstance(v, int) and not isinstance(v, bool) for v in items):
        return sep.join(str(v) for v in items)
    if all(isinstance(v, str) for v in items):
        return sep.join(items)  # type: ignore[arg-type]
    raise TypeError("values must be all integers or all strings")


def to_csv(values: Iterable[Scalar]) -> str:
    """Join values with ``,`` (e.g. ``candidate_ids=1,2,3``)."""
    return _join(values, ",")


def space_delimit(values: Iterable[Scalar]) -> str:
    """Join values with a single space (e.g. OAuth ``scope``)."""
    return _join(values, " ")


__all__ = ["to_csv", "space_delimit"]
