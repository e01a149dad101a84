"""Three-way comparators for ordering skip-map keys.

A comparator is any callable ``cmp(a, b) -> int`` returning a negative
number, zero or a positive number.  It must describe a total order.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

__all__ = ["Comparator", "natural_order", "reverse_order", "by_string", "from_key"]

T = TypeVar("T")

Comparator = Callable[[T, T], int]


def natural_order(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def reverse_order(a: Any, b: Any) -> int:
    return (a < b) - (a > b)


def by_string(a: Any, b: Any) -> int:
    """Order by ``str()`` representation; mixes types but sorts ``10`` before ``9``."""
    return natural_order(str(a), str(b))


def from_key(fn: Callable[[Any], Any]) -> Comparator[Any]:
    """Build a comparator that orders by ``fn(key)``, like ``sorted(key=...)``."""

    def compare(a: Any, b: Any) -> int:
        return natural_order(fn(a), fn(b))

    return compare
