"""Aggregate helpers over sequences of numbers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

N = TypeVar("N", int, float)


def max_value(values: Iterable[N]) -> N:
    """Return the largest value; at least one value is required."""
    items = list(values)
    if not items:
        raise ValueError("max_value requires at least one value")
    return max(items)


def min_value(values: Iterable[N]) -> N:
    """Return the smallest value; at least one value is required."""
    items = list(values)
    if not items:
        raise ValueError("min_value requires at least one value")
    return min(items)


def sum_values(values: Iterable[N]) -> N:
    """Return the sum of the values, 0 for an empty input."""
    return sum(values, 0)