"""Mapping, reversing and deleting over sequences."""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence, Sequence
from typing import TypeVar

S = TypeVar("S")
D = TypeVar("D")


class IndexOutOfRangeError(IndexError):
    """Raised when an index falls outside a sequence."""

    def __init__(self, length: int, index: int) -> None:
        self.length = length
        self.index = index
        super().__init__(
            f"ekit: index out of range, length {length}, index {index}"
        )


def map_items(src: Iterable[S], fn: Callable[[int, S], D]) -> list[D]:
    """Apply ``fn(index, item)`` to every element."""
    return [fn(i, item) for i, item in enumerate(src)]


def filter_map(
    src: Iterable[S], fn: Callable[[int, S], tuple[D, bool]]
) -> list[D]:
    """Apply ``fn(index, item)`` and keep the values whose flag is true."""
    result = []
    for i, item in enumerate(src):
        value, keep = fn(i, item)
        if keep:
            result.append(value)
    return result


def reverse(src: Sequence[S]) -> list[S]:
    """Return a new list with the elements in reverse order."""
    return list(reversed(src))


def reverse_self(src: MutableSequence[S]) -> None:
    """Reverse ``src`` in place."""
    src.reverse()


def delete(src: Sequence[S], index: int) -> list[S]:
    """Return a new list without the element at ``index``."""
    length = len(src)
    if index < 0 or index >= length:
        raise IndexOutOfRangeError(length, index)
    return [*src[:index], *src[index + 1:]]