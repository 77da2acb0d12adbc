"""Membership and index lookups over sequences."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

EqualFunc = Callable[[T, T], bool]


def contains(src: Iterable[T], dst: T) -> bool:
    """Report whether ``dst`` appears in ``src``."""
    return any(item == dst for item in src)


def contains_func(src: Iterable[T], dst: T, equal: EqualFunc) -> bool:
    """Report whether ``src`` holds an element equal to ``dst`` under ``equal``."""
    return any(equal(item, dst) for item in src)


def contains_any(src: Iterable[H], dst: Iterable[H]) -> bool:
    """Report whether any element of ``dst`` appears in ``src``."""
    present = set(src)
    return any(item in present for item in dst)


def contains_any_func(
    src: Sequence[T], dst: Iterable[T], equal: EqualFunc
) -> bool:
    """Report whether any element of ``dst`` matches one in ``src``."""
    return any(equal(s, d) for d in dst for s in src)


def contains_all(src: Iterable[H], dst: Iterable[H]) -> bool:
    """Report whether every element of ``dst`` appears in ``src``."""
    present = set(src)
    return all(item in present for item in dst)


def contains_all_func(
    src: Sequence[T], dst: Iterable[T], equal: EqualFunc
) -> bool:
    """Report whether every element of ``dst`` matches one in ``src``."""
    return all(contains_func(src, d, equal) for d in dst)


def index(src: Iterable[T], dst: T) -> int:
    """Return the index of the first element equal to ``dst``, or -1."""
    return index_func(src, dst, lambda a, b: a == b)


def index_func(src: Iterable[T], dst: T, equal: EqualFunc) -> int:
    """Return the index of the first element matching ``dst``, or -1."""
    return next((i for i, item in enumerate(src) if equal(item, dst)), -1)


def last_index(src: Sequence[T], dst: T) -> int:
    """Return the index of the last element equal to ``dst``, or -1."""
    return last_index_func(src, dst, lambda a, b: a == b)


def last_index_func(src: Sequence[T], dst: T, equal: EqualFunc) -> int:
    """Return the index of the last element matching ``dst``, or -1."""
    return next(
        (i for i in reversed(range(len(src))) if equal(dst, src[i])), -1
    )


def index_all(src: Iterable[T], dst: T) -> list[int]:
    """Return the indexes of every element equal to ``dst``."""
    return index_all_func(src, dst, lambda a, b: a == b)


def index_all_func(src: Iterable[T], dst: T, equal: EqualFunc) -> list[int]:
    """Return the indexes of every element matching ``dst``."""
    return [i for i, item in enumerate(src) if equal(item, dst)]