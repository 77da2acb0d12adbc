"""Set operations over sequences: difference, intersection and union."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import TypeVar

from ekit.search import contains_func

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

EqualFunc = Callable[[T, T], bool]


def _unique(items: Iterable[H]) -> list[H]:
    return list(dict.fromkeys(items))


def _deduplicate_func(data: Sequence[T], equal: EqualFunc) -> list[T]:
    """Drop elements that match a later one, keeping the last occurrence."""
    return [
        item
        for position, item in enumerate(data)
        if not contains_func(data[position + 1:], item, equal)
    ]


def diff_set(src: Iterable[H], dst: Iterable[H]) -> list[H]:
    """Return the distinct elements of ``src`` that are not in ``dst``."""
    removed = set(dst)
    return _unique(item for item in src if item not in removed)


def diff_set_func(
    src: Sequence[T], dst: Sequence[T], equal: EqualFunc
) -> list[T]:
    """Return the distinct elements of ``src`` with no match in ``dst``."""
    kept = [item for item in src if not contains_func(dst, item, equal)]
    return _deduplicate_func(kept, equal)


def intersect_set(src: Iterable[H], dst: Iterable[H]) -> list[H]:
    """Return the distinct elements present in both ``src`` and ``dst``."""
    present = set(src)
    return _unique(item for item in dst if item in present)


def intersect_set_func(
    src: Sequence[T], dst: Sequence[T], equal: EqualFunc
) -> list[T]:
    """Return the distinct elements of ``src`` that match one in ``dst``."""
    common = [s for s in src if any(equal(d, s) for d in dst)]
    return _deduplicate_func(common, equal)


def symmetric_diff_set(src: Iterable[H], dst: Iterable[H]) -> list[H]:
    """Return the distinct elements found in exactly one of the inputs."""
    left = dict.fromkeys(src)
    right = dict.fromkeys(dst)
    return [item for item in left if item not in right] + [
        item for item in right if item not in left
    ]


def symmetric_diff_set_func(
    src: Sequence[T], dst: Sequence[T], equal: EqualFunc
) -> list[T]:
    """Return the distinct elements that match in only one of the inputs."""
    common = [s for s in src if any(equal(s, d) for d in dst)]
    result = [item for item in src if not contains_func(common, item, equal)]
    result.extend(
        item for item in dst if not contains_func(common, item, equal)
    )
    return _deduplicate_func(result, equal)


def union_set(src: Iterable[H], dst: Iterable[H]) -> list[H]:
    """Return the distinct elements of both inputs."""
    return _unique([*src, *dst])


def union_set_func(
    src: Sequence[T], dst: Sequence[T], equal: EqualFunc
) -> list[T]:
    """Return the distinct elements of both inputs under ``equal``."""
    return _deduplicate_func([*dst, *src], equal)