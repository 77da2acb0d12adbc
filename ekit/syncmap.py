"""A dictionary that is safe to share between threads."""

from __future__ import annotations

import threading
from collections.abc import Callable, Hashable
from typing import Any, Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class SyncMap(Generic[K, V]):
    """Thread-safe key/value store.

    A missing key and a key stored with the value ``None`` are different:
    the second one is reported as present.
    """

    def __init__(self) -> None:
        self._data: dict[K, V] = {}
        self._lock = threading.Lock()

    def load(self, key: K) -> tuple[V | None, bool]:
        """Return ``(value, found)`` for ``key``."""
        with self._lock:
            if key in self._data:
                return self._data[key], True
            return None, False

    def store(self, key: K, value: V) -> None:
        """Set the value for ``key``."""
        with self._lock:
            self._data[key] = value

    def load_or_store(self, key: K, value: V) -> tuple[V, bool]:
        """Return the existing value and True, or store ``value`` and return False."""
        with self._lock:
            if key in self._data:
                return self._data[key], True
            self._data[key] = value
            return value, False

    def load_and_delete(self, key: K) -> tuple[V | None, bool]:
        """Remove ``key`` and return ``(previous value, was present)``."""
        with self._lock:
            if key in self._data:
                return self._data.pop(key), True
            return None, False

    def delete(self, key: K) -> None:
        """Remove ``key`` if it is present."""
        with self._lock:
            self._data.pop(key, None)

    def for_each(self, fn: Callable[[K, V], Any]) -> None:
        """Call ``fn(key, value)`` for each entry until it returns a false value."""
        with self._lock:
            entries = list(self._data.items())
        for key, value in entries:
            if not fn(key, value):
                break