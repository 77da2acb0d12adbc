"""A value holder whose reads and writes are atomic."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

T = TypeVar("T")


class AtomicValue(Generic[T]):
    """Holds one value with atomic load, store, swap and compare-and-swap."""

    def __init__(self, value: T = None) -> None:  # type: ignore[assignment]
        self._value = value
        self._lock = threading.Lock()

    def load(self) -> T:
        """Return the current value."""
        with self._lock:
            return self._value

    def store(self, value: T) -> None:
        """Replace the current value."""
        with self._lock:
            self._value = value

    def swap(self, new: T) -> T:
        """Store ``new`` and return the previous value."""
        with self._lock:
            old, self._value = self._value, new
            return old

    def compare_and_swap(self, old: T, new: T) -> bool:
        """Store ``new`` if the current value is ``old``; report whether it did."""
        with self._lock:
            current = self._value
            if current is old or current == old:
                self._value = new
                return True
            return False