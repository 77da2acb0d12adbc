"""Priority queues ordered by a three-way comparator."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

Comparator = Callable[[T, T], int]
"""Return -1 when ``src < dst``, 0 when they are equal, 1 when ``src > dst``."""


class QueueFullError(Exception):
    """Raised when an item is added to a bounded queue that is full."""

    def __init__(self) -> None:
        super().__init__("ekit: queue is out of capacity")


class QueueEmptyError(Exception):
    """Raised when an item is read from an empty queue."""

    def __init__(self) -> None:
        super().__init__("ekit: queue is empty")


class PriorityQueue(Generic[T]):
    """Binary min-heap; the smallest item under ``compare`` comes out first.

    A ``capacity`` of zero or less makes the queue unbounded.
    """

    def __init__(self, capacity: int, compare: Comparator) -> None:
        self._capacity = capacity if capacity > 0 else 0
        self._compare = compare
        # Slot 0 is unused so that children of node i sit at 2i and 2i + 1.
        self._data: list[T | None] = [None]

    def __len__(self) -> int:
        return len(self._data) - 1

    def cap(self) -> int:
        """Return the capacity, or 0 for an unbounded queue."""
        return self._capacity

    def _is_full(self) -> bool:
        return self._capacity > 0 and len(self) == self._capacity

    def peek(self) -> T:
        """Return the head item without removing it."""
        if not len(self):
            raise QueueEmptyError()
        return self._data[1]  # type: ignore[return-value]

    def enqueue(self, item: T) -> None:
        """Add ``item``, raising ``QueueFullError`` if the queue is full."""
        if self._is_full():
            raise QueueFullError()
        data = self._data
        data.append(item)
        node = len(data) - 1
        parent = node // 2
        while parent > 0 and self._compare(data[node], data[parent]) < 0:
            data[node], data[parent] = data[parent], data[node]
            node = parent
            parent = node // 2

    def dequeue(self) -> T:
        """Remove and return the head item."""
        if not len(self):
            raise QueueEmptyError()
        data = self._data
        head = data[1]
        last = data.pop()
        if len(data) > 1:
            data[1] = last
            self._sift_down(1)
        return head  # type: ignore[return-value]

    def _sift_down(self, node: int) -> None:
        data = self._data
        size = len(data) - 1
        while True:
            smallest = node
            left, right = node * 2, node * 2 + 1
            if left <= size and self._compare(data[left], data[smallest]) < 0:
                smallest = left
            if right <= size and self._compare(data[right], data[smallest]) < 0:
                smallest = right
            if smallest == node:
                return
            data[node], data[smallest] = data[smallest], data[node]
            node = smallest


class ConcurrentPriorityQueue(Generic[T]):
    """A ``PriorityQueue`` whose operations are safe across threads."""

    def __init__(self, capacity: int, compare: Comparator) -> None:
        self._queue: PriorityQueue[T] = PriorityQueue(capacity, compare)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._queue)

    def cap(self) -> int:
        """Return the capacity, or 0 for an unbounded queue."""
        with self._lock:
            return self._queue.cap()

    def peek(self) -> T:
        """Return the head item without removing it."""
        with self._lock:
            return self._queue.peek()

    def enqueue(self, item: T) -> None:
        """Add ``item``, raising ``QueueFullError`` if the queue is full."""
        with self._lock:
            self._queue.enqueue(item)

    def dequeue(self) -> T:
        """Remove and return the head item."""
        with self._lock:
            return self._queue.dequeue()