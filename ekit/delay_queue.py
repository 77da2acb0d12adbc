"""A bounded blocking queue that releases items only once their delay expires."""

from __future__ import annotations

import threading
import time
from typing import Generic, Protocol, TypeVar, runtime_checkable

from ekit.priority_queue import PriorityQueue, QueueEmptyError, QueueFullError


@runtime_checkable
class Delayable(Protocol):
    """An item that knows how long until it may leave the queue."""

    def delay(self) -> float:
        """Return the seconds left before the item is due; <= 0 means due."""


D = TypeVar("D", bound=Delayable)


def _compare_delay(src: Delayable, dst: Delayable) -> int:
    src_delay = src.delay()
    dst_delay = dst.delay()
    if src_delay > dst_delay:
        return 1
    if src_delay == dst_delay:
        return 0
    return -1


def _deadline(timeout: float | None) -> float | None:
    return None if timeout is None else time.monotonic() + timeout


def _remaining(deadline: float | None) -> float | None:
    return None if deadline is None else deadline - time.monotonic()


class DelayQueue(Generic[D]):
    """Blocking queue of ``Delayable`` items; every item dequeued is due.

    Timing follows the thread wake-ups, so expect millisecond-level slack.
    A ``timeout`` of ``None`` waits without limit; when the timeout passes,
    ``TimeoutError`` is raised.
    """

    def __init__(self, capacity: int) -> None:
        self._queue: PriorityQueue[D] = PriorityQueue(capacity, _compare_delay)
        self._cond = threading.Condition()

    def enqueue(self, item: D, timeout: float | None = None) -> None:
        """Add ``item``, waiting for room until ``timeout`` seconds pass."""
        deadline = _deadline(timeout)
        with self._cond:
            while True:
                remaining = _remaining(deadline)
                if remaining is not None and remaining <= 0:
                    raise TimeoutError("ekit: delay queue enqueue timed out")
                try:
                    self._queue.enqueue(item)
                except QueueFullError:
                    self._cond.wait(remaining)
                    continue
                self._cond.notify_all()
                return

    def dequeue(self, timeout: float | None = None) -> D:
        """Remove and return the first due item, waiting up to ``timeout`` seconds."""
        deadline = _deadline(timeout)
        with self._cond:
            while True:
                remaining = _remaining(deadline)
                if remaining is not None and remaining <= 0:
                    raise TimeoutError("ekit: delay queue dequeue timed out")
                try:
                    head = self._queue.peek()
                except QueueEmptyError:
                    self._cond.wait(remaining)
                    continue
                delay = head.delay()
                if delay <= 0:
                    item = self._queue.dequeue()
                    self._cond.notify_all()
                    return item
                wait = delay if remaining is None else min(delay, remaining)
                self._cond.wait(wait)