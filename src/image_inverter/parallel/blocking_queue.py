"""Unbounded thread-safe FIFO with a blocking pop.

One lock guards the deque. It is held only for the append/popleft itself,
never while a caller works on an item it popped.
"""

import threading
from collections import deque
from typing import Deque, Generic, TypeVar

T = TypeVar("T")


class BlockingQueue(Generic[T]):
    """FIFO queue shared by one producer and any number of consumers.

    - ``push`` never blocks and always succeeds (no capacity bound).
    - ``pop`` blocks until an item is available, then removes and returns the
      head. Each item is handed to exactly one caller.
    - Every push wakes one waiting consumer, if there is one.
    """

    def __init__(self) -> None:
        self._items: Deque[T] = deque()
        self._not_empty = threading.Condition(threading.Lock())
        self._pushed = 0
        self._popped = 0

    def push(self, item: T) -> None:
        """Append item to the tail and wake one waiting consumer."""
        with self._not_empty:
            self._items.append(item)
            self._pushed += 1
            self._not_empty.notify()

    def pop(self) -> T:
        """Remove and return the head item, blocking while the queue is empty."""
        with self._not_empty:
            # wait() may return without a matching push; re-check before taking
            while not self._items:
                self._not_empty.wait()
            item = self._items.popleft()
            self._popped += 1
            return item

    def qsize(self) -> int:
        """Number of items currently queued."""
        with self._not_empty:
            return len(self._items)

    def __len__(self) -> int:
        return self.qsize()

    def empty(self) -> bool:
        return self.qsize() == 0

    @property
    def pushed_count(self) -> int:
        """Total number of items ever pushed."""
        with self._not_empty:
            return self._pushed

    @property
    def popped_count(self) -> int:
        """Total number of items ever popped."""
        with self._not_empty:
            return self._popped

    def get_stats(self) -> dict:
        """Get a consistent snapshot of queue counters.

        Returns:
            Dict with depth, pushed and popped
        """
        with self._not_empty:
            return {
                "depth": len(self._items),
                "pushed": self._pushed,
                "popped": self._popped,
            }
