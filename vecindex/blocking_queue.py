"""A bounded FIFO queue whose reads wait for items and writes wait for room."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any


class BlockingQueue:
    """Thread-safe FIFO queue with a capacity of 32 unless changed."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._not_full = threading.Condition(self._lock)
        self._not_empty = threading.Condition(self._lock)
        self._items: deque[Any] = deque()
        self._capacity = 32

    def put(self, item: Any) -> None:
        """Append ``item``, waiting while the queue is full."""
        with self._not_full:
            self._not_full.wait_for(lambda: len(self._items) < self._capacity)
            self._items.append(item)
            self._not_empty.notify_all()

    def take(self) -> Any:
        """Remove and return the oldest item, waiting while the queue is empty."""
        with self._not_empty:
            self._not_empty.wait_for(lambda: bool(self._items))
            item = self._items.popleft()
            self._not_full.notify_all()
            return item

    def front(self) -> Any:
        """Return the oldest item without removing it, waiting if empty."""
        with self._not_empty:
            self._not_empty.wait_for(lambda: bool(self._items))
            return self._items[0]

    def back(self) -> Any:
        """Return the newest item without removing it, waiting if empty."""
        with self._not_empty:
            self._not_empty.wait_for(lambda: bool(self._items))
            return self._items[-1]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def empty(self) -> bool:
        with self._lock:
            return not self._items

    def set_capacity(self, capacity: int) -> None:
        """Change the capacity; values that are not positive are ignored."""
        if capacity > 0:
            with self._lock:
                self._capacity = capacity
                self._not_full.notify_all()