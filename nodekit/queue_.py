"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Iterator


class Queue:
    """A FIFO queue; items given at construction are enqueued in order."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: deque = deque(items)

    def enqueue(self, data: Any) -> None:
        """Add ``data`` at the back."""
        self._items.append(data)

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front item without removing it."""
        if not self._items:
            raise IndexError("front of an empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield items from front to back."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"