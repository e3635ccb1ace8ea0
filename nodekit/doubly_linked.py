"""A doubly linked list with head and tail references."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


class _Node:
    __slots__ = ("data", "next", "prev")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: Optional[_Node] = None
        self.prev: Optional[_Node] = None


class DoublyLinkedList:
    """A doubly linked list; items given at construction are appended in order."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, data: Any) -> None:
        """Put ``data`` before the first item."""
        node = _Node(data)
        if self._head is None:
            self._head = self._tail = node
        else:
            self._head.prev = node
            node.next = self._head
            self._head = node
        self._size += 1

    def push_back(self, data: Any) -> None:
        """Put ``data`` after the last item."""
        node = _Node(data)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            node.prev = self._tail
            self._tail = node
        self._size += 1

    def _unlink(self, node: _Node) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1

    def pop_front(self) -> Any:
        """Remove and return the first item."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._unlink(node)
        return node.data

    def pop_back(self) -> Any:
        """Remove and return the last item."""
        if self._tail is None:
            raise IndexError("pop from an empty list")
        node = self._tail
        self._unlink(node)
        return node.data

    def remove(self, data: Any) -> None:
        """Remove the first item equal to ``data``; ValueError if there is none."""
        if self._head is None:
            raise ValueError("remove from an empty list")
        node = self._head
        while node is not None and node.data != data:
            node = node.next
        if node is None:
            raise ValueError(f"{data!r} not in list")
        self._unlink(node)

    def insert(self, data: Any, pos: int) -> None:
        """Insert ``data`` so that it ends up at index ``pos`` (0 to len)."""
        if pos < 0 or pos > self._size:
            raise IndexError(f"invalid position {pos} for a list of {self._size}")
        if pos == 0:
            self.push_front(data)
        elif pos == self._size:
            self.push_back(data)
        else:
            before = self._head
            for _ in range(pos - 1):
                before = before.next  # type: ignore[union-attr]
            after = before.next  # type: ignore[union-attr]
            node = _Node(data)
            node.prev = before
            node.next = after
            after.prev = node  # type: ignore[union-attr]
            before.next = node  # type: ignore[union-attr]
            self._size += 1

    def __contains__(self, data: Any) -> bool:
        return any(item == data for item in self)

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return self._size

    def front(self) -> Any:
        """Return the first item."""
        if self._head is None:
            raise IndexError("list is empty")
        return self._head.data

    def back(self) -> Any:
        """Return the last item."""
        if self._tail is None:
            raise IndexError("list is empty")
        return self._tail.data

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def _format(self, items: Iterable[Any]) -> str:
        text = "".join(f"{item} " for item in items)
        if self._head is not None and self._tail is not None:
            text += (
                f" ({self._size})  head: ({self._head.data})"
                f"  tail: ({self._tail.data})"
            )
        return text

    def __str__(self) -> str:
        """Items head to tail, then the size, head and tail when not empty."""
        return self._format(self)

    def format_reversed(self) -> str:
        """Like ``str()``, but with the items listed tail to head."""
        return self._format(reversed(self))

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"