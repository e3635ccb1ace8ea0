"""Singly linked nodes and the classic algorithms that work on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """One node of a singly linked list.

    Nodes compare by identity, so cycles are safe to reason about.
    """

    val: Any = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from this node to the end of the chain."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def _values(head: Optional[ListNode]) -> Iterable[Any]:
    return head if head is not None else ()


def from_iterable(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a chain of nodes holding ``values``; ``None`` when empty."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: Optional[ListNode]) -> list:
    """Return the values of an acyclic chain as a list."""
    return list(_values(head))


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def remove_elements(head: Optional[ListNode], val: Any) -> Optional[ListNode]:
    """Return a new chain without the nodes whose value equals ``val``."""
    return from_iterable(value for value in _values(head) if value != val)


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the chain in place and return its new head."""
    prev: Optional[ListNode] = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted chains into one sorted chain.

    On equal values the node from ``list1`` comes first.
    """
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the values read the same both ways; the chain is left intact."""
    if head is None or head.next is None:
        return True

    slow: ListNode = head
    fast: Optional[ListNode] = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next

    back = reverse_list(slow)
    try:
        return all(a == b for a, b in zip(head, _values(back)))
    finally:
        reverse_list(back)


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop repeated neighbours of a sorted chain in place and return its head."""
    node = head
    while node is not None and node.next is not None:
        if node.val == node.next.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; the second of the two middles for even lengths."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    return slow