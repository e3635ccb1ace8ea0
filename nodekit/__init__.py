"""Linked nodes, stacks, queues, linked lists and bracket checks."""

__version__ = "0.1.0"
__all__ = [
    "listnode",
    "stack",
    "queue_",
    "brackets",
    "stack_commands",
    "singly_linked",
    "doubly_linked",
]