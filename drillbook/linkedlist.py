"""Singly linked lists of integers and operations on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None


def _values(head: Optional[ListNode]) -> Iterator[int]:
    while head is not None:
        yield head.val
        head = head.next


def format_list(head: Optional[ListNode]) -> str:
    """Render the values reachable from ``head`` separated by spaces."""
    return " ".join(str(value) for value in _values(head))


class LinkedList:
    """A singly linked list that keeps track of its head and tail."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Optional[ListNode] = None
        self.tail: Optional[ListNode] = None
        for value in values:
            self.append(value)

    def append(self, value: int) -> None:
        """Add ``value`` at the end of the list."""
        node = ListNode(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node

    def __iter__(self) -> Iterator[int]:
        return _values(self.head)

    def format(self) -> str:
        """Render the list's values separated by spaces."""
        return format_list(self.head)


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Unlink every node holding ``val`` and return the new head."""
    while head is not None and head.val == val:
        head = head.next
    node = head
    while node is not None:
        if node.next is not None and node.next.val == val:
            node.next = node.next.next
        else:
            node = node.next
    return head