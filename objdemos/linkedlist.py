"""Circular doubly linked list in which the list head is itself a node."""

from __future__ import annotations

from typing import Any, Iterator


class ListNode:
    """A list node; a node used as a list head is the list itself."""

    def __init__(self, item: Any = None) -> None:
        self.item = item
        self.next: ListNode = self
        self.prev: ListNode = self

    def add_tail(self, node: ListNode) -> None:
        """Append ``node`` at the end of the list headed by this node."""
        node.next = self
        node.prev = self.prev
        self.prev.next = node
        self.prev = node

    def add_head(self, node: ListNode) -> None:
        """Insert ``node`` at the front of the list headed by this node."""
        node.next = self.next
        node.prev = self
        self.next.prev = node
        self.next = node

    def remove(self) -> None:
        """Unlink this node from whatever list it is in."""
        self.next.prev = self.prev
        self.prev.next = self.next
        self.next = self
        self.prev = self

    def is_empty(self) -> bool:
        return self.next is self

    def head(self) -> ListNode | None:
        """First node of the list, or None if it is empty."""
        return None if self.is_empty() else self.next

    def tail(self) -> ListNode | None:
        """Last node of the list, or None if it is empty."""
        return None if self.is_empty() else self.prev

    def __iter__(self) -> Iterator[ListNode]:
        """Yield the nodes front to back; the yielded node may be removed."""
        node = self.next
        while node is not self:
            following = node.next
            yield node
            node = following

    def __reversed__(self) -> Iterator[ListNode]:
        """Yield the nodes back to front; the yielded node may be removed."""
        node = self.prev
        while node is not self:
            preceding = node.prev
            yield node
            node = preceding