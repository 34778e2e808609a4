"""
Singly linked list used as a hash table bucket.
No tail pointer and no length counter: append walks to the last node.
"""

from typing import Any, Callable, Iterator, List, Optional


class ListNode:
    __slots__ = ("value", "next")

    def __init__(self, value: Any):
        self.value = value
        self.next: Optional["ListNode"] = None

    def __repr__(self):
        return f"ListNode({self.value!r})"


class LinkedList:
    def __init__(self):
        self.head: Optional[ListNode] = None

    def append(self, value: Any) -> ListNode:
        """Link a new node holding value after the last node and return it."""
        node = ListNode(value)
        if self.head is None:
            self.head = node
            return node
        current = self.head
        while current.next is not None:
            current = current.next
        current.next = node
        return node

    def find(self, predicate: Callable[[Any], bool]) -> Optional[ListNode]:
        """Return the first node whose value satisfies predicate, else None."""
        current = self.head
        while current is not None:
            if predicate(current.value):
                return current
            current = current.next
        return None

    def remove(self, predicate: Callable[[Any], bool]) -> Optional[Any]:
        """
        Unlink the first node whose value satisfies predicate.
        Returns the removed value, or None when nothing matched.
        """
        if self.head is None:
            return None
        if predicate(self.head.value):
            removed = self.head
            self.head = removed.next
            return removed.value
        current = self.head
        while current.next is not None:
            if predicate(current.next.value):
                removed = current.next
                current.next = removed.next
                return removed.value
            current = current.next
        return None

    def for_each(self, callback: Callable[[Any], Any]) -> None:
        for value in self:
            callback(value)

    def to_list(self) -> List[Any]:
        values = []
        self.for_each(values.append)
        return values

    def __iter__(self) -> Iterator[Any]:
        current = self.head
        while current is not None:
            yield current.value
            current = current.next

    def __repr__(self):
        return " -> ".join(repr(v) for v in self) or "<empty>"
