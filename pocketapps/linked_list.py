"""A singly linked list of values with merge sort."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("val", "next")

    def __init__(self, val: Any, next: _Node | None = None) -> None:
        self.val = val
        self.next = next


def _split(head: _Node) -> _Node:
    """Return the last node of the first half of the list starting at head."""
    lag = head
    lead = head.next
    while lead is not None and lead.next is not None:
        lead = lead.next
        if lead.next is not None:
            lead = lead.next
            lag = lag.next  # type: ignore[assignment]
    return lag


def _merge(left: _Node | None, right: _Node | None, ascending: bool) -> _Node | None:
    dummy = _Node(None)
    tail = dummy
    while left is not None and right is not None:
        take_left = left.val <= right.val if ascending else left.val >= right.val
        if take_left:
            tail.next, left = left, left.next
        else:
            tail.next, right = right, right.next
        tail = tail.next
    tail.next = left if left is not None else right
    return dummy.next


def _merge_sort(head: _Node | None, ascending: bool) -> _Node | None:
    if head is None or head.next is None:
        return head
    middle = _split(head)
    right = middle.next
    middle.next = None
    return _merge(_merge_sort(head, ascending), _merge_sort(right, ascending), ascending)


class LinkedList:
    """Singly linked list. Out-of-range inserts and removals are ignored."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._length = 0
        tail: _Node | None = None
        for value in values:
            node = _Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._length += 1

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.val
            node = node.next

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            node = node.next  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    def copy(self) -> LinkedList:
        """Return an independent list holding the same values."""
        return LinkedList(self)

    def clear(self) -> None:
        """Remove every node."""
        self._head = None
        self._length = 0

    def push_front(self, value: Any) -> None:
        self._head = _Node(value, self._head)
        self._length += 1

    def push_back(self, value: Any) -> None:
        if self._head is None:
            self.push_front(value)
            return
        self._node_at(self._length - 1).next = _Node(value)
        self._length += 1

    def insert(self, value: Any, index: int) -> None:
        """Insert value so that it ends up at index; ignored if index is out of range."""
        if index < 0 or index > self._length:
            return
        if index == 0:
            self.push_front(value)
            return
        previous = self._node_at(index - 1)
        previous.next = _Node(value, previous.next)
        self._length += 1

    def pop_front(self) -> Any:
        """Remove and return the first value, or return None if the list is empty."""
        if self._head is None:
            return None
        value = self._head.val
        self._head = self._head.next
        self._length -= 1
        return value

    def pop_back(self) -> Any:
        """Remove and return the last value, or return None if the list is empty."""
        if self._head is None:
            return None
        if self._length == 1:
            value = self._head.val
            self.clear()
            return value
        previous = self._node_at(self._length - 2)
        value = previous.next.val  # type: ignore[union-attr]
        previous.next = None
        self._length -= 1
        return value

    def remove(self, index: int) -> Any:
        """Remove and return the value at index; returns None if index is out of range."""
        if index < 0 or index >= self._length:
            return None
        if index == 0:
            return self.pop_front()
        if index == self._length - 1:
            return self.pop_back()
        previous = self._node_at(index - 1)
        target = previous.next
        previous.next = target.next  # type: ignore[union-attr]
        self._length -= 1
        return target.val  # type: ignore[union-attr]

    def sort_ascending(self) -> None:
        self._head = _merge_sort(self._head, True)

    def sort_descending(self) -> None:
        self._head = _merge_sort(self._head, False)