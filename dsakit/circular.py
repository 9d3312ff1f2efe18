"""A circular singly linked list whose last node links back to the first."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional

from .singly import Node


class CircularLinkedList:
    """A circular list of integers, kept through a reference to its last node."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._tail: Optional[Node] = None
        for value in values:
            self.insert_end(value)

    def _nodes(self) -> Iterator[Node]:
        tail = self._tail
        if tail is None:
            return
        node = tail.next
        while True:
            assert node is not None
            yield node
            if node is tail:
                return
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"

    def insert_beginning(self, value: int) -> None:
        """Add ``value`` as the new first node."""
        node = Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node

    def insert_end(self, value: int) -> None:
        """Add ``value`` as the new last node."""
        self.insert_beginning(value)
        assert self._tail is not None
        self._tail = self._tail.next

    def delete_beginning(self) -> int:
        """Remove the first node and return its value.

        Raises IndexError if the list is empty.
        """
        tail = self._tail
        if tail is None:
            raise IndexError("delete from an empty list")
        head = tail.next
        assert head is not None
        if head is tail:
            self._tail = None
        else:
            tail.next = head.next
        return head.data

    def delete_end(self) -> int:
        """Remove the last node and return its value.

        Raises IndexError if the list is empty.
        """
        tail = self._tail
        if tail is None:
            raise IndexError("delete from an empty list")
        if tail.next is tail:
            self._tail = None
            return tail.data
        previous = tail.next
        assert previous is not None
        while previous.next is not tail:
            previous = previous.next
            assert previous is not None
        previous.next = tail.next
        self._tail = previous
        return tail.data

    def delete_after(self, target: int) -> int:
        """Remove the node following the first node holding ``target``; return its value.

        The node after the last one is the first. Raises ValueError if
        ``target`` is not in the list.
        """
        for node in self._nodes():
            if node.data == target:
                removed = node.next
                assert removed is not None
                if removed is node:
                    self._tail = None
                else:
                    node.next = removed.next
                    if removed is self._tail:
                        self._tail = node
                return removed.data
        raise ValueError(f"{target!r} is not in the list")

    def clear(self) -> None:
        """Remove every node."""
        self._tail = None