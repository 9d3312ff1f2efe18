"""Singly linked lists, list comparison and Floyd cycle detection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """A list node holding an integer and a link to the next node."""

    data: int
    next: Optional[Node] = field(default=None, repr=False)


class SinglyLinkedList:
    """A singly linked list of integers reached through ``head``."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Optional[Node] = None
        for value in reversed(list(values)):
            self.head = Node(value, self.head)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _find(self, target: int) -> Node:
        for node in self._nodes():
            if node.data == target:
                return node
        raise ValueError(f"{target!r} is not in the list")

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"

    def insert_beginning(self, value: int) -> None:
        """Add ``value`` as the new first node."""
        self.head = Node(value, self.head)

    def insert_end(self, value: int) -> None:
        """Add ``value`` as the new last node."""
        new_node = Node(value)
        last = None
        for last in self._nodes():
            pass
        if last is None:
            self.head = new_node
        else:
            last.next = new_node

    def insert_before(self, value: int, target: int) -> None:
        """Insert ``value`` before the first node holding ``target``.

        Raises ValueError if ``target`` is not in the list.
        """
        previous: Optional[Node] = None
        for node in self._nodes():
            if node.data == target:
                new_node = Node(value, node)
                if previous is None:
                    self.head = new_node
                else:
                    previous.next = new_node
                return
            previous = node
        raise ValueError(f"{target!r} is not in the list")

    def insert_after(self, value: int, target: int) -> None:
        """Insert ``value`` after the first node holding ``target``.

        Raises ValueError if ``target`` is not in the list.
        """
        node = self._find(target)
        node.next = Node(value, node.next)

    def delete_beginning(self) -> int:
        """Remove the first node and return its value.

        Raises IndexError if the list is empty.
        """
        if self.head is None:
            raise IndexError("delete from an empty list")
        value = self.head.data
        self.head = self.head.next
        return value

    def delete_end(self) -> int:
        """Remove the last node and return its value.

        Raises IndexError if the list is empty.
        """
        if self.head is None:
            raise IndexError("delete from an empty list")
        if self.head.next is None:
            value = self.head.data
            self.head = None
            return value
        previous = self.head
        while previous.next is not None and previous.next.next is not None:
            previous = previous.next
        last = previous.next
        assert last is not None
        previous.next = None
        return last.data

    def delete_value(self, value: int) -> None:
        """Remove the first node holding ``value``.

        Raises ValueError if ``value`` is not in the list.
        """
        previous: Optional[Node] = None
        for node in self._nodes():
            if node.data == value:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                return
            previous = node
        raise ValueError(f"{value!r} is not in the list")

    def delete_after(self, target: int) -> int:
        """Remove the node following the first node holding ``target``; return its value.

        Raises ValueError if ``target`` is absent or is the last node.
        """
        node = self._find(target)
        removed = node.next
        if removed is None:
            raise ValueError(f"no node follows {target!r}")
        node.next = removed.next
        return removed.data

    def clear(self) -> None:
        """Remove every node."""
        self.head = None

    def sort(self) -> None:
        """Sort the values in ascending order, keeping the nodes in place."""
        nodes = list(self._nodes())
        for node, value in zip(nodes, sorted(node.data for node in nodes)):
            node.data = value


def lists_equal(a: Iterable[int], b: Iterable[int]) -> bool:
    """Compare two sequences element by element over their common length.

    Items beyond the end of the shorter sequence are not compared.
    """
    return all(x == y for x, y in zip(a, b))


def format_list(values: Iterable[int]) -> str:
    """Render values as zero-padded boxes joined by arrows, or 'Empty List'."""
    items = list(values)
    if not items:
        return "Empty List"
    return "--->".join(f"| {value:05d} |" for value in items)


def _meeting_point(head: Optional[Node]) -> Optional[Node]:
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        assert slow is not None
        slow = slow.next
        if fast is slow:
            return slow
    return None


def has_cycle(head: Optional[Node]) -> bool:
    """Return True if following ``next`` links from ``head`` loops forever."""
    return _meeting_point(head) is not None


def cycle_start(head: Optional[Node]) -> Optional[Node]:
    """Return the first node of the cycle reachable from ``head``, or None."""
    meeting = _meeting_point(head)
    if meeting is None:
        return None
    walker = head
    while walker is not meeting:
        assert walker is not None and meeting is not None
        walker = walker.next
        meeting = meeting.next
    return walker