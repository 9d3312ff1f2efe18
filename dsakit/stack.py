"""A fixed-capacity stack of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when taking from an empty stack."""


class BoundedStack:
    """A stack that holds at most ``capacity`` values."""

    def __init__(self, capacity: int, values: Iterable[int] = ()) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        items = list(values)
        if len(items) > capacity:
            raise ValueError(
                f"{len(items)} initial values do not fit in a stack of capacity {capacity}"
            )
        self.capacity = capacity
        self._items = items

    def __iter__(self) -> Iterator[int]:
        """Values from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack({self.capacity!r}, {self._items!r})"

    def push(self, value: int) -> None:
        """Put ``value`` on top. Raises StackOverflowError if the stack is full."""
        if self.is_full():
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value. Raises StackUnderflowError if empty."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self, position: int) -> int:
        """Return the value ``position`` places below the top; 0 is the top.

        Raises IndexError if there is no such value.
        """
        if not 0 <= position < len(self._items):
            raise IndexError(f"no value at position {position}")
        return self._items[-1 - position]

    def top(self) -> int:
        """Return the top value without removing it. Raises StackUnderflowError if empty."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """True if the stack holds no values."""
        return not self._items

    def is_full(self) -> bool:
        """True if the stack holds ``capacity`` values."""
        return len(self._items) == self.capacity