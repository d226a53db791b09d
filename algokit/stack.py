"""A fixed-capacity last-in, first-out stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

__all__ = ["BoundedStack", "StackFullError", "StackEmptyError"]

DEFAULT_CAPACITY = 10


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has no room left."""


class StackEmptyError(IndexError):
    """Raised when popping from a stack that holds nothing."""


class BoundedStack(Generic[T]):
    """A stack that holds at most ``capacity`` items.

    Iteration and the string form run from the bottom of the stack to
    the top.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative: {capacity}")
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, value: T) -> None:
        """Put ``value`` on top; raise StackFullError when there is no room."""
        if len(self._items) >= self.capacity:
            raise StackFullError("Stack is Full")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top item; raise StackEmptyError when empty."""
        if not self._items:
            raise StackEmptyError("Stack is Empty")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return "".join(str(item) for item in self._items)