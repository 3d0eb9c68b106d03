"""A stack that reports its minimum in constant time."""

from __future__ import annotations


class MinStack:
    """Stack of integers that also tracks the smallest element held."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._minima: list[int] = []

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        self._items.append(val)
        self._minima.append(min(val, self._minima[-1]) if self._minima else val)

    def pop(self) -> None:
        """Remove the top element."""
        if not self._items:
            raise IndexError("pop from empty stack")
        self._items.pop()
        self._minima.pop()

    def top(self) -> int:
        """Return the top element."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def get_min(self) -> int:
        """Return the smallest element on the stack."""
        if not self._minima:
            raise IndexError("minimum of empty stack")
        return self._minima[-1]