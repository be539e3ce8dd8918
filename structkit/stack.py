"""Last-in, first-out stacks: a bounded array stack and a linked stack."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

DEFAULT_CAPACITY = 100


class StackOverflowError(Exception):
    """Raised when pushing onto a full bounded stack."""


class ArrayStack:
    """A stack with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def push(self, value: Any) -> None:
        """Push a value; raise StackOverflowError when the stack is full."""
        if self.is_full():
            raise StackOverflowError("Stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("Stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("Stack is empty")
        return self._items[-1]

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)


@dataclass(slots=True, eq=False)
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, value: Any) -> None:
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value; raise IndexError when empty."""
        if self._top is None:
            raise IndexError("Stack underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        """Return the top value; raise IndexError when empty."""
        if self._top is None:
            raise IndexError("Stack is empty")
        return self._top.data

    def clear(self) -> None:
        self._top = None
        self._size = 0

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)


def _demo(stack: ArrayStack | LinkedStack) -> None:
    for value in (10, 20, 30):
        stack.push(value)
    print(f"Stack (top to bottom): {stack}")
    print(f"Popped: {stack.pop()}")
    print(f"Top: {stack.peek()}")
    print(f"Stack (top to bottom): {stack}")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the same push, pop and peek sequence on both stack kinds."""
    _demo(ArrayStack())
    _demo(LinkedStack())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())