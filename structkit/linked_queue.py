"""First-in, first-out queue built from linked nodes."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from structkit.linked_list import _Chain, _Node, _walk


class LinkedQueue(_Chain):
    """A FIFO queue with constant-time enqueue and dequeue."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._fill(values, self.enqueue)

    def is_empty(self) -> bool:
        return self._head is None

    def enqueue(self, value: Any) -> None:
        self._link_back(_Node(value))

    def dequeue(self) -> Any:
        """Remove and return the front value; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("Queue underflow")
        return self._unlink_front().data

    def peek(self) -> Any:
        """Return the front value; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("Queue is empty")
        return self._head.data

    def clear(self) -> None:
        self._fill((), self.enqueue)

    def __iter__(self) -> Iterator[Any]:
        return _walk(self._head)

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join(map(str, self))


def main(argv: Optional[list[str]] = None) -> int:
    """Show enqueue, dequeue and peek."""
    queue = LinkedQueue([10, 20, 30])
    print(f"Queue (front to rear): {queue}")
    print(f"Dequeued: {queue.dequeue()}")
    print(f"Peek: {queue.peek()}")
    print(f"Queue (front to rear): {queue}")
    queue.clear()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())