"""Doubly linked list with forward and backward traversal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

from structkit.linked_list import _Chain, _Node, _walk


@dataclass(slots=True, eq=False)
class _DoubleNode(_Node):
    prev: Optional[_DoubleNode] = None


class DoublyLinkedList(_Chain):
    """A list of values linked in both directions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._fill(values, self.insert_back)

    def insert_front(self, value: Any) -> None:
        node = _DoubleNode(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_back(self, value: Any) -> None:
        self._link_back(_DoubleNode(value, prev=self._tail))

    def remove(self, value: Any) -> None:
        """Remove the first node holding value; raise ValueError if absent."""
        node = self._head
        while node is not None and node.data != value:
            node = node.next
        if node is None:
            raise ValueError(f"Value {value} not found.")
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1

    def __iter__(self) -> Iterator[Any]:
        return _walk(self._head)

    def __reversed__(self) -> Iterator[Any]:
        return _walk(self._tail, "prev")

    def __len__(self) -> int:
        return self._size

    def format_forward(self) -> str:
        return " ".join(["Forward:", *map(str, self)])

    def format_backward(self) -> str:
        if self._head is None:
            return "Backward: (empty)"
        return " ".join(["Backward:", *map(str, reversed(self))])


def main(argv: Optional[list[str]] = None) -> int:
    """Show insertions at both ends and a deletion."""
    items = DoublyLinkedList()
    for value in (10, 5):
        items.insert_front(value)
    for value in (20, 30):
        items.insert_back(value)
    print(items.format_forward())
    print(items.format_backward())

    print("Deleting 20...")
    items.remove(20)
    print(items.format_forward())
    print(items.format_backward())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())