"""Singly linked list with in-place reversal, and the node chain it is built on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(slots=True, eq=False)
class _Node:
    data: Any
    next: Optional[_Node] = None


def _walk(node: Optional[_Node], step: str = "next") -> Iterator[Any]:
    """Yield the data of each node, following the link named by step."""
    while node is not None:
        yield node.data
        node = getattr(node, step)


class _Chain:
    """Head, tail and size bookkeeping shared by the linked containers."""

    _head: Optional[_Node]
    _tail: Optional[_Node]
    _size: int

    def _fill(self, values: Iterable[Any], add: Callable[[Any], None]) -> None:
        self._head = self._tail = None
        self._size = 0
        for value in values:
            add(value)

    def _link_back(self, node: _Node) -> None:
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _unlink_front(self) -> _Node:
        node = self._head
        assert node is not None
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node


class LinkedList(_Chain):
    """A list of values linked in one direction."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._fill(values, self.insert_back)

    def insert_front(self, value: Any) -> None:
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def insert_back(self, value: Any) -> None:
        self._link_back(_Node(value))

    def remove(self, value: Any) -> None:
        """Remove the first node holding value; raise ValueError if absent."""
        prev: Optional[_Node] = None
        node = self._head
        while node is not None and node.data != value:
            prev, node = node, node.next
        if node is None:
            raise ValueError(f"Value {value} not found.")
        if prev is None:
            self._unlink_front()
            return
        prev.next = node.next
        if node is self._tail:
            self._tail = prev
        self._size -= 1

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        prev: Optional[_Node] = None
        node = self._head
        self._tail = node
        while node is not None:
            node.next, prev, node = prev, node, node.next
        self._head = prev

    def __iter__(self) -> Iterator[Any]:
        return _walk(self._head)

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " -> ".join([*map(str, self), "NULL"])


def main(argv: Optional[list[str]] = None) -> int:
    """Show insertion, deletion, a failed deletion and reversal."""
    items = LinkedList([10, 20])
    items.insert_front(5)
    items.insert_back(30)
    print(f"List: {items}")

    items.remove(20)
    print(f"List: {items}")

    try:
        items.remove(99)
    except ValueError as error:
        print(error)

    items.reverse()
    print(f"List: {items}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())