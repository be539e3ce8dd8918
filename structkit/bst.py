"""Binary search tree holding unique, ordered keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

_DEMO_VALUES = (50, 30, 70, 20, 40, 60, 80)


@dataclass(slots=True)
class _Node:
    data: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """An unbalanced binary search tree; duplicate keys are ignored."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add a key; a key already present leaves the tree unchanged."""
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return
        node = self._root
        while True:
            if value < node.data:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            elif value > node.data:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
            else:
                return
        self._size += 1

    def search(self, key: Any) -> bool:
        """Return whether the key is in the tree."""
        node = self._root
        while node is not None:
            if key == node.data:
                return True
            node = node.left if key < node.data else node.right
        return False

    def __contains__(self, key: Any) -> bool:
        return self.search(key)

    def delete(self, key: Any) -> None:
        """Remove a key; a missing key is silently ignored."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.data != key:
            parent = node
            node = node.left if key < node.data else node.right
        if node is None:
            return

        if node.left is not None and node.right is not None:
            # Replace with the in-order successor, then unlink the successor.
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.data = successor.data
            parent, node = successor_parent, successor

        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1

    def minimum(self) -> Any:
        """Return the smallest key; raise ValueError on an empty tree."""
        node = self._root
        if node is None:
            raise ValueError("minimum of an empty tree")
        while node.left is not None:
            node = node.left
        return node.data

    def inorder(self) -> list[Any]:
        """Return the keys in sorted order."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        pending: list[_Node] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.data
            node = node.right

    def __len__(self) -> int:
        return self._size


def _format(tree: BinarySearchTree) -> str:
    return " ".join(str(value) for value in tree)


def main(argv: Optional[list[str]] = None) -> int:
    """Build a sample tree and show deletions of a leaf, a one-child and a two-child node."""
    tree = BinarySearchTree(_DEMO_VALUES)
    print(f"Inorder traversal: {_format(tree)}")
    for key in (20, 30, 50):
        print(f"Deleting {key}...")
        tree.delete(key)
        print(_format(tree))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())