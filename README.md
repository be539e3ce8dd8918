# structkit

A small collection of classic data structures and graph shortest-path
algorithms, written as ordinary Python containers. It has no dependencies
outside the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `structkit.bst` | `BinarySearchTree`: an unbalanced binary search tree that ignores duplicate keys |
| `structkit.linked_list` | `LinkedList`: a singly linked list with in-place reversal |
| `structkit.doubly_linked_list` | `DoublyLinkedList`: a doubly linked list you can walk either way |
| `structkit.linked_queue` | `LinkedQueue`: a FIFO queue built on linked nodes |
| `structkit.stack` | `ArrayStack` (fixed capacity, default 100, raises `StackOverflowError` when full) and `LinkedStack` (unbounded) |
| `structkit.hash_table` | `HashTable`: separate chaining over a fixed number of buckets, indexed with the djb2 string hash (`djb2_hash`) |
| `structkit.graph` | `Graph` (undirected) with Dijkstra's algorithm, and `BellmanGraph` (directed) with Bellman-Ford, which raises `NegativeCycleError` on a negative cycle |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from structkit.bst import BinarySearchTree
from structkit.linked_list import LinkedList
from structkit.doubly_linked_list import DoublyLinkedList
from structkit.linked_queue import LinkedQueue
from structkit.stack import ArrayStack, LinkedStack
from structkit.hash_table import HashTable
from structkit.graph import Graph, BellmanGraph

tree = BinarySearchTree([50, 30, 70, 20, 40, 60, 80])
tree.delete(50)
print(tree.inorder())      # [20, 30, 40, 60, 70, 80]
print(40 in tree, tree.minimum(), len(tree))

items = LinkedList([10, 20, 30])
items.insert_front(5)
items.reverse()
print(items)               # 30 -> 20 -> 10 -> 5 -> NULL

both_ways = DoublyLinkedList([5, 10, 20, 30])
both_ways.remove(20)
print(both_ways.format_forward())   # Forward: 5 10 30
print(both_ways.format_backward())  # Backward: 30 10 5

queue = LinkedQueue([10, 20, 30])
print(queue.dequeue(), queue.peek())  # 10 20

stack = ArrayStack(100)
stack.push(10)
stack.push(20)
print(stack.pop())         # 20

linked = LinkedStack()
linked.push(1)
print(linked.peek())       # 1

table = HashTable(100)
table["apple"] = 3
print(table.get("banana", -1))   # -1

g = Graph(6)
g.add_edge(0, 1, 7)
g.add_edge(0, 2, 9)
g.add_edge(2, 5, 2)
print(g.dijkstra(0))       # unreachable vertices get 1000000

h = BellmanGraph(5)
h.add_edge(0, 1, -1)
h.add_edge(1, 4, 2)
h.add_edge(4, 3, -3)
print(h.bellman_ford(0))
```

## Behaviour worth knowing

- `BinarySearchTree.insert` ignores a key that is already present, and
  `delete` ignores a key that is absent. `minimum` raises `ValueError` on an
  empty tree. Iterating the tree yields keys in sorted order.
- `LinkedList.remove` and `DoublyLinkedList.remove` take out the first node
  holding the value and raise `ValueError` if there is none.
- `LinkedQueue.dequeue`/`peek` and the stacks' `pop`/`peek` raise
  `IndexError` when empty. Iterating a stack goes from top to bottom.
- `HashTable` keys must be `str` (other types raise `TypeError`). `get`
  returns a default (`None` unless given) for a missing key, `delete`
  ignores a missing key, while `table[key]` and `del table[key]` raise
  `KeyError`. `items()` yields pairs bucket by bucket, newest first within a
  bucket; `format_entries()` renders them as `Key: k → Value: v` lines.
- `djb2_hash(key, size)` hashes the UTF-8 bytes of the key, with the running
  value wrapping at 64 bits, and reduces it modulo `size`.
- `Graph` and `BellmanGraph` accept between 0 and 100 vertices; vertex
  numbers outside the graph raise `IndexError`. Distances to unreachable
  vertices are reported as `INF` (1000000). `Graph.neighbors` returns
  `(vertex, weight)` pairs, most recently added first.

## Demo commands

Each module ships a short demonstration that builds a structure, changes
it and prints the result. The commands take no options:

```
structkit-bst
structkit-linked-list
structkit-dlist
structkit-queue
structkit-stack
structkit-hash-table
structkit-graph
```

## What it does not do

The structures are in-memory only: nothing is persisted, none of the
containers is thread-safe, and the binary search tree is not self-balancing.