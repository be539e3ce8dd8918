"""Classic data structures (tree, lists, queue, stacks, hash table) and graph shortest paths."""

__version__ = "0.1.0"