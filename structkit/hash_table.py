"""Separate-chaining hash table keyed by strings, indexed with the djb2 hash."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

DEFAULT_SIZE = 100
_DJB2_SEED = 5381
_WORD_MASK = (1 << 64) - 1


def djb2_hash(key: str, size: int = DEFAULT_SIZE) -> int:
    """Return the djb2 hash of key's UTF-8 bytes, reduced modulo size.

    Bytes are treated as signed chars and the running hash wraps at 64 bits.
    """
    if size <= 0:
        raise ValueError("size must be positive")
    value = _DJB2_SEED
    for byte in key.encode("utf-8"):
        char = byte - 256 if byte >= 128 else byte
        value = ((value << 5) + value + char) & _WORD_MASK
    return value % size


@dataclass(slots=True, eq=False)
class _Entry:
    key: str
    value: Any


class HashTable:
    """A fixed-size table of buckets; each bucket chains its entries newest first."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self._buckets: list[list[_Entry]] = [[] for _ in range(size)]
        self._count = 0

    def _bucket(self, key: str) -> list[_Entry]:
        if not isinstance(key, str):
            raise TypeError(f"keys must be str, not {type(key).__name__}")
        return self._buckets[djb2_hash(key, self.size)]

    def _find(self, key: str) -> Optional[_Entry]:
        return next((entry for entry in self._bucket(key) if entry.key == key), None)

    def insert(self, key: str, value: Any) -> None:
        """Insert a pair, or update the value if the key is already present."""
        entry = self._find(key)
        if entry is not None:
            entry.value = value
            return
        self._bucket(key).insert(0, _Entry(key, value))
        self._count += 1

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value for key, or default when it is absent."""
        entry = self._find(key)
        return default if entry is None else entry.value

    def delete(self, key: str) -> None:
        """Remove key; a missing key is silently ignored."""
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if entry.key == key:
                del bucket[position]
                self._count -= 1
                return

    def __getitem__(self, key: str) -> Any:
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key: str, value: Any) -> None:
        self.insert(key, value)

    def __delitem__(self, key: str) -> None:
        if key not in self:
            raise KeyError(key)
        self.delete(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def items(self) -> Iterator[tuple[str, Any]]:
        """Yield pairs bucket by bucket, newest first within a bucket."""
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key, entry.value

    def __iter__(self) -> Iterator[str]:
        for key, _ in self.items():
            yield key

    def __len__(self) -> int:
        return self._count

    def format_entries(self) -> str:
        """Return one 'Key: k → Value: v' line per entry, in iteration order."""
        return "\n".join(f"Key: {key} → Value: {value}" for key, value in self.items())


def main(argv: Optional[list[str]] = None) -> int:
    """Show insertion, lookup and deletion."""
    table = HashTable()
    table.insert("apple", 3)
    table.insert("banana", 5)
    table.insert("orange", 7)

    print(f"apple: {table.get('apple', -1)}")
    print(f"banana: {table.get('banana', -1)}")

    table.delete("banana")
    print(f"banana: {table.get('banana', -1)}")

    listing = table.format_entries()
    if listing:
        print(listing)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())