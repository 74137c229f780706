"""A separate-chaining hash table with a pluggable hash function."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator
from typing import Any

HashFunction = Callable[[Any, int], int]

DEFAULT_TABLE_SIZE = 919

_BASE = 27183
_SEED = 31415
_WORD = 1 << 64


def string_hash(key: str, table_size: int) -> int:
    """Hash a string into ``range(table_size)`` with a rolling universal hash.

    Bytes of the UTF-8 encoding are taken as signed 8-bit values and the
    arithmetic wraps at 64 bits.
    """
    if table_size < 2:
        raise ValueError("table size must be at least 2")
    hash_val = 0
    random_val = _SEED
    for byte in key.encode("utf-8"):
        char = byte - 256 if byte >= 128 else byte
        hash_val = ((hash_val * random_val + char) % _WORD) % table_size
        random_val = ((random_val * _BASE) % _WORD) % (table_size - 1)
    return hash_val


class HashTable:
    """Maps keys to values in a fixed number of buckets.

    New keys go to the front of their bucket; iteration walks the buckets in
    order and each bucket from front to back.
    """

    def __init__(self, size: int = DEFAULT_TABLE_SIZE, hash_fn: HashFunction = string_hash) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self._hash_fn = hash_fn
        self._buckets: list[list[list[Any]]] = [[] for _ in range(size)]
        self._count = 0

    @property
    def size(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    def _bucket(self, key: Hashable) -> list[list[Any]]:
        idx = self._hash_fn(key, len(self._buckets))
        if not 0 <= idx < len(self._buckets):
            raise ValueError(f"hash function returned {idx}, outside the table")
        return self._buckets[idx]

    def set(self, key: Any, value: Any) -> Any:
        """Insert or update ``key``; return the previous value or ``None``."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                old = entry[1]
                entry[1] = value
                return old
        bucket.insert(0, [key, value])
        self._count += 1
        return None

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value stored for ``key``, or ``default``."""
        for stored_key, value in self._bucket(key):
            if stored_key == key:
                return value
        return default

    def pop(self, key: Any, default: Any = None) -> Any:
        """Remove ``key`` and return its value, or ``default`` if absent."""
        bucket = self._bucket(key)
        for position, (stored_key, value) in enumerate(bucket):
            if stored_key == key:
                del bucket[position]
                self._count -= 1
                return value
        return default

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: Any) -> bool:
        return any(stored_key == key for stored_key, _ in self._bucket(key))

    def __iter__(self) -> Iterator[Any]:
        for bucket in self._buckets:
            for stored_key, _ in bucket:
                yield stored_key

    def items(self) -> list[tuple[Any, Any]]:
        """All key-value pairs in iteration order."""
        return [(k, v) for bucket in self._buckets for k, v in bucket]