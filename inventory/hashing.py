"""
Fixed-size hash table with separate chaining.
Each bucket is a LinkedList of Entry objects; the table never resizes,
so lookups degrade linearly as a bucket's chain grows.
"""

import logging
from typing import Any, Hashable, List, Tuple

from inventory.linked_list import LinkedList

logger = logging.getLogger(__name__)

PRIME = 31


class _Absent:
    """Marker returned by get/delete when a key is not stored."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "ABSENT"


ABSENT = _Absent()


class Entry:
    __slots__ = ("key", "value")

    def __init__(self, key: Hashable, value: Any):
        self.key = key
        self.value = value

    def __repr__(self):
        return f"Entry({self.key!r}, {self.value!r})"


class HashTable:
    def __init__(self, size: int = 193):
        if size < 1:
            raise ValueError(f"hash table size must be at least 1, got {size}")
        self.size = size
        self.buckets: List[LinkedList] = [LinkedList() for _ in range(size)]

    def hash_function(self, key: Any) -> int:
        total = 0
        for char in str(key):
            total = (total * PRIME + ord(char)) % self.size
        return abs(total)

    def _bucket(self, key: Any) -> LinkedList:
        return self.buckets[self.hash_function(key)]

    def set(self, key: Any, value: Any) -> None:
        """
        Inserts a new entry, or replaces the value of the entry with the same key.
        An update keeps the entry at its position in the bucket chain.
        """
        bucket = self._bucket(key)
        node = bucket.find(lambda entry: entry.key == key)
        if node is not None:
            node.value.value = value
        else:
            bucket.append(Entry(key, value))

    def get(self, key: Any):
        """Return the stored value (not a copy) or ABSENT."""
        node = self._bucket(key).find(lambda entry: entry.key == key)
        return node.value.value if node is not None else ABSENT

    def delete(self, key: Any):
        """Remove the entry for key; return its value or ABSENT."""
        removed = self._bucket(key).remove(lambda entry: entry.key == key)
        return removed.value if removed is not None else ABSENT

    def values(self) -> List[Any]:
        """Values bucket by bucket, each bucket head to tail."""
        all_values = []
        for bucket in self.buckets:
            bucket.for_each(lambda entry: all_values.append(entry.value))
        return all_values

    def keys(self) -> List[Any]:
        all_keys = []
        for bucket in self.buckets:
            bucket.for_each(lambda entry: all_keys.append(entry.key))
        return all_keys

    def items(self) -> List[Tuple[Any, Any]]:
        return [(entry.key, entry.value) for bucket in self.buckets for entry in bucket]

    def clear(self) -> None:
        self.buckets = [LinkedList() for _ in range(self.size)]
        logger.debug("hash table cleared (%d buckets)", self.size)

    def bucket_lengths(self) -> List[int]:
        return [len(bucket.to_list()) for bucket in self.buckets]

    def as_list(self):
        """Return serializable representation of the non-empty buckets (indexes and keys)"""
        out = []
        for i, bucket in enumerate(self.buckets):
            keys = [entry.key for entry in bucket]
            if keys:
                out.append({"index": i, "keys": keys})
        return out

    def __len__(self):
        return sum(self.bucket_lengths())

    def __contains__(self, key):
        return self.get(key) is not ABSENT

    def __iter__(self):
        return iter(self.keys())

    def __repr__(self):
        return f"HashTable(size={self.size}, entries={len(self)})"
