"""Separate-chaining hash table of text keys.

This module provides the table engine: bucket storage, collision
accounting and load-factor-triggered rehashing. Bucket indices are
computed by an injected HashFunction, so new hash functions can be
compared without touching the engine.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

from chainhash.errors import InvalidCapacityError, InvalidKeyError
from chainhash.hashing.base import HashFunction
from chainhash.hashing.diagnostics import occupancy_summary
from chainhash.hashing.polynomial import PolynomialHash
from chainhash.structures.chain import Chain

logger = logging.getLogger(__name__)

DEFAULT_LOAD_THRESHOLD = 0.75


def _new_buckets(capacity: int) -> List[Chain]:
    return [Chain() for _ in range(capacity)]


class ChainedHashTable:
    """Hash table storing text keys with separate chaining.

    Keys carry no associated value and duplicates are kept: inserting the
    same key twice stores it twice. Before each insert the table grows by
    a quarter of its capacity (floor division) when the load factor is
    above the threshold, then replays every stored key into the new
    buckets.

    A collision is counted whenever a key lands in a bucket that already
    holds at least one key, whether during insert or during a rehash. The
    count is reset by resize and clear and never decremented by delete.
    """

    def __init__(
        self,
        capacity: int,
        hash_fn: Optional[HashFunction] = None,
        load_threshold: float = DEFAULT_LOAD_THRESHOLD,
    ) -> None:
        """Initialize an empty table.

        Args:
            capacity: Initial number of buckets (must be positive)
            hash_fn: Hash function mapping (key, capacity) to a bucket index.
                Defaults to PolynomialHash with base 31.
            load_threshold: Load factor above which the next insert resizes

        Raises:
            InvalidCapacityError: If capacity is not a positive integer
            ValueError: If load_threshold is not positive
        """
        # bool is an int subclass but never a meaningful capacity
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidCapacityError(
                f"capacity must be a positive integer, got {capacity!r}"
            )
        if capacity <= 0:
            raise InvalidCapacityError(f"capacity must be positive, got {capacity}")
        if load_threshold <= 0:
            raise ValueError(f"load_threshold must be positive, got {load_threshold}")

        self.hash_fn = hash_fn if hash_fn is not None else PolynomialHash()
        self.load_threshold = load_threshold
        self._capacity = capacity
        self._buckets = _new_buckets(capacity)
        self._collisions = 0

    @property
    def capacity(self) -> int:
        """Current number of buckets."""
        return self._capacity

    @property
    def buckets(self) -> Tuple[Chain, ...]:
        """Read-only view of the bucket chains, in index order."""
        return tuple(self._buckets)

    def _index(self, key: str) -> int:
        if not isinstance(key, str):
            raise InvalidKeyError(f"keys must be str, got {type(key).__name__}")
        return self.hash_fn.index(key, self._capacity)

    def insert(self, key: str) -> None:
        """Insert a key, resizing first if the table is overloaded.

        Args:
            key: Text key to store

        Raises:
            InvalidKeyError: If the key is not a str or the hash function
                rejects it
        """
        # Validate before resizing so a rejected key leaves the table untouched
        self._index(key)

        if self.load_factor() > self.load_threshold:
            self._resize()

        idx = self._index(key)
        chain = self._buckets[idx]
        if not chain.is_empty():
            self._collisions += 1
        chain.append(key)

    def contains(self, key: str) -> bool:
        """Return whether the key is stored in the table."""
        return self._buckets[self._index(key)].contains(key)

    def delete(self, key: str) -> bool:
        """Remove one occurrence of a key.

        Capacity and collision count are left unchanged.

        Args:
            key: Text key to remove

        Returns:
            True if an occurrence was removed, False if the key was absent
        """
        return self._buckets[self._index(key)].remove(key)

    def clear(self) -> None:
        """Empty every bucket and reset the collision count; capacity is kept."""
        for chain in self._buckets:
            chain.clear()
        self._collisions = 0

    def bucket_counts(self) -> List[int]:
        """Number of keys in each bucket, in index order."""
        return [len(chain) for chain in self._buckets]

    def collision_count(self) -> int:
        return self._collisions

    def load_factor(self) -> float:
        """Stored keys divided by capacity, recomputed on every call."""
        return len(self) / self._capacity

    def stats(self) -> Dict[str, Any]:
        """Get table statistics.

        Returns:
            Dictionary with capacity, size, load_factor, collisions,
            hash_function and the bucket occupancy summary
        """
        return {
            "capacity": self._capacity,
            "size": len(self),
            "load_factor": self.load_factor(),
            "collisions": self._collisions,
            "hash_function": getattr(self.hash_fn, "name", type(self.hash_fn).__name__),
            "occupancy": occupancy_summary(self.bucket_counts()),
        }

    def _resize(self) -> None:
        """Grow capacity by a quarter and rehash every stored key.

        Keys are replayed bucket by bucket (index 0 upwards), oldest first
        within each chain, and collisions are recounted from zero in that
        order. For capacities below 4 the growth step is 0 and the table is
        rebuilt at the same size.
        """
        old_capacity = self._capacity
        new_capacity = old_capacity + old_capacity // 4
        new_buckets = _new_buckets(new_capacity)
        collisions = 0
        moved = 0

        for old_chain in self._buckets:
            node = old_chain.first
            while node is not None:
                idx = self.hash_fn.index(node.value, new_capacity)
                target = new_buckets[idx]
                if not target.is_empty():
                    collisions += 1
                target.append(node.value)
                moved += 1
                node = node.next

        self._buckets = new_buckets
        self._capacity = new_capacity
        self._collisions = collisions

        logger.debug(
            "Resized table %d -> %d buckets, rehashed %d keys, %d collisions",
            old_capacity,
            new_capacity,
            moved,
            collisions,
        )

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._buckets)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def __iter__(self) -> Iterator[str]:
        for chain in self._buckets:
            yield from chain

    def __repr__(self) -> str:
        return (
            f"ChainedHashTable(capacity={self._capacity}, size={len(self)}, "
            f"collisions={self._collisions}, hash_fn={self.hash_fn!r})"
        )
