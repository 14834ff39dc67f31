"""Base hash function interface."""

from typing import Protocol


class HashFunction(Protocol):
    """
    Protocol for hash functions used by ChainedHashTable.

    Hash functions map a text key to a bucket index. They must be pure:
    the same key and capacity always give the same index, and the index
    only depends on the capacity passed in, never on table state.
    """

    name: str

    def index(self, key: str, capacity: int) -> int:
        """
        Compute the bucket index for a key.

        Args:
            key: Text key to place
            capacity: Current number of buckets (positive)

        Returns:
            Bucket index in [0, capacity)
        """
        ...
