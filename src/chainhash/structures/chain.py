"""Singly-linked chain holding the keys of one bucket.

Keys are kept in insertion order. Duplicates are legal and each one
occupies its own node.
"""

from typing import Iterator, Optional


class Node:
    """A single link in a chain."""

    __slots__ = ("value", "next")

    def __init__(self, value: str, next: Optional["Node"] = None) -> None:
        self.value = value
        self.next = next

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class Chain:
    """Ordered sequence of keys for one bucket of a hash table.

    Appends are O(1) through a tail pointer; membership and removal walk
    the chain from the first node.
    """

    def __init__(self) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._length = 0

    @property
    def first(self) -> Optional[Node]:
        """First node of the chain, or None when the chain is empty."""
        return self._head

    def append(self, key: str) -> None:
        """Add a key at the end of the chain."""
        node = Node(key)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def contains(self, key: str) -> bool:
        node = self._head
        while node is not None:
            if node.value == key:
                return True
            node = node.next
        return False

    def remove(self, key: str) -> bool:
        """Remove the first node holding ``key``.

        Returns:
            True if a node was removed, False if the key was not found
        """
        previous = None
        node = self._head
        while node is not None:
            if node.value == key:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                if node is self._tail:
                    self._tail = previous
                self._length -= 1
                return True
            previous = node
            node = node.next
        return False

    def clear(self) -> None:
        self._head = None
        self._tail = None
        self._length = 0

    def is_empty(self) -> bool:
        return self._length == 0

    def __len__(self) -> int:
        return self._length

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def __iter__(self) -> Iterator[str]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"Chain({list(self)!r})"
