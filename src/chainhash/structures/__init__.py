"""Supporting data structures for chainhash."""

from chainhash.structures.chain import Chain, Node

__all__ = ["Chain", "Node"]
