"""Hash table engine for chainhash."""

from chainhash.table.hash_table import DEFAULT_LOAD_THRESHOLD, ChainedHashTable

__all__ = ["ChainedHashTable", "DEFAULT_LOAD_THRESHOLD"]
