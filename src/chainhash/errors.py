"""Exceptions raised by chainhash tables and hash functions."""


class ChainHashError(ValueError):
    """Base class for invalid arguments passed to chainhash objects."""


class InvalidCapacityError(ChainHashError):
    """Raised when a table is configured with a non-positive capacity."""


class InvalidKeyError(ChainHashError):
    """Raised when a key cannot be hashed by the selected hash function."""
