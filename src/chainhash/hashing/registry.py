"""Lookup of hash functions by name."""

from chainhash.hashing.base import HashFunction
from chainhash.hashing.length_initial import LengthInitialHash
from chainhash.hashing.polynomial import PolynomialHash

HASH_FUNCTIONS = {
    PolynomialHash.name: PolynomialHash,
    LengthInitialHash.name: LengthInitialHash,
}


def get_hash_function(name: str, poly_base: int = 31) -> HashFunction:
    """Resolve a hash function name to a new instance.

    Args:
        name: Hash function name ("polynomial" or "length_initial")
        poly_base: Base used when name is "polynomial"

    Returns:
        Hash function instance

    Raises:
        ValueError: If name is not recognized
    """
    if name not in HASH_FUNCTIONS:
        raise ValueError(
            f"hash_function must be one of {list(HASH_FUNCTIONS.keys())}, got {name}"
        )
    if name == PolynomialHash.name:
        return PolynomialHash(base=poly_base)
    return HASH_FUNCTIONS[name]()
