"""chainhash: separate-chaining hash table for studying hash collisions."""

from .errors import ChainHashError, InvalidCapacityError, InvalidKeyError
from .structures import Chain, Node
from .hashing import (
    HASH_FUNCTIONS,
    HashFunction,
    LengthInitialHash,
    PolynomialHash,
    estimate_q2,
    get_hash_function,
    gini_of_load,
    max_load,
    occupancy_summary,
)
from .table import ChainedHashTable
from .config import TableConfig, build_table, load_config
from .utils import Timer, get_logger, seed_everything

__version__ = "0.1.0"

__all__ = [
    # Core table
    "ChainedHashTable",
    "Chain",
    "Node",
    # Hashing
    "HashFunction",
    "PolynomialHash",
    "LengthInitialHash",
    "HASH_FUNCTIONS",
    "get_hash_function",
    # Diagnostics
    "occupancy_summary",
    "max_load",
    "gini_of_load",
    "estimate_q2",
    # Errors
    "ChainHashError",
    "InvalidCapacityError",
    "InvalidKeyError",
    # Config and utils
    "TableConfig",
    "build_table",
    "load_config",
    "get_logger",
    "seed_everything",
    "Timer",
]
