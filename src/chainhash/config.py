"""Configuration loading utilities."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

import yaml

from chainhash.errors import InvalidCapacityError
from chainhash.hashing.registry import HASH_FUNCTIONS, get_hash_function
from chainhash.table.hash_table import DEFAULT_LOAD_THRESHOLD, ChainedHashTable


def load_config(config_path: Path) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Dictionary containing configuration parameters

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML parsing fails
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}

    return config


@dataclass(frozen=True)
class TableConfig:
    """Configuration for a ChainedHashTable.

    Attributes:
        capacity: Initial number of buckets
        hash_function: Hash function name ("polynomial" | "length_initial")
        load_threshold: Load factor above which inserts trigger a resize
        poly_base: Base of the polynomial hash (ignored by other functions)
    """

    capacity: int
    hash_function: str = "polynomial"
    load_threshold: float = DEFAULT_LOAD_THRESHOLD
    poly_base: int = 31

    def __post_init__(self) -> None:
        """Validate parameters."""
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int):
            raise InvalidCapacityError(
                f"capacity must be a positive integer, got {self.capacity!r}"
            )
        if self.capacity <= 0:
            raise InvalidCapacityError("capacity must be positive")
        if self.hash_function not in HASH_FUNCTIONS:
            raise ValueError(
                f"hash_function must be one of {list(HASH_FUNCTIONS.keys())}, "
                f"got {self.hash_function}"
            )
        if self.load_threshold <= 0:
            raise ValueError("load_threshold must be positive")
        if self.poly_base <= 0:
            raise ValueError("poly_base must be positive")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TableConfig":
        """Build a config from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


def build_table(cfg: TableConfig) -> ChainedHashTable:
    """Construct an empty table from a TableConfig."""
    hash_fn = get_hash_function(cfg.hash_function, poly_base=cfg.poly_base)
    return ChainedHashTable(cfg.capacity, hash_fn=hash_fn, load_threshold=cfg.load_threshold)
