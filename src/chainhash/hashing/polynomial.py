"""Polynomial rolling hash."""


class PolynomialHash:
    """
    Polynomial rolling hash over character codes.

    Folds the key left to right with ``acc = (base * acc + ord(c)) % capacity``.
    The modulo is applied at every step, not once at the end, so indices
    match a fixed-width implementation of the same loop exactly.
    """

    name = "polynomial"

    def __init__(self, base: int = 31):
        """
        Initialize polynomial hash.

        Args:
            base: Polynomial base (31 by default)
        """
        if base <= 0:
            raise ValueError(f"base must be positive, got {base}")
        self.base = base

    def index(self, key: str, capacity: int) -> int:
        """
        Compute the bucket index of ``key``.

        Args:
            key: Text key
            capacity: Number of buckets

        Returns:
            Bucket index in [0, capacity)
        """
        acc = 0
        for char in key:
            acc = (self.base * acc + ord(char)) % capacity
        # Python's % already yields a non-negative result for capacity > 0
        return abs(acc)

    def __repr__(self) -> str:
        return f"PolynomialHash(base={self.base})"
