"""Length plus first-letter hash (didactic)."""

import string

from chainhash.errors import InvalidKeyError


class LengthInitialHash:
    """
    Hash combining the key length with the alphabet position of its first letter.

    ``index = (len(key) + position(key[0])) % capacity`` where A/a = 1,
    B/b = 2 and so on. For "CASA": C is 3, length is 4, index is 7 % capacity.

    Deliberately weak: every key with the same length and initial lands in
    the same bucket. It exists to contrast with PolynomialHash.
    """

    name = "length_initial"

    def index(self, key: str, capacity: int) -> int:
        """
        Compute the bucket index of ``key``.

        Args:
            key: Non-empty text key starting with an ASCII letter
            capacity: Number of buckets

        Returns:
            Bucket index in [0, capacity)

        Raises:
            InvalidKeyError: If key is empty or does not start with an ASCII letter
        """
        if not key:
            raise InvalidKeyError("length_initial hash requires a non-empty key")
        initial = key[0]
        if initial not in string.ascii_letters:
            raise InvalidKeyError(
                f"length_initial hash requires an ASCII letter as first character, "
                f"got {initial!r} in key {key!r}"
            )
        position = ord(initial.upper()) - ord("A") + 1
        return (len(key) + position) % capacity

    def __repr__(self) -> str:
        return "LengthInitialHash()"
