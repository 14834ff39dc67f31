"""Minimal demo of chainhash.

Inserts the same words into one table per hash function and prints how
the keys spread over the buckets.
"""

from chainhash import ChainedHashTable, LengthInitialHash, PolynomialHash


WORDS = [
    "Casa", "Carro", "Cama", "Bola", "Bolo", "Bife", "Arroz", "Abacate",
    "Dado", "Doce", "Escola", "Faca", "Gato", "Galo", "Hotel", "Ilha",
]


def main():
    """Run minimal demo."""
    print("chainhash Minimal Demo")
    print("=" * 50)

    for hash_fn in (PolynomialHash(), LengthInitialHash()):
        table = ChainedHashTable(8, hash_fn=hash_fn)
        for word in WORDS:
            table.insert(word)

        print(f"{hash_fn!r}")
        print(f"  Capacity:    {table.capacity}")
        print(f"  Load factor: {table.load_factor():.2f}")
        print(f"  Collisions:  {table.collision_count()}")
        for idx, chain in enumerate(table.buckets):
            print(f"  [{idx:2d}] {' -> '.join(chain)}")
        print()

    table = ChainedHashTable(8)
    for word in WORDS:
        table.insert(word)
    print(f"'Gato' stored: {table.contains('Gato')}")
    print(f"Delete 'Gato': {table.delete('Gato')}")
    print(f"'Gato' stored: {table.contains('Gato')}")
    print()

    print("Demo complete!")


if __name__ == "__main__":
    main()
