"""Tests for the chained hash table engine."""

import logging

import pytest

from chainhash import (
    ChainedHashTable,
    InvalidCapacityError,
    InvalidKeyError,
    LengthInitialHash,
    PolynomialHash,
)
from chainhash.experiments.common import make_rng, random_words


@pytest.fixture
def words():
    """Deterministic synthetic keys."""
    return random_words(make_rng(3), 300)


def assert_keys_in_home_buckets(table):
    """Every stored key sits in the bucket its hash points to under the current capacity."""
    for idx, chain in enumerate(table.buckets):
        for key in chain:
            assert table.hash_fn.index(key, table.capacity) == idx


def test_default_hash_is_polynomial():
    table = ChainedHashTable(8)
    assert isinstance(table.hash_fn, PolynomialHash)
    assert table.hash_fn.base == 31


@pytest.mark.parametrize("capacity", [0, -1, -100])
def test_rejects_non_positive_capacity(capacity):
    with pytest.raises(InvalidCapacityError):
        ChainedHashTable(capacity)


@pytest.mark.parametrize("capacity", [2.5, "10", None, True])
def test_rejects_non_integer_capacity(capacity):
    with pytest.raises(InvalidCapacityError):
        ChainedHashTable(capacity)


def test_rejects_non_positive_threshold():
    with pytest.raises(ValueError):
        ChainedHashTable(4, load_threshold=0)


def test_new_table_state():
    table = ChainedHashTable(6)
    assert table.capacity == 6
    assert len(table.buckets) == 6
    assert table.bucket_counts() == [0] * 6
    assert table.collision_count() == 0
    assert table.load_factor() == 0.0
    assert len(table) == 0


def test_scenario_three_keys_capacity_five():
    """AB -> 65%5=0, (0*31+66)%5=1; CD -> 2, (62+68)%5=0; EF -> 4, (124+70)%5=4."""
    table = ChainedHashTable(5, hash_fn=PolynomialHash())
    expected = {"AB": 1, "CD": 0, "EF": 4}

    for key, idx in expected.items():
        assert table.hash_fn.index(key, 5) == idx
        table.insert(key)

    assert table.capacity == 5
    assert table.collision_count() == 0
    assert table.bucket_counts() == [1, 1, 0, 0, 1]
    assert list(table.buckets[1]) == ["AB"]
    assert list(table.buckets[0]) == ["CD"]
    assert list(table.buckets[4]) == ["EF"]


def test_round_trip(words):
    table = ChainedHashTable(16)
    for word in words:
        table.insert(word)
    for word in words:
        assert table.contains(word), f"{word} should be stored"
        assert word in table
    assert len(table) == len(words)


def test_contains_missing_key():
    table = ChainedHashTable(4)
    table.insert("present")
    assert not table.contains("absent")
    assert "absent" not in table
    assert 123 not in table


def test_collision_counts_occupied_bucket_including_duplicates():
    table = ChainedHashTable(100, hash_fn=LengthInitialHash())
    table.insert("Bolo")
    table.insert("Bife")  # same length and initial
    assert table.collision_count() == 1
    table.insert("Bolo")  # duplicate key, still an occupied bucket
    assert table.collision_count() == 2
    table.insert("Casa")
    assert table.collision_count() == 2
    assert len(table) == 4


def test_delete_unique_key(words):
    table = ChainedHashTable(16)
    for word in words:
        table.insert(word)
    target = "Uniquekeyxyz"
    table.insert(target)
    assert table.delete(target) is True
    assert not table.contains(target)
    assert table.delete(target) is False


def test_delete_removes_one_duplicate():
    table = ChainedHashTable(8)
    for _ in range(3):
        table.insert("repeat")
    assert table.delete("repeat")
    assert table.contains("repeat")
    assert len(table) == 2
    assert table.delete("repeat")
    assert table.delete("repeat")
    assert not table.contains("repeat")
    assert table.delete("repeat") is False


def test_delete_keeps_collisions_and_capacity():
    table = ChainedHashTable(100, hash_fn=LengthInitialHash())
    table.insert("Bolo")
    table.insert("Bife")
    assert table.delete("Bife")
    assert table.collision_count() == 1
    assert table.capacity == 100


def test_delete_missing_key_on_empty_table():
    assert ChainedHashTable(3).delete("nothing") is False


def test_clear_resets_state(words):
    table = ChainedHashTable(8)
    for word in words[:50]:
        table.insert(word)
    capacity = table.capacity
    assert table.collision_count() > 0

    table.clear()

    assert table.collision_count() == 0
    assert table.load_factor() == 0.0
    assert table.capacity == capacity
    assert table.bucket_counts() == [0] * capacity
    for word in words[:50]:
        assert not table.contains(word)


def test_table_reusable_after_clear():
    table = ChainedHashTable(5)
    table.insert("AB")
    table.clear()
    table.insert("CD")
    assert table.contains("CD")
    assert not table.contains("AB")
    assert len(table) == 1


def test_bucket_conservation(words):
    table = ChainedHashTable(10)
    stored = 0
    for i, word in enumerate(words):
        table.insert(word)
        stored += 1
        if i % 3 == 0 and table.delete(words[i // 2]):
            stored -= 1
        counts = table.bucket_counts()
        assert len(counts) == table.capacity
        assert sum(counts) == stored == len(table)
    assert_keys_in_home_buckets(table)


def test_load_factor_definition():
    table = ChainedHashTable(8)
    for key in ["a", "b", "c"]:
        table.insert(key)
    assert table.load_factor() == pytest.approx(3 / 8)


def test_no_resize_at_exact_threshold():
    """Load factor must exceed 0.75, not just reach it."""
    table = ChainedHashTable(4)
    for key in ["k1", "k2", "k3"]:
        table.insert(key)
    assert table.load_factor() == 0.75
    table.insert("k4")
    assert table.capacity == 4
    assert table.load_factor() == 1.0


def test_resize_triggered_by_next_insert():
    table = ChainedHashTable(100)
    keys = [f"key{i}" for i in range(77)]
    for key in keys[:76]:
        table.insert(key)
    assert table.capacity == 100
    assert table.load_factor() > 0.75

    table.insert(keys[76])

    assert table.capacity == 125
    assert table.load_factor() == pytest.approx(77 / 125)
    assert table.load_factor() <= 0.75
    assert len(table.buckets) == table.capacity
    for key in keys:
        assert table.contains(key)
    assert_keys_in_home_buckets(table)


def test_growth_is_a_quarter_with_floor():
    table = ChainedHashTable(4)
    capacities = []
    for i in range(30):
        table.insert(f"w{i}")
        capacities.append(table.capacity)
    # 4 -> 5 -> 6 -> 7 -> 8 -> 10 -> 12 -> 15 -> 18 -> 22 -> 27 ...
    seen = sorted(set(capacities))
    assert seen[:9] == [4, 5, 6, 7, 8, 10, 12, 15, 18]
    for previous, current in zip(seen, seen[1:]):
        assert current == previous + previous // 4


@pytest.mark.parametrize("capacity", [1, 2, 3])
def test_small_capacity_never_grows(capacity):
    """capacity // 4 is 0 below 4, so a resize rebuilds at the same size."""
    table = ChainedHashTable(capacity)
    keys = [f"item{i}" for i in range(10)]
    for key in keys:
        table.insert(key)
    assert table.capacity == capacity
    assert len(table) == 10
    assert table.load_factor() > 0.75
    for key in keys:
        assert table.contains(key)


def test_small_capacity_resize_recounts_collisions():
    """A no-growth resize still rebuilds buckets and recounts collisions from zero."""
    table = ChainedHashTable(1)
    table.insert("a")
    table.insert("b")  # resize (1.0 > 0.75): 0 collisions after replay, then 1
    assert table.collision_count() == 1
    table.insert("c")  # replay of a, b gives 1, then c gives 2
    assert table.collision_count() == 2
    assert list(table.buckets[0]) == ["a", "b", "c"]


def test_resize_replays_in_bucket_order():
    """Collisions are recounted from zero while replaying old buckets 0..n-1.

    With length_initial and capacity 4:
      Ab -> 3, Abcde -> 2, Abcdefg -> 0, Abcdefghi -> 2 (collision).
    The fifth insert resizes to 5 and replays bucket 0, 2 then 3:
      Abcdefg -> 3, Abcde -> 1, Abcdefghi -> 0, Ab -> 3 (collision).
    """
    table = ChainedHashTable(4, hash_fn=LengthInitialHash())
    for key in ["Ab", "Abcde", "Abcdefg", "Abcdefghi"]:
        table.insert(key)
    assert table.collision_count() == 1
    assert table.bucket_counts() == [1, 0, 2, 1]

    table.insert("Abc")  # 3 + 1 = 4 -> bucket 4 of 5, empty

    assert table.capacity == 5
    assert table.collision_count() == 1
    assert table.bucket_counts() == [1, 1, 0, 2, 1]
    # Replay order, not original insertion order, decides chain order
    assert list(table.buckets[3]) == ["Abcdefg", "Ab"]
    assert_keys_in_home_buckets(table)


def test_collisions_after_resize_match_occupancy():
    """Right after a rehash every key beyond the first in a bucket counted once."""
    table = ChainedHashTable(20)
    keys = [f"k{i}" for i in range(16)]
    for key in keys:
        table.insert(key)
    table.insert("trigger")  # 16/20 = 0.8 -> resize to 25 before placing

    assert table.capacity == 25
    counts = table.bucket_counts()
    used = sum(1 for c in counts if c > 0)
    trigger_bucket = table.hash_fn.index("trigger", 25)
    before_trigger = 16 - (used - (1 if counts[trigger_bucket] == 1 else 0))
    expected = before_trigger + (1 if counts[trigger_bucket] > 1 else 0)
    assert table.collision_count() == expected


def test_resize_is_deterministic(words):
    def build():
        table = ChainedHashTable(4)
        for word in words:
            table.insert(word)
        return table

    a, b = build(), build()
    assert a.capacity == b.capacity
    assert a.collision_count() == b.collision_count()
    assert [list(c) for c in a.buckets] == [list(c) for c in b.buckets]


def test_non_string_keys_rejected():
    table = ChainedHashTable(4)
    with pytest.raises(InvalidKeyError):
        table.insert(42)
    with pytest.raises(InvalidKeyError):
        table.contains(b"bytes")
    with pytest.raises(InvalidKeyError):
        table.delete(None)


def test_invalid_key_leaves_table_untouched():
    table = ChainedHashTable(4, hash_fn=LengthInitialHash())
    for key in ["Ab", "Bc", "Cd", "De"]:
        table.insert(key)
    assert table.load_factor() > 0.75

    with pytest.raises(InvalidKeyError):
        table.insert("")
    with pytest.raises(InvalidKeyError):
        table.insert("9lives")

    assert table.capacity == 4
    assert len(table) == 4


def test_iteration_follows_bucket_then_chain_order():
    table = ChainedHashTable(5)
    for key in ["AB", "CD", "EF"]:
        table.insert(key)
    assert list(table) == ["CD", "AB", "EF"]


def test_buckets_view_is_read_only_tuple():
    table = ChainedHashTable(3)
    assert isinstance(table.buckets, tuple)
    assert len(table.buckets) == 3


def test_stats(words):
    table = ChainedHashTable(16)
    for word in words[:40]:
        table.insert(word)
    stats = table.stats()
    assert stats["capacity"] == table.capacity
    assert stats["size"] == 40
    assert stats["collisions"] == table.collision_count()
    assert stats["load_factor"] == pytest.approx(table.load_factor())
    assert stats["hash_function"] == "polynomial"
    assert stats["occupancy"]["total_keys"] == 40
    assert stats["occupancy"]["max_load"] == max(table.bucket_counts())


def test_resize_logged_at_debug(caplog):
    table = ChainedHashTable(4)
    with caplog.at_level(logging.DEBUG, logger="chainhash.table.hash_table"):
        for i in range(5):
            table.insert(f"x{i}")
    assert "Resized table 4 -> 5" in caplog.text


def test_repr():
    table = ChainedHashTable(3)
    table.insert("a")
    text = repr(table)
    assert "capacity=3" in text
    assert "size=1" in text
