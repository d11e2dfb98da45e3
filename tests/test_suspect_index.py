"""Tests for the chained suspect hash table."""

import pytest

from detective.core.suspects import SuspectIndex, djb2, HASH_MASK


def _reference_djb2(text):
    h = 5381
    for b in text.encode("utf-8"):
        h = (h * 33 + b) % (2 ** 64)
    return h


def test_djb2_known_values():
    assert djb2("") == 5381
    assert djb2("a") == 5381 * 33 + ord("a")
    assert djb2("ab") == (5381 * 33 + 97) * 33 + 98


def test_djb2_wraps_at_64_bits():
    long_key = "Gaveta arrombada com documentos espalhados." * 4
    assert djb2(long_key) == _reference_djb2(long_key)
    assert 0 <= djb2(long_key) <= HASH_MASK


def test_hash_deterministic_bucket():
    idx = SuspectIndex(101)
    other = SuspectIndex(101)
    key = "Faca molhada na pia."
    assert idx.bucket_index(key) == other.bucket_index(key) == djb2(key) % 101


def test_insert_and_lookup():
    idx = SuspectIndex()
    idx.insert("Retrato torto na parede.", "Morador")
    assert idx.lookup("Retrato torto na parede.") == "Morador"
    assert idx.lookup("retrato torto na parede.") is None
    assert idx.lookup("inexistente") is None
    assert len(idx) == 1


def test_last_write_wins():
    idx = SuspectIndex()
    idx.insert("K", "V1")
    idx.insert("K", "V2")
    assert idx.lookup("K") == "V2"
    assert len(idx) == 1
    assert list(idx.items()) == [("K", "V2")]


def test_empty_key_or_value_ignored():
    idx = SuspectIndex()
    idx.insert("", "Intruso")
    idx.insert("pista", "")
    idx.insert(None, "Intruso")
    idx.insert("pista", None)
    assert len(idx) == 0
    assert idx.lookup("") is None
    assert idx.lookup(None) is None


def test_collisions_chain_in_single_bucket():
    idx = SuspectIndex(1)
    idx.insert("a", "A")
    idx.insert("b", "B")
    idx.insert("c", "C")
    idx.insert("b", "B2")
    assert idx.chain_lengths() == {0: 3}
    # novos elementos entram na cabeca da cadeia
    assert [k for k, _ in idx.items()] == ["c", "b", "a"]
    assert idx.lookup("b") == "B2"
    assert "a" in idx and "z" not in idx


def test_suspects_sorted_distinct():
    idx = SuspectIndex()
    idx.insert("p1", "Morador")
    idx.insert("p2", "Intruso")
    idx.insert("p3", "Morador")
    assert idx.suspects() == ["Intruso", "Morador"]


@pytest.mark.parametrize("bad", [0, -3, 2.5, "101", True])
def test_invalid_bucket_count(bad):
    with pytest.raises(ValueError):
        SuspectIndex(bad)
