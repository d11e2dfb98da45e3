"""Tests for the clue BST set."""

import random

from detective.core.clues import ClueSet, InsertOutcome


def test_empty_set():
    clues = ClueSet()
    assert len(clues) == 0
    assert not clues
    assert list(clues.inorder()) == []
    assert clues.depth() == 0


def test_insert_then_duplicate():
    clues = ClueSet()
    assert clues.insert("Faca molhada na pia.") is InsertOutcome.INSERTED
    assert clues.insert("Faca molhada na pia.") is InsertOutcome.DUPLICATE
    assert len(clues) == 1
    assert "Faca molhada na pia." in clues


def test_rejects_empty_and_none():
    clues = ClueSet()
    assert clues.insert("") is InsertOutcome.REJECTED
    assert clues.insert(None) is InsertOutcome.REJECTED
    assert len(clues) == 0
    assert clues.root is None


def test_inorder_sorted_and_distinct():
    words = ["pera", "uva", "abacaxi", "maca", "uva", "banana", "pera", "kiwi"]
    clues = ClueSet()
    for w in words:
        clues.insert(w)
    assert list(clues) == sorted(set(words))
    assert len(clues) == len(set(words))


def test_random_insertions_property():
    rng = random.Random(1234)
    for _ in range(20):
        words = ["".join(rng.choice("abcAB ") for _ in range(rng.randint(0, 4))) for _ in range(40)]
        clues = ClueSet()
        for w in words:
            clues.insert(w)
        result = list(clues.inorder())
        assert result == sorted({w for w in words if w})
        assert all(a < b for a, b in zip(result, result[1:]))


def test_ordering_is_case_sensitive():
    clues = ClueSet()
    for w in ["faca", "Faca", "Zebra", "abelha"]:
        clues.insert(w)
    # maiusculas antes das minusculas (ordem de bytes)
    assert list(clues) == ["Faca", "Zebra", "abelha", "faca"]


def test_ordering_matches_utf8_bytes():
    words = ["Escritorio", "Escritório", "Esc", "Éden", "zebra"]
    clues = ClueSet()
    for w in words:
        clues.insert(w)
    assert list(clues) == sorted(words, key=lambda s: s.encode("utf-8"))


def test_inorder_is_restartable():
    clues = ClueSet()
    for w in ["b", "a", "c"]:
        clues.insert(w)
    it = clues.inorder()
    assert next(it) == "a"
    assert list(clues.inorder()) == ["a", "b", "c"]
    assert list(it) == ["b", "c"]


def test_bst_shape():
    clues = ClueSet()
    for w in ["m", "c", "x", "a"]:
        clues.insert(w)
    assert clues.root.text == "m"
    assert clues.root.left.text == "c"
    assert clues.root.right.text == "x"
    assert clues.root.left.left.text == "a"
    assert clues.depth() == 3
    assert "z" not in clues
    assert 42 not in clues
