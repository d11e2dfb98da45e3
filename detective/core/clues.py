"""Collected clues: an unbalanced binary search tree used as an ordered set.

Ordering is plain ``str`` comparison (code point order), which matches the
byte-wise order of the UTF-8 encoding. No case folding: "faca" and "Faca"
are two distinct clues.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

__all__ = ["InsertOutcome", "ClueEntry", "ClueSet"]


class InsertOutcome(Enum):
    INSERTED = "inserted"
    DUPLICATE = "duplicate"
    REJECTED = "rejected"


@dataclass
class ClueEntry:
    text: str
    left: Optional["ClueEntry"] = None
    right: Optional["ClueEntry"] = None


class ClueSet:
    """Duplicate-free, sorted set of clue texts.

    Entries are created on first insertion and never removed individually;
    the whole tree goes away with the set.
    """

    def __init__(self):
        self.root: Optional[ClueEntry] = None
        self._size = 0

    def insert(self, text: Optional[str]) -> InsertOutcome:
        """Insert ``text`` keeping the BST invariant.

        Returns:
            INSERTED when a new entry was created, DUPLICATE when an equal text
            is already present (set unchanged), REJECTED for ``None`` or ``""``.
        """
        if not text:
            return InsertOutcome.REJECTED
        if self.root is None:
            self.root = ClueEntry(text)
            self._size += 1
            logging.debug("clue inserted at root: %r", text)
            return InsertOutcome.INSERTED
        node = self.root
        while True:
            if text == node.text:
                logging.debug("clue already collected: %r", text)
                return InsertOutcome.DUPLICATE
            if text < node.text:
                if node.left is None:
                    node.left = ClueEntry(text)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = ClueEntry(text)
                    break
                node = node.right
        self._size += 1
        logging.debug("clue inserted: %r", text)
        return InsertOutcome.INSERTED

    def inorder(self) -> Iterator[str]:
        """Lazily yield texts in ascending order (left, self, right).

        Every call starts a fresh traversal.
        """
        stack: list[ClueEntry] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.text
            node = node.right

    def __iter__(self) -> Iterator[str]:
        return self.inorder()

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self.root is not None

    def __contains__(self, text: object) -> bool:
        if not isinstance(text, str):
            return False
        node = self.root
        while node is not None:
            if text == node.text:
                return True
            node = node.left if text < node.text else node.right
        return False

    def depth(self) -> int:
        """Height of the tree (0 for an empty set)."""
        def _depth(node: Optional[ClueEntry]) -> int:
            if node is None:
                return 0
            return 1 + max(_depth(node.left), _depth(node.right))
        return _depth(self.root)

    def __repr__(self) -> str:
        return f"ClueSet({list(self.inorder())!r})"
