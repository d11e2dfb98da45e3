"""Suspect index: chained hash table mapping clue text to suspect name.

Bucket placement uses the djb2 string hash over the UTF-8 bytes of the key,
wrapping at 64 bits like an unsigned long accumulator does. Keys compare
exactly (case-sensitive).
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from config import DEFAULT_BUCKET_COUNT

__all__ = ["djb2", "SuspectAssociation", "SuspectIndex", "HASH_MASK"]

HASH_SEED = 5381
HASH_MASK = (1 << 64) - 1


def djb2(key: str) -> int:
    """djb2 recurrence: h = h*33 + b for each byte, modulo 2**64."""
    h = HASH_SEED
    for b in key.encode("utf-8"):
        h = (h * 33 + b) & HASH_MASK
    return h


@dataclass
class SuspectAssociation:
    key: str
    value: str
    next: Optional["SuspectAssociation"] = None


class SuspectIndex:
    def __init__(self, bucket_count: int = DEFAULT_BUCKET_COUNT):
        if not isinstance(bucket_count, int) or isinstance(bucket_count, bool) or bucket_count < 1:
            raise ValueError("bucket_count deve ser um inteiro >= 1")
        self.bucket_count = bucket_count
        self.buckets: List[Optional[SuspectAssociation]] = [None] * bucket_count
        self._size = 0

    def bucket_index(self, key: str) -> int:
        return djb2(key) % self.bucket_count

    def _find(self, key: str) -> Optional[SuspectAssociation]:
        entry = self.buckets[self.bucket_index(key)]
        while entry is not None:
            if entry.key == key:
                return entry
            entry = entry.next
        return None

    def insert(self, key: Optional[str], value: Optional[str]) -> None:
        """Associate ``key`` with ``value``; last write wins.

        Empty or missing key/value is ignored.
        """
        if not key or not value:
            return
        existing = self._find(key)
        if existing is not None:
            logging.debug("suspect rule overwritten: %r -> %r (was %r)", key, value, existing.value)
            existing.value = value
            return
        idx = self.bucket_index(key)
        # novo elemento entra na cabeca da cadeia
        self.buckets[idx] = SuspectAssociation(key, value, self.buckets[idx])
        self._size += 1
        logging.debug("suspect rule %r -> %r in bucket %d", key, value, idx)

    def lookup(self, key: Optional[str]) -> Optional[str]:
        if not key:
            return None
        entry = self._find(key)
        return entry.value if entry is not None else None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not None

    def __len__(self) -> int:
        return self._size

    def items(self) -> Iterator[Tuple[str, str]]:
        """(key, value) pairs in bucket order, chain head first."""
        for head in self.buckets:
            entry = head
            while entry is not None:
                yield entry.key, entry.value
                entry = entry.next

    def suspects(self) -> List[str]:
        """Distinct suspect names, sorted."""
        return sorted({value for _key, value in self.items()})

    def chain_lengths(self) -> Dict[int, int]:
        """Bucket index -> chain length, non-empty buckets only."""
        lengths: Dict[int, int] = {}
        for idx, head in enumerate(self.buckets):
            n = 0
            entry = head
            while entry is not None:
                n += 1
                entry = entry.next
            if n:
                lengths[idx] = n
        return lengths
