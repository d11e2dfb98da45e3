"""Final accusation: count supporting clues and decide the verdict."""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List

from .clues import ClueSet
from .suspects import SuspectIndex

__all__ = ["Verdict", "VerdictReport", "SUPPORT_THRESHOLD", "tally", "verdict", "judge"]

# Uma pista isolada pode ser coincidencia; duas sustentam a acusacao.
SUPPORT_THRESHOLD = 2


class Verdict(Enum):
    SUSTAINED = "sustained"
    UNSUSTAINED = "unsustained"


@dataclass(frozen=True)
class VerdictReport:
    accused: str
    count: int
    verdict: Verdict
    supporting: List[str]

    @property
    def sustained(self) -> bool:
        return self.verdict is Verdict.SUSTAINED


def _supporting(clues: ClueSet, index: SuspectIndex, accused: str) -> List[str]:
    if not clues:
        return []
    target = accused.lower()
    found: List[str] = []
    for text in clues.inorder():
        suspect = index.lookup(text)
        # chave case-sensitive, nome comparado sem diferenciar maiusculas
        if suspect is not None and suspect.lower() == target:
            found.append(text)
    return found


def tally(clues: ClueSet, index: SuspectIndex, accused: str) -> int:
    """Number of collected clues pointing at ``accused``.

    An empty clue set yields 0 without consulting the index.
    """
    return len(_supporting(clues, index, accused))


def verdict(count: int) -> Verdict:
    return Verdict.SUSTAINED if count >= SUPPORT_THRESHOLD else Verdict.UNSUSTAINED


def judge(clues: ClueSet, index: SuspectIndex, accused: str) -> VerdictReport:
    supporting = _supporting(clues, index, accused)
    return VerdictReport(
        accused=accused,
        count=len(supporting),
        verdict=verdict(len(supporting)),
        supporting=supporting,
    )
