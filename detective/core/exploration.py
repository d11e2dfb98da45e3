"""Exploration state machine over the mansion tree.

States: IN_TREE(room) and STOPPED. The engine never reads input; the shell
decodes one keystroke into an ``Action`` and passes it to ``advance``.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .rooms import Room, has_left, has_right, is_dead_end
from .clues import ClueSet, InsertOutcome

__all__ = [
    "Action",
    "Transition",
    "Visit",
    "StepResult",
    "ExplorationError",
    "ExplorationEngine",
    "parse_action",
    "step",
]


class ExplorationError(Exception):
    pass


class Action(Enum):
    GO_LEFT = "e"
    GO_RIGHT = "d"
    QUIT = "s"
    INVALID = "?"


_KEYMAP = {
    "e": Action.GO_LEFT,   # esquerda
    "d": Action.GO_RIGHT,  # direita
    "s": Action.QUIT,      # sair
}


def parse_action(raw: Optional[str]) -> Action:
    """Map the first character of ``raw`` (case-insensitive) to an Action."""
    if not raw:
        return Action.INVALID
    return _KEYMAP.get(raw[0].lower(), Action.INVALID)


class Transition(Enum):
    MOVED = "moved"
    BLOCKED_LEFT = "blocked_left"
    BLOCKED_RIGHT = "blocked_right"
    INVALID = "invalid"
    STOPPED = "stopped"


def step(room: Room, action: Action) -> tuple[Transition, Optional[Room]]:
    """Pure transition function.

    Returns the transition kind and the room occupied afterwards (``None``
    once stopped). Blocked and invalid moves keep the current room.
    """
    if action is Action.QUIT:
        return Transition.STOPPED, None
    if action is Action.GO_LEFT:
        if has_left(room):
            return Transition.MOVED, room.left
        return Transition.BLOCKED_LEFT, room
    if action is Action.GO_RIGHT:
        if has_right(room):
            return Transition.MOVED, room.right
        return Transition.BLOCKED_RIGHT, room
    return Transition.INVALID, room


@dataclass(frozen=True)
class Visit:
    """What happened on arrival in a room."""
    room: Room
    clue_outcome: Optional[InsertOutcome]  # None: sala sem pista
    can_go_left: bool
    can_go_right: bool
    dead_end: bool


@dataclass(frozen=True)
class StepResult:
    transition: Transition
    room: Optional[Room]
    visit: Optional[Visit] = None

    @property
    def stopped(self) -> bool:
        return self.transition is Transition.STOPPED or (self.visit is not None and self.visit.dead_end)


@dataclass
class ExplorationEngine:
    """Drives one exploration from the root, filling ``clues`` on arrival."""
    root: Room
    clues: ClueSet = field(default_factory=ClueSet)
    current: Optional[Room] = None
    stopped: bool = False
    trail: List[str] = field(default_factory=list)

    def start(self) -> Visit:
        if self.current is not None or self.stopped:
            raise ExplorationError("Exploracao ja iniciada.")
        return self._enter(self.root)

    def advance(self, action: Action) -> StepResult:
        if self.stopped:
            raise ExplorationError("Exploracao encerrada: nenhuma transicao disponivel.")
        if self.current is None:
            raise ExplorationError("Exploracao nao iniciada.")
        transition, target = step(self.current, action)
        logging.debug("step %s from %r: %s", action.name, self.current.name, transition.value)
        if transition is Transition.STOPPED:
            self.stopped = True
            return StepResult(transition, None)
        if transition is Transition.MOVED:
            visit = self._enter(target)
            return StepResult(transition, target, visit)
        return StepResult(transition, self.current)

    def _enter(self, room: Room) -> Visit:
        # Deposita a pista uma vez por chegada
        outcome = self.clues.insert(room.clue) if room.has_clue else None
        self.current = room
        self.trail.append(room.name)
        dead_end = is_dead_end(room)
        if dead_end:
            self.stopped = True
            logging.debug("dead end reached at %r", room.name)
        return Visit(
            room=room,
            clue_outcome=outcome,
            can_go_left=has_left(room),
            can_go_right=has_right(room),
            dead_end=dead_end,
        )
