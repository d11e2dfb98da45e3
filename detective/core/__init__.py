"""Core data structures and state machine for Detective Quest."""

from .rooms import Room, has_left, has_right, is_dead_end, walk_postorder, release_tree, count_rooms
from .clues import ClueSet, ClueEntry, InsertOutcome
from .suspects import SuspectIndex, SuspectAssociation, djb2
from .exploration import Action, Transition, Visit, StepResult, ExplorationEngine, ExplorationError, parse_action, step
from .verdict import Verdict, VerdictReport, SUPPORT_THRESHOLD, tally, verdict, judge

__all__ = [
    'Room', 'has_left', 'has_right', 'is_dead_end', 'walk_postorder', 'release_tree', 'count_rooms',
    'ClueSet', 'ClueEntry', 'InsertOutcome',
    'SuspectIndex', 'SuspectAssociation', 'djb2',
    'Action', 'Transition', 'Visit', 'StepResult', 'ExplorationEngine', 'ExplorationError', 'parse_action', 'step',
    'Verdict', 'VerdictReport', 'SUPPORT_THRESHOLD', 'tally', 'verdict', 'judge',
]
