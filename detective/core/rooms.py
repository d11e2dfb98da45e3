"""Mansion map: binary tree of rooms (Detective Quest).

Rooms are frozen dataclasses built once by a fixed builder and never mutated
afterwards. Each room owns at most two children; no room is shared between
parents.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterator, Optional

__all__ = [
    "Room",
    "has_left",
    "has_right",
    "is_dead_end",
    "walk_postorder",
    "release_tree",
    "count_rooms",
]

@dataclass(frozen=True)
class Room:
    name: str
    clue: Optional[str] = None
    left: Optional["Room"] = None
    right: Optional["Room"] = None

    @property
    def has_clue(self) -> bool:
        # None e "" significam "sem pista"
        return bool(self.clue)


def has_left(room: Room) -> bool:
    return room.left is not None


def has_right(room: Room) -> bool:
    return room.right is not None


def is_dead_end(room: Room) -> bool:
    """A room without children ends the exploration on arrival."""
    return room.left is None and room.right is None


def walk_postorder(root: Optional[Room]) -> Iterator[Room]:
    """Yield every room exactly once, children before their parent.

    Uses an explicit stack so deep trees do not hit the recursion limit.
    A ``None`` root yields nothing.
    """
    if root is None:
        return
    stack: list[tuple[Room, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node
            continue
        stack.append((node, True))
        # right empilhado antes: left sai primeiro
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))


def release_tree(root: Optional[Room]) -> int:
    """Tear down the mansion map, children before parent.

    The caller drops its reference to ``root`` afterwards; this walk only
    accounts for every node once. Returns the number of rooms released
    (0 for a ``None`` root).
    """
    released = 0
    for room in walk_postorder(root):
        logging.debug("release room %r", room.name)
        released += 1
    return released


def count_rooms(root: Optional[Room]) -> int:
    return sum(1 for _ in walk_postorder(root))
