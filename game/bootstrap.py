"""Bootstrap utilities: build the fixed mansion, the suspect index and a new session."""
from __future__ import annotations
import logging
from typing import Optional

from detective.core.rooms import Room, count_rooms
from detective.core.suspects import SuspectIndex
from detective.core.exploration import ExplorationEngine
from detective.core.loader import build_room_tree_from_dict, build_suspect_index as _build_index
from config import get_bucket_count
from .content import MANSION_LAYOUT, SUSPECT_RULES


def build_mansion() -> Room:
    """Monta o mapa fixo da mansao e retorna a raiz (Hall de Entrada)."""
    root = build_room_tree_from_dict(MANSION_LAYOUT)
    logging.debug("mansion built with %d rooms", count_rooms(root))
    return root


def build_suspect_index(bucket_count: Optional[int] = None) -> SuspectIndex:
    if bucket_count is None:
        bucket_count = get_bucket_count()
    return _build_index(SUSPECT_RULES, bucket_count)


def new_session(bucket_count: Optional[int] = None) -> tuple[ExplorationEngine, SuspectIndex]:
    """Fresh engine (with an empty clue set) over the fixed mansion, plus the index."""
    engine = ExplorationEngine(build_mansion())
    return engine, build_suspect_index(bucket_count)
