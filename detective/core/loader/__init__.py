"""Build the mansion tree and suspect index from plain data."""

from .schema import MANSION_SCHEMA, SUSPECT_RULES_SCHEMA
from .mansion_loader import (
    MansionError,
    validate_mansion,
    validate_rules,
    build_room_tree_from_dict,
    build_suspect_index,
)

__all__ = [
    "MANSION_SCHEMA", "SUSPECT_RULES_SCHEMA",
    "MansionError", "validate_mansion", "validate_rules",
    "build_room_tree_from_dict", "build_suspect_index",
]
