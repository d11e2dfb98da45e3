"""Mansion layout and suspect rules loading and validation.

Separates construction logic from raw dict/list data into the core
structures. No I/O performed here; the fixed content lives in ``game.content``.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, List, Optional

import jsonschema

from ..rooms import Room
from ..suspects import SuspectIndex
from .schema import MANSION_SCHEMA, SUSPECT_RULES_SCHEMA, MAX_NAME_BYTES, MAX_CLUE_BYTES

__all__ = [
    "MansionError",
    "validate_mansion",
    "validate_rules",
    "build_room_tree_from_dict",
    "build_suspect_index",
]

_MANSION_VALIDATOR = jsonschema.Draft202012Validator(MANSION_SCHEMA)
_RULES_VALIDATOR = jsonschema.Draft202012Validator(SUSPECT_RULES_SCHEMA)


class MansionError(ValueError):
    def __init__(self, issues: List[str]):
        super().__init__("; ".join(issues))
        self.issues = issues


def _schema_issues(validator: jsonschema.Draft202012Validator, data: Any) -> List[str]:
    issues: List[str] = []
    for err in sorted(validator.iter_errors(data), key=lambda e: list(e.absolute_path)):
        where = "/".join(str(p) for p in err.absolute_path) or "<root>"
        issues.append(f"{where}: {err.message}")
    return issues


def _too_long(text: Optional[str], limit: int) -> bool:
    return bool(text) and len(text.encode("utf-8")) > limit


def _iter_room_dicts(data: Dict[str, Any]) -> Iterable[tuple[str, Dict[str, Any]]]:
    # (caminho, sala) em pre-ordem; caminho tipo "root/left/right"
    stack = [("root", data)]
    while stack:
        path, node = stack.pop()
        yield path, node
        if "right" in node:
            stack.append((f"{path}/right", node["right"]))
        if "left" in node:
            stack.append((f"{path}/left", node["left"]))


def validate_mansion(data: Any) -> List[str]:
    """Return the list of problems in a layout dict (empty when valid)."""
    issues = _schema_issues(_MANSION_VALIDATOR, data)
    if issues:
        return issues
    seen: Dict[str, str] = {}
    for path, node in _iter_room_dicts(data):
        name = node["name"]
        if _too_long(name, MAX_NAME_BYTES):
            issues.append(f"{path}: room name exceeds {MAX_NAME_BYTES} bytes")
        if _too_long(node.get("clue"), MAX_CLUE_BYTES):
            issues.append(f"{path}: clue of '{name}' exceeds {MAX_CLUE_BYTES} bytes")
        if name in seen:
            issues.append(f"{path}: duplicate room name '{name}' (already at {seen[name]})")
        else:
            seen[name] = path
    return issues


def validate_rules(rules: Any) -> List[str]:
    issues = _schema_issues(_RULES_VALIDATOR, rules)
    if issues:
        return issues
    clues: Dict[str, str] = {}
    for pos, rule in enumerate(rules):
        if _too_long(rule["clue"], MAX_CLUE_BYTES):
            issues.append(f"{pos}: clue exceeds {MAX_CLUE_BYTES} bytes")
        if _too_long(rule["suspect"], MAX_NAME_BYTES):
            issues.append(f"{pos}: suspect name exceeds {MAX_NAME_BYTES} bytes")
        previous = clues.get(rule["clue"])
        if previous is not None and previous != rule["suspect"]:
            # last write wins: so avisa, nao e erro
            logging.warning("suspect rule %d overrides %r -> %r with %r", pos, rule["clue"], previous, rule["suspect"])
        clues[rule["clue"]] = rule["suspect"]
    return issues


def _build_room(node: Dict[str, Any]) -> Room:
    left = _build_room(node["left"]) if "left" in node else None
    right = _build_room(node["right"]) if "right" in node else None
    return Room(name=node["name"], clue=node.get("clue") or None, left=left, right=right)


def build_room_tree_from_dict(data: Any) -> Room:
    """Build the room tree bottom-up; each child is created exactly once.

    Raises:
        MansionError: if the layout fails validation.
    """
    issues = validate_mansion(data)
    if issues:
        raise MansionError(issues)
    return _build_room(data)


def build_suspect_index(rules: Any, bucket_count: Optional[int] = None) -> SuspectIndex:
    """Fill a SuspectIndex from ``[{"clue": ..., "suspect": ...}, ...]``.

    Raises:
        MansionError: if the rule table fails validation.
    """
    issues = validate_rules(rules)
    if issues:
        raise MansionError(issues)
    index = SuspectIndex(bucket_count) if bucket_count is not None else SuspectIndex()
    for rule in rules:
        index.insert(rule["clue"], rule["suspect"])
    return index
