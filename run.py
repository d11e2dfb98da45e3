"""Minimal CLI loop for Detective Quest.

Usage (example):
    python run.py
Then type one letter per turn:
    e   esquerda
    d   direita
    s   sair
After the exploration, type the name of the suspect to accuse.
"""
from __future__ import annotations
import logging
import sys
from typing import Callable

from game.bootstrap import new_session
from detective.core.exploration import parse_action
from detective.core.rooms import release_tree
from detective.core.actions import (
    ActionError,
    welcome,
    describe_visit,
    describe_step,
    list_clues,
    list_trail,
    list_suspects,
    accuse,
)
from config import get_log_level

PROMPT = "Opcao: "
ACCUSE_PROMPT = "Quem voce acusa? "


def _emit(res: dict, write: Callable[[str], None]) -> None:
    for line in res["lines"]:
        write(line)


def game_loop(read_line: Callable[[str], str] = input, write: Callable[[str], None] = print) -> dict | None:
    """Run one full game. Returns the verdict changes, or None when no accusation was made."""
    engine, index = new_session()
    _emit(welcome(), write)
    _emit(describe_visit(engine.start()), write)
    while not engine.stopped:
        try:
            raw = read_line(PROMPT)
        except EOFError:
            write("Saindo da exploracao.")
            break
        res = describe_step(engine.advance(parse_action(raw.strip())))
        _emit(res, write)
    write("")
    _emit(list_clues(engine.clues), write)
    _emit(list_trail(engine.trail), write)
    _emit(list_suspects(index), write)
    outcome = None
    while True:
        try:
            name = read_line(ACCUSE_PROMPT)
        except EOFError:
            write("Nenhuma acusacao feita.")
            break
        try:
            res = accuse(engine.clues, index, name)
        except ActionError as e:
            write(f"[ERRO] {e}")
            continue
        _emit(res, write)
        outcome = res["changes"]
        break
    released = release_tree(engine.root)
    logging.debug("released %d rooms", released)
    return outcome


def main():
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    try:
        # Forca saida UTF-8 no Windows para evitar erros 'charmap'
        sys.stdout.reconfigure(encoding='utf-8')
    except AttributeError:
        pass
    game_loop()


if __name__ == "__main__":
    main()
