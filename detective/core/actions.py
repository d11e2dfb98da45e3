"""Player-facing actions: turn engine outcomes into narrative lines.

Returns ActionResult dicts with keys:
- lines: List[str] narrative lines to display
- hints: List[str] available directions / short summaries
- changes: dict summarizing state changes
"""
from __future__ import annotations
from typing import Dict, Iterable, List
import textwrap

from config import get_text_width
from .clues import ClueSet, InsertOutcome
from .suspects import SuspectIndex
from .exploration import Visit, StepResult, Transition
from .verdict import judge


class ActionError(Exception):
    pass


def _wrap(text: str, width: int | None = None) -> list[str]:
    if width is None:
        width = get_text_width()
    blocks = []
    for paragraph in text.split("\n"):
        if not paragraph.strip():
            blocks.append("")
            continue
        blocks.extend(textwrap.wrap(paragraph, width=width))
    return blocks


_BLOCKED_REASONS = {
    Transition.BLOCKED_LEFT: "Nao ha caminho a esquerda.",
    Transition.BLOCKED_RIGHT: "Nao ha caminho a direita.",
    Transition.INVALID: "Opcao invalida. Tente novamente.",
}


def welcome() -> Dict[str, object]:
    return {"lines": ["Bem-vindo(a) ao Detective Quest!"], "hints": [], "changes": {}}


def _directions(visit: Visit) -> List[str]:
    return [
        "(e) esquerda" + ("" if visit.can_go_left else " (indisponivel)"),
        "(d) direita" + ("" if visit.can_go_right else " (indisponivel)"),
        "(s) sair",
    ]


def describe_visit(visit: Visit) -> Dict[str, object]:
    lines: List[str] = ["", f"Voce esta em: {visit.room.name}"]
    if visit.clue_outcome is None:
        lines.append("Nenhuma pista neste comodo.")
    elif visit.clue_outcome is InsertOutcome.INSERTED:
        lines.extend(_wrap(f"Pista encontrada: {visit.room.clue} (nova!)"))
    else:
        lines.extend(_wrap(f"Pista encontrada: {visit.room.clue} (ja coletada)"))
    hints: List[str] = []
    if visit.dead_end:
        lines.append("Este comodo nao possui mais caminhos. Exploracao encerrada.")
    else:
        hints = _directions(visit)
        lines.append("Escolha o caminho: " + " | ".join(hints))
    return {
        "lines": lines,
        "hints": hints,
        "changes": {
            "location": visit.room.name,
            "clue": visit.clue_outcome.value if visit.clue_outcome else None,
            "stopped": visit.dead_end,
        },
    }


def describe_step(result: StepResult) -> Dict[str, object]:
    if result.transition is Transition.STOPPED:
        return {"lines": ["Saindo da exploracao."], "hints": [], "changes": {"stopped": True}}
    if result.visit is not None:
        return describe_visit(result.visit)
    reason = _BLOCKED_REASONS[result.transition]
    return {"lines": [reason], "hints": [], "changes": {}}


def list_clues(clues: ClueSet) -> Dict[str, object]:
    lines = ["Pistas coletadas (em ordem alfabetica):"]
    items = list(clues.inorder())
    if not items:
        lines.append("- nenhuma")
    for text in items:
        lines.extend(_wrap(f"- {text}"))
    return {"lines": lines, "hints": items, "changes": {}}


def list_trail(trail: Iterable[str]) -> Dict[str, object]:
    rooms = list(trail)
    lines = ["Comodos visitados:"]
    lines.extend(_wrap(" -> ".join(rooms) if rooms else "nenhum"))
    return {"lines": lines, "hints": rooms, "changes": {}}


def list_suspects(index: SuspectIndex) -> Dict[str, object]:
    names = index.suspects()
    return {"lines": ["Suspeitos: " + ", ".join(names)], "hints": names, "changes": {}}


def accuse(clues: ClueSet, index: SuspectIndex, name: str) -> Dict[str, object]:
    accused = (name or "").strip()
    if not accused:
        raise ActionError("Nome do suspeito invalido.")
    report = judge(clues, index, accused)
    lines: List[str] = []
    if report.supporting:
        lines.append("Pistas que apontam para o acusado:")
        for text in report.supporting:
            lines.extend(_wrap(f"- {text}"))
    if report.sustained:
        lines.extend(_wrap(
            f"Acusacao sustentada! {report.accused} e apontado(a) por {report.count} pistas. Caso encerrado."
        ))
    else:
        lines.extend(_wrap(
            f"Acusacao sem provas suficientes contra {report.accused}: apenas {report.count} pista(s). "
            "Sao necessarias pelo menos 2."
        ))
    return {
        "lines": lines,
        "hints": report.supporting,
        "changes": {"verdict": report.verdict.value, "count": report.count, "accused": report.accused},
    }
