"""Tests for the terminal loop with scripted input."""

from run import game_loop


def _script(*answers):
    it = iter(answers)

    def read_line(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read_line


def _play(*answers):
    out = []
    outcome = game_loop(_script(*answers), out.append)
    return outcome, out


def test_full_game_sustained():
    outcome, out = _play("d", "D", "intruso")
    assert outcome == {"verdict": "sustained", "count": 2, "accused": "intruso"}
    assert "Bem-vindo(a) ao Detective Quest!" in out
    assert "Voce esta em: Escritorio" in out
    assert "Hall de Entrada -> Jardim -> Escritorio" in out


def test_invalid_and_blank_accusation():
    outcome, out = _play("x", "e", "s", "", "Morador")
    assert "Opcao invalida. Tente novamente." in out
    assert "Saindo da exploracao." in out
    assert "[ERRO] Nome do suspeito invalido." in out
    assert outcome["verdict"] == "unsustained"
    assert outcome["count"] == 1


def test_eof_ends_without_accusation():
    outcome, out = _play("e")
    assert outcome is None
    assert "Nenhuma acusacao feita." in out
    assert "- Pegadas recentes no tapete." in out
