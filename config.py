"""Configuracao central para Detective Quest.

Aqui centralizamos os parametros ajustaveis do jogo (tamanho da tabela hash
de suspeitos, nivel de log, largura do texto). Todos os valores tem um
default razoavel e podem ser sobrescritos via variaveis de ambiente.
"""
from __future__ import annotations
import logging
import os


def _get_int_env(name: str, default: int, minval: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        v = int(raw)
        if minval is not None and v < minval:
            return default
        return v
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


# ---------------- Indice de suspeitos ----------------
# Numero de buckets da tabela hash (qualquer primo de grandeza parecida serve)
DEFAULT_BUCKET_COUNT: int = 101

# Nome da variavel de ambiente para override
ENV_BUCKET_COUNT = "DQ_BUCKET_COUNT"


def get_bucket_count() -> int:
    """Retorna o numero de buckets a usar no SuspectIndex.

    Ordem de precedencia:
    1. Variavel de ambiente DQ_BUCKET_COUNT (se inteiro >= 1)
    2. DEFAULT_BUCKET_COUNT
    """
    return _get_int_env(ENV_BUCKET_COUNT, DEFAULT_BUCKET_COUNT, minval=1)


# ---------------- Logging ----------------
DEFAULT_LOG_LEVEL: str = "WARNING"


def get_log_level() -> int:
    """Nivel numerico de logging. Var: DQ_LOG_LEVEL (default WARNING).

    Nomes desconhecidos caem no default.
    """
    name = _get_str_env("DQ_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


# ---------------- CLI ----------------
def get_text_width() -> int:
    """Largura de quebra das linhas narrativas. Var: DQ_TEXT_WIDTH (default 78)."""
    return _get_int_env("DQ_TEXT_WIDTH", 78, minval=20)


__all__ = [
    "DEFAULT_BUCKET_COUNT", "ENV_BUCKET_COUNT", "get_bucket_count",
    "DEFAULT_LOG_LEVEL", "get_log_level",
    "get_text_width",
]
