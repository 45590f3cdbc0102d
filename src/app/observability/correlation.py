"""correlation_id por request do webhook.

O valor vem do header ``x-correlation-id`` quando o chamador envia um
identificador utilizável; caso contrário um UUID novo é gerado. Fica em
um ContextVar, então cada request async enxerga apenas o seu.

Uso:
    token = set_correlation_id(correlation_id_from_headers(request.headers))
    try:
        ...
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import re
import uuid
from collections.abc import Mapping
from contextvars import ContextVar, Token

CORRELATION_HEADER = "x-correlation-id"

# Valores aceitos do header; o resto é descartado para não poluir os logs
_ACCEPTED_ID = re.compile(r"[A-Za-z0-9._:-]{1,128}")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())


def correlation_id_from_headers(headers: Mapping[str, str]) -> str:
    """Extrai o correlation_id dos headers ou gera um novo.

    Args:
        headers: Headers do request (lookup case-insensitive esperado).

    Returns:
        Header recebido, se válido; senão UUID novo.
    """
    candidate = (headers.get(CORRELATION_HEADER) or "").strip()
    if _ACCEPTED_ID.fullmatch(candidate):
        return candidate
    return generate_correlation_id()


def get_correlation_id() -> str:
    """Retorna o correlation_id do request atual ("" fora de um request)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id do contexto; None gera um novo."""
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o valor anterior ao set_correlation_id correspondente."""
    _correlation_id.reset(token)
