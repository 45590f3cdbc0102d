"""Modelos de resposta da API de assinantes do MailerLite."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SubscriberUpsertResult:
    """Resultado do upsert de assinante.

    Attributes:
        ok: True para status 2xx
        status_code: Status HTTP retornado pelo MailerLite
        data: Corpo da resposta (JSON decodificado ou {"raw": texto})
    """

    ok: bool
    status_code: int
    data: Any


def parse_response_body(text: str) -> Any:
    """Decodifica o corpo da resposta; texto não-JSON vira ``{"raw": text}``."""
    if not text:
        return {}
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return {"raw": text}
