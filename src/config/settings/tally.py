"""Settings específicas do Tally.

Configurações do webhook de submissões de formulário do Tally.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Header enviado pelo Tally com "t=<timestamp>,v1=<hmac hex>"
DEFAULT_SIGNATURE_HEADER: str = "tally-signature"


@dataclass(frozen=True)
class TallySettings:
    """Configurações do webhook Tally.

    Attributes:
        signing_secret: Secret compartilhado para validação HMAC
        signature_header: Nome do header de assinatura
        debug: Loga campos normalizados e prévia da assinatura (DEBUG_TALLY=1)
    """

    signing_secret: str = ""
    signature_header: str = DEFAULT_SIGNATURE_HEADER
    debug: bool = False

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Tally.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.signing_secret:
            errors.append("TALLY_SIGNING_SECRET não configurado")

        if not self.signature_header:
            errors.append("TALLY_SIGNATURE_HEADER não pode ser vazio")

        return errors


def _load_from_env() -> TallySettings:
    """Carrega TallySettings a partir de variáveis de ambiente."""
    return TallySettings(
        signing_secret=os.getenv("TALLY_SIGNING_SECRET", ""),
        signature_header=os.getenv(
            "TALLY_SIGNATURE_HEADER", DEFAULT_SIGNATURE_HEADER
        ).lower(),
        debug=os.getenv("DEBUG_TALLY", "") == "1",
    )


@lru_cache(maxsize=1)
def get_tally_settings() -> TallySettings:
    """Retorna instância cacheada de TallySettings."""
    return _load_from_env()
