"""Settings específicas do MailerLite.

Configurações da API de assinantes (connect.mailerlite.com).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

MAILERLITE_API_BASE_URL: str = "https://connect.mailerlite.com/api"


@dataclass(frozen=True)
class MailerLiteSettings:
    """Configurações do MailerLite.

    Attributes:
        api_key: Token Bearer da API
        group_id: Grupo em que os assinantes são inscritos
        api_base_url: URL base da API
        request_timeout_seconds: Timeout para requisições HTTP
        source: Valor gravado no campo customizado "source"
    """

    api_key: str = ""
    group_id: str = ""
    api_base_url: str = MAILERLITE_API_BASE_URL
    request_timeout_seconds: float = 10.0
    source: str = "tally"

    @property
    def is_configured(self) -> bool:
        """True quando api_key e group_id estão presentes."""
        return bool(self.api_key and self.group_id)

    @property
    def subscribers_endpoint(self) -> str:
        """URL do endpoint de upsert de assinantes."""
        return f"{self.api_base_url.rstrip('/')}/subscribers"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do MailerLite.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key:
            errors.append("MAILERLITE_API_KEY não configurado")

        if not self.group_id:
            errors.append("MAILERLITE_GROUP_ID não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("MAILERLITE_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> MailerLiteSettings:
    """Carrega MailerLiteSettings a partir de variáveis de ambiente."""
    return MailerLiteSettings(
        api_key=os.getenv("MAILERLITE_API_KEY", ""),
        group_id=os.getenv("MAILERLITE_GROUP_ID", ""),
        api_base_url=os.getenv("MAILERLITE_API_BASE_URL", MAILERLITE_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("MAILERLITE_REQUEST_TIMEOUT_SECONDS", "10")
        ),
        source=os.getenv("MAILERLITE_SOURCE", "tally"),
    )


@lru_cache(maxsize=1)
def get_mailerlite_settings() -> MailerLiteSettings:
    """Retorna instância cacheada de MailerLiteSettings."""
    return _load_from_env()
