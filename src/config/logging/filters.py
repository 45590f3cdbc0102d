"""Filters de logging: contexto do request e mascaramento de email.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço

Emails só aparecem mascarados (``j***@example.com``).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Atributos de record que podem carregar email
EMAIL_ATTRIBUTES: tuple[str, ...] = ("email",)


def mask_email(email: str | None) -> str | None:
    """Mascara a parte local do email, preservando o domínio."""
    if not email:
        return email
    local, sep, domain = email.partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        # correlation_id passado via `extra` tem precedência
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class EmailMaskingFilter(logging.Filter):
    """Substitui emails em atributos conhecidos por versão mascarada."""

    def filter(self, record: logging.LogRecord) -> bool:
        for attribute in EMAIL_ATTRIBUTES:
            value = getattr(record, attribute, None)
            if isinstance(value, str):
                setattr(record, attribute, mask_email(value))
        return True
