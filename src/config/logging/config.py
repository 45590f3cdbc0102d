"""Logging JSON do webhook: um único handler no root logger.

O app chama ``configure_logging`` uma vez no bootstrap; os módulos usam
``logging.getLogger(__name__)`` e logam eventos snake_case com ``extra``.
Todo record passa por CorrelationIdFilter e EmailMaskingFilter antes de
ser formatado.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TextIO

from config.logging.filters import CorrelationIdFilter, EmailMaskingFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "tally-mailerlite-webhook"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    stream: TextIO | None = None,
) -> None:
    """Instala o handler JSON no root logger, substituindo os existentes.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (case-insensitive).
        service_name: Valor do campo ``service``.
        correlation_id_getter: Fonte do ``correlation_id`` do request atual.
        stream: Destino dos logs; stderr quando None.

    Raises:
        ValueError: Nível de log desconhecido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler(stream)
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(EmailMaskingFilter())

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
