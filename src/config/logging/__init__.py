"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="tally-mailerlite-webhook")
    logger = get_logger(__name__)

Campos em todo log: timestamp, level, logger, message, correlation_id, service.
Sem PII: emails são mascarados pelo EmailMaskingFilter.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter, EmailMaskingFilter, mask_email
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "EmailMaskingFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "mask_email",
]
