"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos usados pelo coordinator.

Uso:
    from app.bootstrap import initialize_app, get_field_extractor

    # Na inicialização do serviço
    initialize_app()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_mailerlite_settings,
    get_tally_settings,
)

if TYPE_CHECKING:
    from api.connectors.mailerlite import MailerLiteClient
    from api.normalizers.tally import FieldExtractor

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (nível DEBUG)."""
    base = get_base_settings()
    configure_logging(
        level="DEBUG",
        service_name=f"{base.service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local; os
    requests continuam respondendo 500 enquanto faltar configuração.
    """
    base = get_base_settings()
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"tally: {error}" for error in get_tally_settings().validate())
    errors.extend(f"mailerlite: {error}" for error in get_mailerlite_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_field_extractor() -> FieldExtractor:
    """Obtém o extrator de campos (imutável, compartilhado entre requests)."""
    from api.normalizers.tally import DEFAULT_ARCHETYPE_SCORES, FieldExtractor

    return FieldExtractor(score_map=DEFAULT_ARCHETYPE_SCORES)


def create_subscriber_client() -> MailerLiteClient:
    """Cria cliente MailerLite por request.

    Raises:
        SubscriberApiNotConfiguredError: Se faltar API key ou group id
    """
    from api.connectors.mailerlite import create_mailerlite_client

    return create_mailerlite_client(get_mailerlite_settings())
