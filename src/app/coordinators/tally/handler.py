"""Processamento de submissão verificada: extrai campos e encaminha ao MailerLite.

Chamado pela rota somente após assinatura válida e parse bem-sucedido.
Email ausente e falha do MailerLite respondem 200 para que o Tally não
reenvie uma submissão que nunca vai ser aceita.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from utils.errors import SubscriberApiNotConfiguredError

if TYPE_CHECKING:
    from api.connectors.tally.webhook.receive import TallyPayload
    from app.protocols.normalizer import SubmissionExtractorProtocol
    from app.protocols.subscriber_client import SubscriberClientProtocol

logger = logging.getLogger(__name__)

SubscriberClientFactory = Callable[[], "SubscriberClientProtocol"]


@dataclass(frozen=True)
class WebhookOutcome:
    """Status HTTP e corpo JSON da resposta ao Tally."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)


async def process_submission(
    payload: TallyPayload,
    *,
    extractor: SubmissionExtractorProtocol,
    client_factory: SubscriberClientFactory,
    debug: bool = False,
) -> WebhookOutcome:
    """Extrai email/nome/arquétipo e faz upsert do assinante.

    Args:
        payload: Payload já verificado e parseado
        extractor: Extrator de campos (FieldExtractor)
        client_factory: Cria o cliente MailerLite; levanta
            SubscriberApiNotConfiguredError se faltar credencial
        debug: Loga o registro normalizado (DEBUG_TALLY=1)

    Returns:
        WebhookOutcome com status e corpo da resposta

    Raises:
        DownstreamError: Falha de transporte até o MailerLite
    """
    submission = extractor.extract(payload.fields)

    if debug:
        logger.info("tally_submission_normalized", extra=submission.as_log_dict())

    if not submission.has_email:
        logger.warning(
            "tally_submission_missing_email",
            extra={"field_count": len(payload.fields), "archetype": submission.archetype},
        )
        return WebhookOutcome(
            status_code=200,
            body={"ok": False, "reason": "missing_email", "archetype": submission.archetype},
        )

    try:
        client = client_factory()
    except SubscriberApiNotConfiguredError:
        logger.error("mailerlite_not_configured")
        return WebhookOutcome(
            status_code=500,
            body={"ok": False, "error": "MailerLite not configured"},
        )

    result = await client.upsert_subscriber(submission)

    if not result.ok:
        # 200 para o Tally não reenviar
        return WebhookOutcome(
            status_code=200,
            body={"ok": False, "mailerlite_status": result.status_code, "error": result.data},
        )

    logger.info(
        "tally_submission_forwarded",
        extra={"archetype": submission.archetype, "status_code": result.status_code},
    )
    return WebhookOutcome(
        status_code=200,
        body={
            "ok": True,
            "subscribed": {"email": submission.email, "group": client.group_id},
            "mailerlite": result.data,
        },
    )
