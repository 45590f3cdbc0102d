"""Endpoint de webhook do Tally.

Endpoints:
- POST /api/tally-webhook: submissão de formulário
- Demais métodos: resposta "alive" (usada como health check), sem efeitos

Fluxo do POST:
1. Secret configurado (senão 500)
2. Lê o corpo bruto e valida a assinatura HMAC (senão 401)
3. Só então parseia o JSON (senão 400)
4. Extrai campos e encaminha ao MailerLite

Segurança:
- Assinatura sempre obrigatória, sem modo de bypass
- Erros inesperados viram 400 genérico; detalhe só no log do servidor
- Email ausente e falha do MailerLite respondem 200 para evitar retry do Tally
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.connectors.tally.signature import signature_preview
from api.connectors.tally.webhook.receive import (
    PayloadParseError,
    parse_webhook_body,
    verify_webhook_request,
)
from app.bootstrap import create_subscriber_client, get_field_extractor
from app.coordinators.tally.handler import process_submission
from app.observability import (
    correlation_id_from_headers,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.settings import get_tally_settings

logger = logging.getLogger(__name__)

router = APIRouter()

TALLY_WEBHOOK_PATH = "/api/tally-webhook"

ALIVE_METHODS = ["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"]

ALIVE_BODY = {"message": "Webhook is live, but use POST"}


@router.api_route("", methods=ALIVE_METHODS)
async def webhook_alive() -> dict[str, str]:
    """Confirma que o endpoint está no ar; apenas POST é processado."""
    return dict(ALIVE_BODY)


async def method_not_allowed_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> Response:
    """Exception handler HTTP do app.

    Verbos fora de ALIVE_METHODS (TRACE, WebDAV, customizados) chegam aqui
    como 405; no path do webhook respondem o mesmo alive. Demais erros
    seguem o handler padrão do FastAPI.
    """
    if (
        exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        and request.url.path == TALLY_WEBHOOK_PATH
    ):
        return JSONResponse(content=dict(ALIVE_BODY))
    return await http_exception_handler(request, exc)


@router.post("", response_model=None)
async def receive_webhook(request: Request) -> JSONResponse:
    """Recebimento de submissões do Tally.

    Returns:
        JSONResponse com status conforme o resultado do processamento.
    """
    token = set_correlation_id(correlation_id_from_headers(request.headers))

    try:
        return await _handle_submission(request)
    except Exception:
        logger.exception(
            "tally_webhook_failed",
            extra={"correlation_id": get_correlation_id()},
        )
        return JSONResponse(
            content={"ok": False, "error": "Handler error"},
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    finally:
        reset_correlation_id(token)


async def _handle_submission(request: Request) -> JSONResponse:
    settings = get_tally_settings()

    # Corpo bruto exatamente como enviado, antes de qualquer parse
    raw_body = await request.body()

    if not settings.signing_secret:
        logger.error("tally_signing_secret_missing")
        return JSONResponse(
            content={"error": "Server not configured"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    signature_result = verify_webhook_request(
        raw_body,
        request.headers,
        settings.signing_secret,
        signature_header=settings.signature_header,
    )
    if not signature_result.valid:
        extra: dict[str, object] = {"error": signature_result.error}
        if settings.debug:
            extra.update(
                signature_preview(request.headers.get(settings.signature_header), raw_body)
            )
        logger.warning("tally_signature_invalid", extra=extra)
        return JSONResponse(
            content={"error": "Invalid signature"},
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    parsed = parse_webhook_body(raw_body)
    if isinstance(parsed, PayloadParseError):
        logger.warning("tally_payload_invalid", extra={"reason": parsed.reason})
        return JSONResponse(
            content={"ok": False, "error": "Invalid payload", "reason": parsed.reason},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    logger.info(
        "tally_webhook_received",
        extra={"payload_size": len(raw_body), "field_count": len(parsed.fields)},
    )

    outcome = await process_submission(
        parsed,
        extractor=get_field_extractor(),
        client_factory=create_subscriber_client,
        debug=settings.debug,
    )
    return JSONResponse(content=outcome.body, status_code=outcome.status_code)
