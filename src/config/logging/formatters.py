"""Formatter JSON dos logs do webhook.

Todo record sai como um objeto JSON com os campos de REQUIRED_LOG_FIELDS
(renomeados conforme FIELD_RENAME_MAP) mais o conteúdo de ``extra``.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "timestamp": "2026-10-19T10:30:00+0000",
            "level": "WARNING",
            "logger": "api.routes.tally.webhook",
            "message": "tally_signature_invalid",
            "correlation_id": "abc-123",
            "service": "tally-mailerlite-webhook",
            "error": "signature_mismatch"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )
