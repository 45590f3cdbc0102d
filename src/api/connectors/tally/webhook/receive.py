"""Validação de assinatura e parse do corpo do webhook Tally (sem PII).

O corpo só é parseado depois que a assinatura foi validada sobre os
bytes brutos. Falhas de parse são retornadas como PayloadParseError em
vez de exceções, para que a rota decida o status HTTP.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from api.normalizers.tally.models import FormField

from ..signature import SignatureResult, check_tally_signature

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True)
class TallyPayload:
    """Payload parseado: dict original e campos tipados."""

    raw: dict[str, Any]
    fields: list[FormField] = field(default_factory=list)


@dataclass(frozen=True)
class PayloadParseError:
    """Falha de parse do corpo (invalid_json, invalid_encoding, payload_not_object)."""

    reason: str


def verify_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str,
    signature_header: str = "tally-signature",
) -> SignatureResult:
    """Valida a assinatura do request a partir dos headers recebidos.

    Raises:
        MissingSigningSecretError: Se o secret estiver vazio
    """
    header_value = _get_header(headers, signature_header)
    return check_tally_signature(raw_body, header_value, secret)


def parse_webhook_body(raw_body: bytes) -> TallyPayload | PayloadParseError:
    """Parseia ``{"data": {"fields": [...]}}``.

    ``data`` ou ``fields`` ausentes/inválidos resultam em lista vazia.
    """
    try:
        text = raw_body.decode("utf-8")
    except UnicodeDecodeError:
        return PayloadParseError("invalid_encoding")

    try:
        payload = json.loads(text)
    except json.JSONDecodeError:
        return PayloadParseError("invalid_json")

    if not isinstance(payload, dict):
        return PayloadParseError("payload_not_object")

    return TallyPayload(raw=payload, fields=extract_form_fields(payload))


def extract_form_fields(payload: Mapping[str, Any]) -> list[FormField]:
    """Extrai ``data.fields`` como FormField, ignorando itens que não são objetos."""
    data = payload.get("data")
    if not isinstance(data, dict):
        return []
    raw_fields = data.get("fields")
    if not isinstance(raw_fields, list):
        return []
    return [FormField.from_dict(item) for item in raw_fields if isinstance(item, dict)]


def _get_header(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None
