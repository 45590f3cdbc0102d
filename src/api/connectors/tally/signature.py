"""Validação de assinatura HMAC-SHA256 dos webhooks do Tally.

Formato do header: ``t=<timestamp>,v1=<hex>``. A base assinada é
``<timestamp>.<corpo bruto>``, sempre sobre os bytes exatamente como
recebidos; re-serializar o JSON parseado altera a base e invalida a
assinatura.
"""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass

from utils.errors import MissingSigningSecretError

TIMESTAMP_KEY = "t"
SIGNATURE_KEY = "v1"


@dataclass(frozen=True)
class SignatureHeader:
    """Componentes do header de assinatura."""

    timestamp: str
    signature: str


@dataclass(frozen=True)
class SignatureResult:
    """Resultado da validação de assinatura."""

    valid: bool
    error: str | None = None


def parse_signature_header(header: str | None) -> SignatureHeader | None:
    """Extrai ``t`` e ``v1`` do header; None se ausente ou incompleto."""
    if not header or not header.strip():
        return None

    parts: dict[str, str] = {}
    for chunk in header.split(","):
        key, sep, value = chunk.partition("=")
        if not sep:
            continue
        parts.setdefault(key.strip(), value.strip())

    timestamp = parts.get(TIMESTAMP_KEY)
    signature = parts.get(SIGNATURE_KEY)
    if not timestamp or not signature:
        return None
    return SignatureHeader(timestamp=timestamp, signature=signature)


def compute_tally_signature(raw_body: bytes, timestamp: str, secret: str) -> bytes:
    """Calcula o digest HMAC-SHA256 de ``<timestamp>.<raw_body>``."""
    message = timestamp.encode("utf-8") + b"." + raw_body
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def sign_tally_payload(raw_body: bytes, timestamp: str, secret: str) -> str:
    """Monta um header ``t=...,v1=...`` válido para o corpo informado."""
    digest = compute_tally_signature(raw_body, timestamp, secret)
    return f"{TIMESTAMP_KEY}={timestamp},{SIGNATURE_KEY}={digest.hex()}"


def check_tally_signature(
    raw_body: bytes,
    signature_header: str | None,
    secret: str,
) -> SignatureResult:
    """Valida a assinatura do Tally sobre o corpo bruto.

    Args:
        raw_body: Corpo bruto da requisição
        signature_header: Valor do header tally-signature
        secret: Secret de assinatura configurado no Tally

    Raises:
        MissingSigningSecretError: Se o secret estiver vazio

    Returns:
        SignatureResult com valid=True somente se o digest coincidir
    """
    if not secret:
        raise MissingSigningSecretError("missing_signing_secret")

    if not signature_header:
        return SignatureResult(valid=False, error="missing_signature")

    parsed = parse_signature_header(signature_header)
    if parsed is None:
        return SignatureResult(valid=False, error="malformed_signature")

    try:
        received = bytes.fromhex(parsed.signature)
    except ValueError:
        return SignatureResult(valid=False, error="malformed_signature")

    expected = compute_tally_signature(raw_body, parsed.timestamp, secret)
    # compare_digest aceita tamanhos distintos e retorna False
    if not hmac.compare_digest(expected, received):
        return SignatureResult(valid=False, error="signature_mismatch")

    return SignatureResult(valid=True)


def verify_tally_signature(
    raw_body: bytes,
    signature_header: str | None,
    secret: str,
) -> bool:
    """Atalho booleano para check_tally_signature."""
    return check_tally_signature(raw_body, signature_header, secret).valid


def signature_preview(signature_header: str | None, raw_body: bytes) -> dict[str, str]:
    """Prévia truncada do header e do corpo para logs de debug."""
    header = signature_header or ""
    return {
        "signature_header": header[:24],
        "raw_preview": raw_body[:150].decode("utf-8", "replace"),
    }
