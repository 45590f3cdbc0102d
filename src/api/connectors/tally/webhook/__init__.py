"""Webhook Tally: assinatura e parsing seguro."""

from ..signature import SignatureResult, check_tally_signature
from .receive import (
    PayloadParseError,
    TallyPayload,
    extract_form_fields,
    parse_webhook_body,
    verify_webhook_request,
)

__all__ = [
    "PayloadParseError",
    "SignatureResult",
    "TallyPayload",
    "check_tally_signature",
    "extract_form_fields",
    "parse_webhook_body",
    "verify_webhook_request",
]
