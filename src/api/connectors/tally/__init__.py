"""Connector Tally — verificação de assinatura e parse de submissões."""

from .signature import (
    SignatureHeader,
    SignatureResult,
    check_tally_signature,
    parse_signature_header,
    sign_tally_payload,
    verify_tally_signature,
)

__all__ = [
    "SignatureHeader",
    "SignatureResult",
    "check_tally_signature",
    "parse_signature_header",
    "sign_tally_payload",
    "verify_tally_signature",
]
