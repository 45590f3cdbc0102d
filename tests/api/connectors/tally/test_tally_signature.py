"""Testes da validação de assinatura do Tally."""

from __future__ import annotations

import hashlib
import hmac

import pytest

from api.connectors.tally.signature import (
    check_tally_signature,
    parse_signature_header,
    sign_tally_payload,
    verify_tally_signature,
)
from utils.errors import ConfigurationError, MissingSigningSecretError

SECRET = "whsec_test"
TIMESTAMP = "1718000000000"
BODY = b'{"eventId":"e1","data":{"fields":[{"label":"Email","type":"INPUT_EMAIL","value":"a@b.com"}]}}'


def _header(body: bytes = BODY, secret: str = SECRET, timestamp: str = TIMESTAMP) -> str:
    digest = hmac.new(
        secret.encode("utf-8"),
        f"{timestamp}.".encode() + body,
        hashlib.sha256,
    ).hexdigest()
    return f"t={timestamp},v1={digest}"


def test_valid_signature_is_accepted() -> None:
    assert verify_tally_signature(BODY, _header(), SECRET) is True


def test_signature_is_deterministic() -> None:
    header = _header()
    assert all(verify_tally_signature(BODY, header, SECRET) for _ in range(3))


def test_sign_tally_payload_matches_manual_hmac() -> None:
    assert sign_tally_payload(BODY, TIMESTAMP, SECRET) == _header()


@pytest.mark.parametrize("index", [0, 10, len(BODY) - 1])
def test_flipping_a_body_byte_rejects(index: int) -> None:
    tampered = bytearray(BODY)
    tampered[index] ^= 0x01
    assert verify_tally_signature(bytes(tampered), _header(), SECRET) is False


def test_flipping_signature_hex_rejects() -> None:
    header = _header()
    last = header[-1]
    flipped = header[:-1] + ("0" if last != "0" else "1")
    result = check_tally_signature(BODY, flipped, SECRET)
    assert result.valid is False
    assert result.error == "signature_mismatch"


def test_different_secret_rejects() -> None:
    assert verify_tally_signature(BODY, _header(secret="other"), SECRET) is False


def test_reserialized_body_is_not_equivalent() -> None:
    reserialized = b'{"eventId": "e1", "data": {"fields": []}}'
    assert verify_tally_signature(reserialized, _header(), SECRET) is False


def test_missing_header_fails_closed() -> None:
    result = check_tally_signature(BODY, None, SECRET)
    assert result.valid is False
    assert result.error == "missing_signature"
    assert verify_tally_signature(BODY, "", SECRET) is False


@pytest.mark.parametrize(
    "header",
    ["garbage", "t=123", "v1=abcd", "t=,v1=abcd", "t=123,v1=", "t=123,v1=zz-not-hex"],
)
def test_malformed_header_fails_closed(header: str) -> None:
    result = check_tally_signature(BODY, header, SECRET)
    assert result.valid is False
    assert result.error == "malformed_signature"


def test_truncated_signature_returns_false_without_raising() -> None:
    header = _header()[:-8]
    assert verify_tally_signature(BODY, header, SECRET) is False


def test_uppercase_hex_is_accepted() -> None:
    timestamp, _, signature = _header().partition(",v1=")
    assert verify_tally_signature(BODY, f"{timestamp},v1={signature.upper()}", SECRET) is True


def test_header_parsing_tolerates_whitespace_and_order() -> None:
    digest = _header().split("v1=")[1]
    header = f"  v1 = {digest} ,  t = {TIMESTAMP}  "
    assert verify_tally_signature(BODY, header, SECRET) is True


def test_parse_signature_header_components() -> None:
    parsed = parse_signature_header("t=42,v1=abc,extra=1")
    assert parsed is not None
    assert parsed.timestamp == "42"
    assert parsed.signature == "abc"


def test_parse_signature_header_returns_none_for_blank() -> None:
    assert parse_signature_header("   ") is None
    assert parse_signature_header(None) is None


def test_empty_secret_is_configuration_error() -> None:
    with pytest.raises(MissingSigningSecretError):
        verify_tally_signature(BODY, _header(), "")
    assert issubclass(MissingSigningSecretError, ConfigurationError)
