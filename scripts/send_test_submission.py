#!/usr/bin/env python3
"""Envia uma submissao Tally assinada para o webhook (teste local).

Uso:
    TALLY_SIGNING_SECRET=... python scripts/send_test_submission.py \
        --url http://localhost:8080/api/tally-webhook --email ana@example.com

Padrao: arquetipo calculado pelos scores (score_binger vence).
"""

from __future__ import annotations

import argparse
import json
import os
import sys
import time
from pathlib import Path

import httpx

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from api.connectors.tally.signature import sign_tally_payload  # noqa: E402


def build_submission(email: str, first_name: str) -> dict[str, object]:
    return {
        "eventType": "FORM_RESPONSE",
        "data": {
            "fields": [
                {"label": "First name", "type": "INPUT_TEXT", "value": first_name},
                {"label": "Email", "type": "INPUT_EMAIL", "value": email},
                {"label": "score_scroller", "type": "CALCULATED_FIELDS", "value": 3},
                {"label": "score_binger", "type": "CALCULATED_FIELDS", "value": 7},
                {"label": "score_chaser", "type": "CALCULATED_FIELDS", "value": 7},
            ]
        },
    }


def send_submission(url: str, secret: str, email: str, first_name: str) -> httpx.Response:
    raw_body = json.dumps(build_submission(email, first_name)).encode("utf-8")
    header = sign_tally_payload(raw_body, str(int(time.time() * 1000)), secret)
    return httpx.post(
        url,
        content=raw_body,
        headers={"Content-Type": "application/json", "tally-signature": header},
        timeout=15.0,
    )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--url",
        default="http://localhost:8080/api/tally-webhook",
        help="URL do webhook.",
    )
    parser.add_argument("--email", default="test@example.com", help="Email do respondente.")
    parser.add_argument("--first-name", default="Test", help="Primeiro nome do respondente.")
    parser.add_argument(
        "--secret",
        default=os.getenv("TALLY_SIGNING_SECRET", ""),
        help="Secret de assinatura. Padrao: TALLY_SIGNING_SECRET.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    if not args.secret:
        sys.exit("TALLY_SIGNING_SECRET ausente (use --secret)")
    response = send_submission(args.url, args.secret, args.email, args.first_name)
    print(f"[{response.status_code}] {response.text}")


if __name__ == "__main__":
    main()
