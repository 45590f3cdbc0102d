"""Connector MailerLite — upsert de assinantes via API HTTP."""

from .http_client import MailerLiteClient, create_mailerlite_client
from .models import SubscriberUpsertResult, parse_response_body

__all__ = [
    "MailerLiteClient",
    "SubscriberUpsertResult",
    "create_mailerlite_client",
    "parse_response_body",
]
