"""Payload builders para MailerLite."""

from .subscriber import build_subscriber_payload

__all__ = ["build_subscriber_payload"]
