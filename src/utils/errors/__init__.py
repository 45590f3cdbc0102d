"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    DownstreamError,
    MissingSigningSecretError,
    SubscriberApiNotConfiguredError,
    WebhookError,
)

__all__ = [
    "ConfigurationError",
    "DownstreamError",
    "MissingSigningSecretError",
    "SubscriberApiNotConfiguredError",
    "WebhookError",
]
