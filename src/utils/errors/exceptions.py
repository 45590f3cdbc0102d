"""Exceções de domínio do webhook Tally → MailerLite.

Apenas falhas que interrompem o request viram exceção:
- ConfigurationError: configuração local ausente (HTTP 500)
- DownstreamError: falha de transporte até a API de assinantes

Assinatura inválida, JSON inválido, email ausente e erro de negócio do
MailerLite são resultados explícitos (ver SignatureResult, PayloadParseError
e WebhookOutcome), não exceções.
"""

from __future__ import annotations


class WebhookError(Exception):
    """Base para falhas do pipeline de webhook."""


class ConfigurationError(WebhookError):
    """Configuração obrigatória ausente ou inválida."""


class MissingSigningSecretError(ConfigurationError):
    """TALLY_SIGNING_SECRET não configurado."""


class SubscriberApiNotConfiguredError(ConfigurationError):
    """Credenciais do MailerLite ausentes."""


class DownstreamError(WebhookError):
    """Falha de transporte ao chamar a API de assinantes."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
