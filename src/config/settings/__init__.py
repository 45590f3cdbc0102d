"""Agregador de settings do webhook Tally → MailerLite.

Re-exporta todas as settings e funções de cada módulo.
Organização por integração para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Integração de saída
from config.settings.mailerlite import (
    MAILERLITE_API_BASE_URL,
    MailerLiteSettings,
    get_mailerlite_settings,
)

# Webhook de entrada
from config.settings.tally import (
    DEFAULT_SIGNATURE_HEADER,
    TallySettings,
    get_tally_settings,
)

__all__ = [
    # Constants
    "DEFAULT_SIGNATURE_HEADER",
    "MAILERLITE_API_BASE_URL",
    # Base
    "BaseSettings",
    "Environment",
    # Integrações
    "MailerLiteSettings",
    "TallySettings",
    "get_base_settings",
    "get_mailerlite_settings",
    "get_tally_settings",
]
