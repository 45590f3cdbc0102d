"""Payload builders por integração — construção de payloads para APIs externas.

Estrutura:
- mailerlite/: API de assinantes do MailerLite
"""

__all__: list[str] = []
