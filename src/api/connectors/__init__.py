"""Connectors por integração — adapters de borda para APIs externas.

Estrutura:
- tally/: verificação de assinatura e parsing do webhook
- mailerlite/: upsert de assinantes
- http_base.py: cliente HTTP assíncrono compartilhado

Cada integração tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
