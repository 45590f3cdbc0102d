"""Normalizers por integração — conversão de payloads externos para modelos internos.

Estrutura:
- tally/: extração de email, primeiro nome e arquétipo das submissões
"""

from .tally import FieldExtractor, NormalizedSubmission

__all__ = [
    "FieldExtractor",
    "NormalizedSubmission",
]
