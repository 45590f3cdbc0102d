"""Normalizer Tally — extração de email, nome e arquétipo.

Responsabilidades:
- Modelar os campos de ``data.fields`` (FormField)
- Aplicar regras ordenadas de matching por label/tipo
- Calcular o arquétipo pelos scores quando não vier explícito
"""

from .extractor import FieldExtractor, resolve_archetype, resolve_email, resolve_first_name
from .models import FormField, NormalizedSubmission
from .rules import FieldRule, apply_rules
from .scoring import DEFAULT_ARCHETYPE_SCORES, ArchetypeScoreMap, compute_archetype_from_scores

__all__ = [
    "DEFAULT_ARCHETYPE_SCORES",
    "ArchetypeScoreMap",
    "FieldExtractor",
    "FieldRule",
    "FormField",
    "NormalizedSubmission",
    "apply_rules",
    "compute_archetype_from_scores",
    "resolve_archetype",
    "resolve_email",
    "resolve_first_name",
]
