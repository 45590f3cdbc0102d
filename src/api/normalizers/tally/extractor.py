"""Extrator de campos semânticos da submissão Tally.

Resolve email, primeiro nome e arquétipo a partir de ``data.fields``.
Todas as resoluções são totais: retornam None quando nada casa.
"""

from __future__ import annotations

from collections.abc import Sequence

from .models import FormField, NormalizedSubmission
from .rules import ARCHETYPE_RULES, EMAIL_RULES, FIRST_NAME_RULES, apply_rules
from .scoring import DEFAULT_ARCHETYPE_SCORES, ArchetypeScoreMap, compute_archetype_from_scores


def resolve_email(fields: Sequence[FormField]) -> str | None:
    """Email por prioridade: tipo email, label, pagamento, texto com formato de email."""
    return apply_rules(EMAIL_RULES, fields)


def resolve_first_name(fields: Sequence[FormField]) -> str | None:
    return apply_rules(FIRST_NAME_RULES, fields)


def resolve_archetype(
    fields: Sequence[FormField],
    score_map: ArchetypeScoreMap = DEFAULT_ARCHETYPE_SCORES,
) -> str | None:
    """Arquétipo explícito (Archetype/Type/Result) ou calculado pelos scores."""
    return apply_rules(ARCHETYPE_RULES, fields) or compute_archetype_from_scores(
        fields, score_map
    )


class FieldExtractor:
    """Normaliza a lista de campos em NormalizedSubmission.

    O mapa de scores é injetado na construção e tratado como somente leitura.
    """

    def __init__(self, score_map: ArchetypeScoreMap = DEFAULT_ARCHETYPE_SCORES) -> None:
        self._score_map = score_map

    @property
    def score_map(self) -> ArchetypeScoreMap:
        return self._score_map

    def extract(self, fields: Sequence[FormField]) -> NormalizedSubmission:
        return NormalizedSubmission(
            email=resolve_email(fields),
            first_name=resolve_first_name(fields),
            archetype=resolve_archetype(fields, self._score_map),
        )
