"""Cálculo do arquétipo a partir dos scores do quiz.

Fallback quando nenhum campo traz o arquétipo explicitamente: entre os
campos calculados ``score_*`` conhecidos, vence o maior valor numérico.
Empates mantêm o primeiro encontrado.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from .models import CALCULATED_FIELDS, FormField

ArchetypeScoreMap = Mapping[str, str]

DEFAULT_ARCHETYPE_SCORES: ArchetypeScoreMap = MappingProxyType(
    {
        "score_scroller": "Scroller",
        "score_binger": "Binger",
        "score_escapist": "Escapist",
        "score_juggler": "Juggler",
        "score_overthinker": "Overthinker",
        "score_chaser": "Chaser",
        "score_muted": "Muted",
        "score_none": "None",
    }
)


def _numeric_score(value: object) -> int | float | None:
    # bool é subclasse de int e não conta como score
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    # int é sempre finito; math.isfinite estoura com ints enormes
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def compute_archetype_from_scores(
    fields: Sequence[FormField],
    score_map: ArchetypeScoreMap = DEFAULT_ARCHETYPE_SCORES,
) -> str | None:
    """Retorna o nome do arquétipo com maior score, ou None."""
    best_label: str | None = None
    best_value: int | float | None = None

    for field in fields:
        if field.type != CALCULATED_FIELDS:
            continue
        display_name = score_map.get(field.label_lower)
        if display_name is None:
            continue
        score = _numeric_score(field.value)
        if score is None:
            continue
        if best_value is None or score > best_value:
            best_label, best_value = display_name, score

    return best_label
