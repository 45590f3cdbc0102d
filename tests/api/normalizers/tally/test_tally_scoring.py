"""Testes do cálculo de arquétipo pelos scores."""

from __future__ import annotations

import pytest

from api.normalizers.tally.models import FormField
from api.normalizers.tally.scoring import (
    DEFAULT_ARCHETYPE_SCORES,
    compute_archetype_from_scores,
)


def _score(label: str, value: object, field_type: str = "CALCULATED_FIELDS") -> FormField:
    return FormField(label=label, type=field_type, value=value)


def test_highest_score_wins() -> None:
    fields = [_score("score_scroller", 2), _score("score_juggler", 9), _score("score_muted", 4)]
    assert compute_archetype_from_scores(fields) == "Juggler"


def test_tie_keeps_first_seen() -> None:
    fields = [_score("score_binger", 5), _score("score_chaser", 5)]
    assert compute_archetype_from_scores(fields) == "Binger"


def test_labels_are_matched_lowercased() -> None:
    assert compute_archetype_from_scores([_score("SCORE_Overthinker", 1)]) == "Overthinker"


def test_score_none_maps_to_display_name() -> None:
    assert compute_archetype_from_scores([_score("score_none", 3)]) == "None"


def test_unknown_labels_and_other_types_are_ignored() -> None:
    fields = [
        _score("score_unknown", 100),
        _score("score_escapist", 100, field_type="INPUT_NUMBER"),
        _score("score_escapist", 1),
    ]
    assert compute_archetype_from_scores(fields) == "Escapist"


@pytest.mark.parametrize("value", ["7", None, True, float("nan"), float("inf")])
def test_non_numeric_values_are_ignored(value: object) -> None:
    fields = [_score("score_binger", value), _score("score_chaser", 1)]
    assert compute_archetype_from_scores(fields) == "Chaser"


def test_negative_and_float_scores() -> None:
    fields = [_score("score_binger", -1), _score("score_chaser", -0.5)]
    assert compute_archetype_from_scores(fields) == "Chaser"


def test_no_qualifying_fields_returns_none() -> None:
    assert compute_archetype_from_scores([]) is None
    assert compute_archetype_from_scores([_score("Email", 1)]) is None


def test_custom_score_map_is_honoured() -> None:
    fields = [_score("score_a", 1), _score("score_binger", 10)]
    assert compute_archetype_from_scores(fields, {"score_a": "Alpha"}) == "Alpha"


def test_default_map_is_read_only() -> None:
    assert len(DEFAULT_ARCHETYPE_SCORES) == 8
    with pytest.raises(TypeError):
        DEFAULT_ARCHETYPE_SCORES["score_new"] = "New"  # type: ignore[index]


def test_huge_integer_score_is_compared_without_overflow() -> None:
    huge = int("9" * 400)
    fields = [_score("score_chaser", 1e300), _score("score_binger", huge)]
    assert compute_archetype_from_scores(fields) == "Binger"
