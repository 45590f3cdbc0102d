"""Testes do FieldExtractor (email, primeiro nome, arquétipo)."""

from __future__ import annotations

from api.connectors.tally.webhook.receive import parse_webhook_body
from api.normalizers.tally import (
    FieldExtractor,
    FormField,
    NormalizedSubmission,
    resolve_archetype,
    resolve_email,
    resolve_first_name,
)


def _field(label: str | None, field_type: str, value: object) -> FormField:
    return FormField(label=label, type=field_type, value=value)


class TestResolveEmail:
    """Prioridade de resolução do email."""

    def test_typed_email_field_wins_over_text_pattern(self) -> None:
        fields = [
            _field(None, "INPUT_TEXT", "a@b.com"),
            _field(None, "INPUT_EMAIL", "c@d.com"),
        ]
        assert resolve_email(fields) == "c@d.com"

    def test_label_containing_email(self) -> None:
        fields = [_field("Your email address", "INPUT_TEXT", "  me@site.org ")]
        assert resolve_email(fields) == "me@site.org"

    def test_label_match_beats_text_pattern(self) -> None:
        fields = [
            _field("Comment", "TEXTAREA", "other@x.io"),
            _field("Work Email", "INPUT_TEXT", "work@x.io"),
        ]
        assert resolve_email(fields) == "work@x.io"

    def test_payment_block_email(self) -> None:
        fields = [_field("Payment (email)", "PAYMENT", "buyer@shop.com")]
        assert resolve_email(fields) == "buyer@shop.com"

    def test_text_pattern_fallback(self) -> None:
        fields = [
            _field("Anything else?", "TEXTAREA", "not an email"),
            _field("Contact", "INPUT_TEXT", "late@fallback.dev"),
        ]
        assert resolve_email(fields) == "late@fallback.dev"

    def test_no_email_returns_none(self) -> None:
        fields = [_field("Name", "INPUT_TEXT", "Ana"), _field("Age", "INPUT_NUMBER", 30)]
        assert resolve_email(fields) is None

    def test_empty_typed_email_falls_through(self) -> None:
        fields = [_field("Email", "INPUT_EMAIL", None), _field("Other", "INPUT_TEXT", "x@y.com")]
        assert resolve_email(fields) == "x@y.com"


class TestResolveFirstName:
    """Labels conhecidos e fallback de pagamento."""

    def test_label_variants_are_case_insensitive(self) -> None:
        assert resolve_first_name([_field("FIRST NAME", "INPUT_TEXT", " Ana ")]) == "Ana"
        assert resolve_first_name([_field("Vorname", "INPUT_TEXT", "Jonas")]) == "Jonas"
        assert resolve_first_name([_field("first_name", "INPUT_TEXT", "Li")]) == "Li"

    def test_label_list_order_beats_field_order(self) -> None:
        fields = [_field("Name", "INPUT_TEXT", "Full Name"), _field("First name", "INPUT_TEXT", "Ana")]
        assert resolve_first_name(fields) == "Ana"

    def test_partial_label_does_not_match(self) -> None:
        assert resolve_first_name([_field("Company name", "INPUT_TEXT", "ACME")]) is None

    def test_payment_name_fallback(self) -> None:
        fields = [_field("Payment (name)", "PAYMENT", "Carla Souza")]
        assert resolve_first_name(fields) == "Carla Souza"

    def test_missing_is_none(self) -> None:
        assert resolve_first_name([]) is None


class TestResolveArchetype:
    """Arquétipo explícito e fallback por scores."""

    def test_explicit_label(self) -> None:
        fields = [
            _field("result", "INPUT_TEXT", " Escapist "),
            _field("score_binger", "CALCULATED_FIELDS", 10),
        ]
        assert resolve_archetype(fields) == "Escapist"

    def test_label_order_archetype_before_type(self) -> None:
        fields = [_field("Type", "INPUT_TEXT", "A"), _field("Archetype", "INPUT_TEXT", "B")]
        assert resolve_archetype(fields) == "B"

    def test_empty_explicit_value_falls_back_to_scores(self) -> None:
        fields = [
            _field("Archetype", "INPUT_TEXT", ""),
            _field("score_muted", "CALCULATED_FIELDS", 2),
        ]
        assert resolve_archetype(fields) == "Muted"

    def test_none_when_nothing_matches(self) -> None:
        assert resolve_archetype([_field("Email", "INPUT_EMAIL", "a@b.com")]) is None


class TestFieldExtractor:
    """Extração completa."""

    def test_extract_full_submission(self) -> None:
        fields = [
            _field("First name", "INPUT_TEXT", "Ana"),
            _field("Email", "INPUT_EMAIL", "ana@example.com"),
            _field("score_binger", "CALCULATED_FIELDS", 5),
            _field("score_chaser", "CALCULATED_FIELDS", 5),
        ]
        assert FieldExtractor().extract(fields) == NormalizedSubmission(
            email="ana@example.com",
            first_name="Ana",
            archetype="Binger",
        )

    def test_extract_empty_fields(self) -> None:
        submission = FieldExtractor().extract([])
        assert submission == NormalizedSubmission()
        assert submission.has_email is False

    def test_injected_score_map(self) -> None:
        extractor = FieldExtractor(score_map={"score_x": "Xavier"})
        fields = [_field("score_x", "CALCULATED_FIELDS", 1), _field("score_binger", "CALCULATED_FIELDS", 9)]
        assert extractor.extract(fields).archetype == "Xavier"
        assert dict(extractor.score_map) == {"score_x": "Xavier"}

    def test_null_labels_never_raise(self) -> None:
        fields = [_field(None, "PAYMENT", "x"), _field(None, "CALCULATED_FIELDS", 3)]
        assert FieldExtractor().extract(fields) == NormalizedSubmission()


def test_extract_from_parsed_body_with_huge_integer_score() -> None:
    raw = (
        b'{"data":{"fields":[{"label":"score_binger","type":"CALCULATED_FIELDS","value":'
        + b"9" * 400
        + b"}]}}"
    )
    parsed = parse_webhook_body(raw)

    assert FieldExtractor().extract(parsed.fields).archetype == "Binger"
