"""Regras de matching de campos do Tally.

Cada regra combina um predicado sobre o campo e um extrator do valor.
As listas de regras são avaliadas em ordem; a primeira regra que casa
com algum campo (também em ordem) define o resultado.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from .models import INPUT_EMAIL, INPUT_TEXT, PAYMENT, TEXTAREA, FormField

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

FIRST_NAME_LABELS: tuple[str, ...] = (
    "First name",
    "First Name",
    "Vorname",
    "Name",
    "first_name",
    "first name",
)

ARCHETYPE_LABELS: tuple[str, ...] = ("Archetype", "Type", "Result")


@dataclass(frozen=True, slots=True)
class FieldRule:
    """Regra de extração: predicado + extrator."""

    name: str
    predicate: Callable[[FormField], bool]
    extract: Callable[[FormField], str | None]

    def apply(self, fields: Iterable[FormField]) -> str | None:
        for field in fields:
            if not self.predicate(field):
                continue
            value = self.extract(field)
            if value:
                return value
        return None


def apply_rules(rules: Sequence[FieldRule], fields: Sequence[FormField]) -> str | None:
    """Avalia as regras em ordem; primeira extração não vazia vence."""
    for rule in rules:
        value = rule.apply(fields)
        if value:
            return value
    return None


def text_value(field: FormField) -> str | None:
    """Valor como texto aparado; None para valores vazios."""
    value = field.value
    if not value:
        return None
    if isinstance(value, list):
        text = ",".join(str(item) for item in value)
    else:
        text = str(value)
    return text.strip() or None


def _label_contains(needle: str) -> Callable[[FormField], bool]:
    return lambda field: needle in field.label_lower


def _label_equals(label: str) -> Callable[[FormField], bool]:
    expected = label.lower()
    return lambda field: field.label_lower == expected


def _is_email_text(field: FormField) -> bool:
    return (
        field.type in (INPUT_TEXT, TEXTAREA)
        and isinstance(field.value, str)
        and EMAIL_PATTERN.fullmatch(field.value) is not None
    )


EMAIL_RULES: tuple[FieldRule, ...] = (
    FieldRule("email_input_type", lambda f: f.type == INPUT_EMAIL, text_value),
    FieldRule("email_label", _label_contains("email"), text_value),
    # Bloco de pagamento costuma trazer "Payment (email)"
    FieldRule(
        "payment_email",
        lambda f: f.type == PAYMENT and "email" in f.label_lower,
        text_value,
    ),
    FieldRule("text_email_pattern", _is_email_text, text_value),
)

FIRST_NAME_RULES: tuple[FieldRule, ...] = (
    *(FieldRule(f"label:{label}", _label_equals(label), text_value) for label in FIRST_NAME_LABELS),
    FieldRule(
        "payment_name",
        lambda f: f.type == PAYMENT and "name" in f.label_lower,
        text_value,
    ),
)

ARCHETYPE_RULES: tuple[FieldRule, ...] = tuple(
    FieldRule(f"label:{label}", _label_equals(label), text_value) for label in ARCHETYPE_LABELS
)
