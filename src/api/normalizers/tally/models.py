"""Modelos da submissão Tally (campos brutos e registro normalizado)."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

# Tipos de campo emitidos pelo Tally
INPUT_EMAIL = "INPUT_EMAIL"
INPUT_TEXT = "INPUT_TEXT"
TEXTAREA = "TEXTAREA"
PAYMENT = "PAYMENT"
CALCULATED_FIELDS = "CALCULATED_FIELDS"


@dataclass(frozen=True, slots=True)
class FormField:
    """Campo de formulário como enviado em ``data.fields``."""

    label: str | None
    type: str
    value: Any = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> FormField:
        label = raw.get("label")
        field_type = raw.get("type")
        return cls(
            label=label if isinstance(label, str) else None,
            type=field_type if isinstance(field_type, str) else "",
            value=raw.get("value"),
        )

    @property
    def label_lower(self) -> str:
        return (self.label or "").lower()


@dataclass(frozen=True, slots=True)
class NormalizedSubmission:
    """Registro extraído da submissão.

    Attributes:
        email: Email do respondente (obrigatório para encaminhar)
        first_name: Primeiro nome, se identificado
        archetype: Arquétipo informado ou calculado pelos scores
    """

    email: str | None = None
    first_name: str | None = None
    archetype: str | None = None

    @property
    def has_email(self) -> bool:
        return bool(self.email)

    def as_log_dict(self) -> dict[str, Any]:
        return asdict(self)
