"""Protocolos de normalização inbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from api.normalizers.tally.models import FormField, NormalizedSubmission


class SubmissionExtractorProtocol(Protocol):
    """Contrato mínimo para extrair o registro normalizado dos campos."""

    def extract(self, fields: Sequence[FormField]) -> NormalizedSubmission: ...
