"""Protocolo do cliente da API de assinantes.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from api.connectors.mailerlite.models import SubscriberUpsertResult
    from api.normalizers.tally.models import NormalizedSubmission


class SubscriberClientProtocol(Protocol):
    """Contrato mínimo para upsert + inscrição em grupo por email."""

    group_id: str

    async def upsert_subscriber(
        self,
        submission: NormalizedSubmission,
    ) -> SubscriberUpsertResult: ...
