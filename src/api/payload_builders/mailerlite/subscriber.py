"""Builder do payload de upsert de assinante do MailerLite."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from api.normalizers.tally.models import NormalizedSubmission


def build_subscriber_payload(
    submission: NormalizedSubmission,
    group_id: str,
    source: str = "tally",
) -> dict[str, Any]:
    """Monta o corpo de POST /subscribers.

    Atributos ausentes (nome, arquétipo) são omitidos de ``fields``.
    ``resubscribe`` reativa assinantes descadastrados e ``autoresponders``
    dispara as automações do grupo.
    """
    fields: dict[str, Any] = {}
    if submission.first_name:
        fields["name"] = submission.first_name
    if submission.archetype:
        fields["archetype"] = submission.archetype
    fields["source"] = source

    return {
        "email": submission.email,
        "fields": fields,
        "groups": [group_id],
        "resubscribe": True,
        "autoresponders": True,
    }
