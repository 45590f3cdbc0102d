"""Cliente HTTP especializado para a API de assinantes do MailerLite.

Estende HttpClient genérico com:
- Header Authorization Bearer e Accept JSON
- Upsert idempotente por email (POST /subscribers)
- Logging estruturado sem PII (sem email, sem token)

Erros de negócio (4xx/5xx) voltam como SubscriberUpsertResult(ok=False);
apenas falhas de transporte levantam DownstreamError. Não há retry.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.http_base import HttpClient, HttpClientConfig, HttpError
from api.payload_builders.mailerlite import build_subscriber_payload
from utils.errors import DownstreamError, SubscriberApiNotConfiguredError

from .models import SubscriberUpsertResult, parse_response_body

if TYPE_CHECKING:
    import httpx

    from api.normalizers.tally.models import NormalizedSubmission
    from config.settings import MailerLiteSettings

logger: logging.Logger = logging.getLogger(__name__)


class MailerLiteClient(HttpClient):
    """Cliente da API de assinantes do MailerLite."""

    def __init__(
        self,
        api_key: str,
        group_id: str,
        endpoint: str,
        source: str = "tally",
        config: HttpClientConfig | None = None,
    ) -> None:
        """Inicializa cliente MailerLite.

        Args:
            api_key: Token Bearer da API
            group_id: Grupo em que o assinante é inscrito
            endpoint: URL completa de /subscribers
            source: Valor do campo customizado "source"
            config: Configuração HTTP base

        Raises:
            SubscriberApiNotConfiguredError: Se api_key ou group_id vazios
        """
        if not api_key or not api_key.strip() or not group_id:
            raise SubscriberApiNotConfiguredError("mailerlite_not_configured")
        super().__init__(config)
        self._api_key = api_key
        self.group_id = group_id
        self.endpoint = endpoint
        self.source = source

    async def upsert_subscriber(
        self,
        submission: NormalizedSubmission,
    ) -> SubscriberUpsertResult:
        """Cria ou atualiza o assinante e o inscreve no grupo configurado.

        Raises:
            DownstreamError: Timeout ou falha de conexão
        """
        payload = build_subscriber_payload(submission, self.group_id, self.source)
        try:
            response = await self.post(
                self.endpoint,
                json=payload,
                headers=self._build_headers(),
            )
        except HttpError as exc:
            raise DownstreamError(str(exc)) from exc

        return self._process_response(response)

    def _build_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _process_response(self, response: httpx.Response) -> SubscriberUpsertResult:
        data = parse_response_body(response.text)
        ok = response.is_success

        if ok:
            logger.info(
                "mailerlite_upsert_ok",
                extra={"status_code": response.status_code, "group_id": self.group_id},
            )
        else:
            logger.error(
                "mailerlite_upsert_failed",
                extra={"status_code": response.status_code, "error_body": data},
            )

        return SubscriberUpsertResult(ok=ok, status_code=response.status_code, data=data)


def create_mailerlite_client(
    settings: MailerLiteSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> MailerLiteClient:
    """Factory para criar cliente MailerLite com config do ambiente.

    Raises:
        SubscriberApiNotConfiguredError: Se MAILERLITE_API_KEY/GROUP_ID ausentes
    """
    # Import local para evitar dependência circular
    from config.settings import get_mailerlite_settings

    mailerlite = settings or get_mailerlite_settings()
    config = HttpClientConfig(
        timeout_seconds=mailerlite.request_timeout_seconds,
        transport=transport,
    )
    return MailerLiteClient(
        api_key=mailerlite.api_key,
        group_id=mailerlite.group_id,
        endpoint=mailerlite.subscribers_endpoint,
        source=mailerlite.source,
        config=config,
    )
