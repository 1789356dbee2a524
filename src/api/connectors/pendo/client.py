"""Cliente HTTP para as APIs de ingestão do Pendo.

Endpoints:
- POST /data/track
- POST /api/v1/metadata/visitor/agent/value
- POST /api/v1/metadata/account/custom/value

Autenticação via header `x-pendo-integration-key`. O retorno de cada envio
é a resposta já classificada pela StatusPolicy recebida.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.infra.http import HttpClient
from config.settings.endpoints import PENDO_API_BASE_URL
from utils.errors import ValidationError

if TYPE_CHECKING:
    import httpx

    from api.connectors.status_policy import StatusPolicy

logger = logging.getLogger(__name__)

TRACK_PATH = "/data/track"
VISITOR_METADATA_PATH = "/api/v1/metadata/visitor/agent/value"
ACCOUNT_METADATA_PATH = "/api/v1/metadata/account/custom/value"
INTEGRATION_KEY_HEADER = "x-pendo-integration-key"


class PendoClient:
    """Envia payloads já montados para o Pendo."""

    def __init__(
        self,
        integration_key: str,
        http_client: HttpClient | None = None,
        base_url: str = PENDO_API_BASE_URL,
    ) -> None:
        self._integration_key = integration_key
        self._http = (http_client or HttpClient()).with_component("pendo_api")
        self._base_url = base_url.rstrip("/")

    async def send_track(
        self,
        payload: dict[str, Any],
        policy: StatusPolicy,
    ) -> httpx.Response:
        return await self._post(TRACK_PATH, payload, policy)

    async def send_visitor_metadata(
        self,
        payload: list[dict[str, Any]],
        policy: StatusPolicy,
    ) -> httpx.Response:
        return await self._post(VISITOR_METADATA_PATH, payload, policy)

    async def send_account_metadata(
        self,
        payload: list[dict[str, Any]],
        policy: StatusPolicy,
    ) -> httpx.Response:
        return await self._post(ACCOUNT_METADATA_PATH, payload, policy)

    async def _post(
        self,
        path: str,
        payload: Any,
        policy: StatusPolicy,
    ) -> httpx.Response:
        if not self._integration_key or not self._integration_key.strip():
            logger.error("pendo_integration_key_missing", extra={"endpoint": path})
            raise ValidationError("Pendo integration key is required")

        headers = {
            INTEGRATION_KEY_HEADER: self._integration_key,
            "Content-Type": "application/json",
        }
        response = await self._http.post(
            f"{self._base_url}{path}",
            policy=policy,
            json=payload,
            headers=headers,
        )
        logger.debug(
            "pendo_send_success",
            extra={"endpoint": path, "status_code": response.status_code},
        )
        return response
