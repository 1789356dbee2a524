"""Cliente da Profile API (traits de users e accounts).

GET {base}/v1/spaces/{space}/collections/{entity}/profiles/{key}:{value}/traits
com Basic auth (token como usuário, senha vazia).
"""

from __future__ import annotations

import base64
import logging
from typing import TYPE_CHECKING, Literal
from urllib.parse import quote

from api.connectors.status_policy import PROFILE_LOOKUP_POLICY, StatusPolicy
from app.infra.http import HttpClient
from config.settings.endpoints import PROFILES_API_BASE_URL

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)

TRAITS_LIMIT = 200

Entity = Literal["users", "accounts"]
VALID_ENTITIES = frozenset({"users", "accounts"})


def build_basic_auth(token: str) -> str:
    """Monta o header Authorization Basic para o token informado."""
    encoded = base64.b64encode(f"{token}:".encode()).decode("ascii")
    return f"Basic {encoded}"


class ProfileApiClient:
    """Consulta traits na Profile API de um space."""

    def __init__(
        self,
        space_id: str,
        api_token: str,
        http_client: HttpClient | None = None,
        base_url: str = PROFILES_API_BASE_URL,
        policy: StatusPolicy = PROFILE_LOOKUP_POLICY,
    ) -> None:
        self._space_id = space_id
        self._api_token = api_token
        self._http = (http_client or HttpClient()).with_component("profile_api")
        self._base_url = base_url.rstrip("/")
        self._policy = policy

    def traits_url(self, entity: Entity, lookup_key: str, lookup_value: str) -> str:
        """URL de traits para o perfil identificado por `lookup_key:lookup_value`."""
        if entity not in VALID_ENTITIES:
            raise ValueError(f"entity inválida: {entity}")
        profile = quote(f"{lookup_key}:{lookup_value}", safe=":@")
        return (
            f"{self._base_url}/v1/spaces/{self._space_id}/collections/{entity}"
            f"/profiles/{profile}/traits?limit={TRAITS_LIMIT}"
        )

    async def query(
        self,
        entity: Entity,
        lookup_key: str,
        lookup_value: str,
    ) -> httpx.Response:
        """Busca traits e devolve a resposta 200 crua.

        Raises:
            RetryError: Falha de conexão, 5xx, 429 ou 401
            ProfileNotFoundError: Qualquer outro status não-200 (ex: 404)
        """
        url = self.traits_url(entity, lookup_key, lookup_value)
        headers = {
            "Authorization": build_basic_auth(self._api_token),
            "Content-Type": "application/json",
        }
        logger.debug("profile_lookup", extra={"entity": entity, "lookup_key": lookup_key})
        return await self._http.get(url, policy=self._policy, headers=headers)


async def query_profile_api(
    entity: Entity,
    lookup_key: str,
    lookup_value: str,
    space_id: str,
    api_token: str,
    http_client: HttpClient | None = None,
) -> httpx.Response:
    """Atalho funcional para ProfileApiClient.query."""
    client = ProfileApiClient(space_id, api_token, http_client=http_client)
    return await client.query(entity, lookup_key, lookup_value)
