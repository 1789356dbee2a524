"""Testes para PendoClient."""

from __future__ import annotations

import httpx
import pytest

from api.connectors.pendo import (
    ACCOUNT_METADATA_PATH,
    INTEGRATION_KEY_HEADER,
    TRACK_PATH,
    VISITOR_METADATA_PATH,
    PendoClient,
)
from api.connectors.status_policy import METADATA_POLICY, TRACK_IDENTIFY_POLICY
from app.infra.http import HttpClient
from utils.errors import RetryError, ValidationError


def _client(transport, key: str = "integration-key") -> PendoClient:
    return PendoClient(key, http_client=HttpClient(client=transport.client()))


class TestPendoClientEndpoints:
    """Cada método posta no endpoint certo com o header de integração."""

    @pytest.mark.asyncio
    async def test_send_track(self, transport) -> None:
        payload = {"type": "track", "event": "User Traits Update", "visitorId": "u1"}
        await _client(transport).send_track(payload, TRACK_IDENTIFY_POLICY)

        request = transport.requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://app.pendo.io/data/track"
        assert request.headers[INTEGRATION_KEY_HEADER] == "integration-key"
        assert request.headers["Content-Type"] == "application/json"
        assert transport.json_sent_to(TRACK_PATH) == payload

    @pytest.mark.asyncio
    async def test_send_visitor_metadata(self, transport) -> None:
        payload = [{"visitorId": "u1", "values": {"country": "BR"}}]
        await _client(transport).send_visitor_metadata(payload, METADATA_POLICY)
        assert transport.json_sent_to(VISITOR_METADATA_PATH) == payload

    @pytest.mark.asyncio
    async def test_send_account_metadata(self, transport) -> None:
        payload = [{"groupId": "g1", "values": {"current_plan": "pro"}}]
        await _client(transport).send_account_metadata(payload, METADATA_POLICY)
        assert transport.json_sent_to(ACCOUNT_METADATA_PATH) == payload


class TestPendoClientErrors:
    @pytest.mark.asyncio
    async def test_empty_key_fails_before_request(self, transport) -> None:
        with pytest.raises(ValidationError, match="integration key"):
            await _client(transport, key="  ").send_track({}, TRACK_IDENTIFY_POLICY)
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_policy_is_applied(self, transport) -> None:
        transport.route(VISITOR_METADATA_PATH, status_code=400)
        with pytest.raises(ValidationError, match="Failed with 400"):
            await _client(transport).send_visitor_metadata([], METADATA_POLICY)

    @pytest.mark.asyncio
    async def test_timeout_is_retryable(self, transport) -> None:
        transport.route(TRACK_PATH, error=httpx.ReadTimeout("read timed out"))
        with pytest.raises(RetryError, match="read timed out"):
            await _client(transport).send_track({}, TRACK_IDENTIFY_POLICY)
