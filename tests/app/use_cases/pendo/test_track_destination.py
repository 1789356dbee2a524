"""Testes para a destination de track (todos os traits em /data/track)."""

from __future__ import annotations

import httpx
import pytest

from api.connectors.pendo import TRACK_PATH
from api.connectors.status_policy import (
    TRACK_GROUP_POLICY,
    TRACK_IDENTIFY_POLICY,
    Outcome,
    StatusRule,
)
from app.domain.events import EventType, SegmentEvent
from app.use_cases.pendo import BaseDestination, PendoTrackDestination
from app.use_cases.pendo import track_destination
from tests.fakes.fake_destination_deps import FakePendoSender, FakeProfileLookup
from utils.errors import EventNotSupportedError, ProfileNotFoundError, RetryError, ValidationError

PROFILE_PATH = "/v1/spaces/spa_123/collections"


def _event(**fields) -> SegmentEvent:
    return SegmentEvent.model_validate(fields)


class TestPendoTrackDestinationUnit:
    """Handlers com fakes dos protocolos (sem HTTP)."""

    @pytest.mark.asyncio
    async def test_identify_builds_user_traits_update(self) -> None:
        profiles = FakeProfileLookup({"traits": {"country": "US"}, "groupId": "g1"})
        pendo = FakePendoSender()
        destination = PendoTrackDestination(profiles=profiles, pendo=pendo)

        await destination.on_identify(
            _event(type="identify", userId="u1", timestamp="t", context={})
        )

        assert profiles.calls == [("users", "user_id", "u1")]
        endpoint, payload, policy = pendo.sent[0]
        assert endpoint == "track"
        assert policy is TRACK_IDENTIFY_POLICY
        assert payload == {
            "type": "track",
            "event": "User Traits Update",
            "visitorId": "u1",
            "accountId": "g1",
            "timestamp": "t",
            "properties": {"country": "US"},
            "context": {},
        }

    @pytest.mark.asyncio
    async def test_group_builds_account_traits_update(self) -> None:
        profiles = FakeProfileLookup({"traits": {"plan": "pro"}})
        pendo = FakePendoSender()
        destination = PendoTrackDestination(profiles=profiles, pendo=pendo)

        await destination.on_group(
            _event(type="group", userId="u1", groupId="g1", timestamp="t", context={"ip": "x"})
        )

        assert profiles.calls == [("accounts", "group_id", "g1")]
        _, payload, policy = pendo.sent[0]
        assert policy is TRACK_GROUP_POLICY
        assert payload["event"] == "Account Traits Update"
        assert payload["visitorId"] == "u1"
        assert payload["accountId"] == "g1"
        assert payload["properties"] == {"plan": "pro"}
        assert payload["context"] == {"ip": "x"}

    @pytest.mark.asyncio
    async def test_identify_without_user_id_makes_no_calls(self) -> None:
        profiles, pendo = FakeProfileLookup(), FakePendoSender()
        destination = PendoTrackDestination(profiles=profiles, pendo=pendo)
        with pytest.raises(ValidationError, match="userId is required"):
            await destination.on_identify(_event(type="identify", userId=""))
        assert profiles.calls == []
        assert pendo.sent == []

    @pytest.mark.asyncio
    async def test_zero_user_id_is_rejected(self) -> None:
        profiles, pendo = FakeProfileLookup(), FakePendoSender()
        destination = PendoTrackDestination(profiles=profiles, pendo=pendo)
        with pytest.raises(ValidationError, match="userId is required"):
            await destination.on_identify(_event(type="identify", userId=0))
        assert profiles.calls == []

    @pytest.mark.asyncio
    async def test_identify_keeps_explicit_nulls_and_drops_missing(self) -> None:
        profiles = FakeProfileLookup({"traits": {"a": 1}, "groupId": None})
        pendo = FakePendoSender()
        destination = PendoTrackDestination(profiles=profiles, pendo=pendo)

        await destination.on_identify(_event(type="identify", userId="u1", context=None))

        _, payload, _ = pendo.sent[0]
        assert payload == {
            "type": "track",
            "event": "User Traits Update",
            "visitorId": "u1",
            "accountId": None,
            "properties": {"a": 1},
            "context": None,
        }

    @pytest.mark.asyncio
    async def test_identify_without_profile_group_id_omits_account(self) -> None:
        pendo = FakePendoSender()
        destination = PendoTrackDestination(
            profiles=FakeProfileLookup({"traits": {}}), pendo=pendo
        )
        await destination.on_identify(_event(type="identify", userId="u1", timestamp="t"))
        _, payload, _ = pendo.sent[0]
        assert "accountId" not in payload
        assert "context" not in payload

    def test_destination_without_handlers_cannot_be_built(self) -> None:
        class IncompleteDestination(BaseDestination):
            async def on_identify(self, event: SegmentEvent) -> None:
                return None

        with pytest.raises(TypeError):
            IncompleteDestination(profiles=FakeProfileLookup(), pendo=FakePendoSender())

    @pytest.mark.asyncio
    async def test_profile_errors_are_rewrapped_as_retry(self) -> None:
        profiles = FakeProfileLookup(error=ProfileNotFoundError("Failed with 404", status_code=404))
        pendo = FakePendoSender()
        destination = PendoTrackDestination(profiles=profiles, pendo=pendo)

        with pytest.raises(RetryError, match="Failed with 404") as exc_info:
            await destination.on_identify(_event(type="identify", userId="u1"))

        assert isinstance(exc_info.value.__cause__, ProfileNotFoundError)
        assert exc_info.value.status_code == 404
        assert pendo.sent == []

    @pytest.mark.asyncio
    async def test_group_policy_is_injectable(self) -> None:
        lenient = TRACK_GROUP_POLICY.with_rules("lenient", status_400=StatusRule(Outcome.SUCCESS))
        pendo = FakePendoSender()
        destination = PendoTrackDestination(
            profiles=FakeProfileLookup(), pendo=pendo, group_policy=lenient
        )
        await destination.on_group(_event(type="group", groupId="g1"))
        assert pendo.sent[0][2] is lenient

    @pytest.mark.asyncio
    @pytest.mark.parametrize("kind", ["track", "page", "screen", "alias", "delete"])
    async def test_dispatch_rejects_unsupported(self, kind: str) -> None:
        destination = PendoTrackDestination(profiles=FakeProfileLookup(), pendo=FakePendoSender())
        with pytest.raises(EventNotSupportedError, match=f"{kind} is not supported"):
            await destination.dispatch(_event(type=kind, userId="u1"))


class TestTrackEntryPoints:
    """Entry points com HTTP real sobre MockTransport."""

    @pytest.mark.asyncio
    async def test_identify_scenario(self, transport, track_settings) -> None:
        transport.route(PROFILE_PATH, body={"traits": {"country": "US"}, "groupId": "g1"})
        transport.route(TRACK_PATH, status_code=200)

        result = await track_destination.on_identify(
            {"userId": "u1", "timestamp": "t", "context": {}},
            track_settings,
            http_client=transport.client(),
        )

        assert result is None
        assert transport.json_sent_to(TRACK_PATH) == {
            "type": "track",
            "event": "User Traits Update",
            "visitorId": "u1",
            "accountId": "g1",
            "timestamp": "t",
            "properties": {"country": "US"},
            "context": {},
        }
        track_request = transport.requests_to(TRACK_PATH)[0]
        assert track_request.headers["x-pendo-integration-key"] == "track-secret"

    @pytest.mark.asyncio
    async def test_group_without_group_id_makes_zero_calls(self, transport, track_settings) -> None:
        with pytest.raises(ValidationError, match="groupId is required"):
            await track_destination.on_group(
                {"userId": "u1"}, track_settings, http_client=transport.client()
            )
        assert transport.requests == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [500, 502, 503, 429, 401])
    async def test_profile_retryable_statuses_skip_post(self, transport, track_settings, status) -> None:
        transport.route(PROFILE_PATH, status_code=status)
        with pytest.raises(RetryError, match=f"Failed with {status}"):
            await track_destination.on_identify(
                {"userId": "u1"}, track_settings, http_client=transport.client()
            )
        assert transport.requests_to(TRACK_PATH) == []

    @pytest.mark.asyncio
    async def test_profile_connection_error_keeps_message(self, transport, track_settings) -> None:
        transport.route(PROFILE_PATH, error=httpx.ConnectTimeout("connect timed out"))
        with pytest.raises(RetryError, match="connect timed out"):
            await track_destination.on_identify(
                {"userId": "u1"}, track_settings, http_client=transport.client()
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [500, 502, 503, 429])
    async def test_destination_retryable_statuses(self, transport, track_settings, status) -> None:
        transport.route(PROFILE_PATH, body={"traits": {}})
        transport.route(TRACK_PATH, status_code=status)
        with pytest.raises(RetryError):
            await track_destination.on_group(
                {"groupId": "g1"}, track_settings, http_client=transport.client()
            )

    @pytest.mark.asyncio
    async def test_400_differs_between_identify_and_group(self, transport, track_settings) -> None:
        transport.route(PROFILE_PATH, body={"traits": {}})
        transport.route(TRACK_PATH, status_code=400)

        await track_destination.on_identify(
            {"userId": "u1"}, track_settings, http_client=transport.client()
        )
        with pytest.raises(RetryError, match="Failed with 400"):
            await track_destination.on_group(
                {"groupId": "g1"}, track_settings, http_client=transport.client()
            )

    @pytest.mark.asyncio
    async def test_handle_event_routes_by_type(self, transport, track_settings) -> None:
        transport.route(PROFILE_PATH, body={"traits": {"plan": "pro"}})
        await track_destination.handle_event(
            {"type": "group", "groupId": "g1", "messageId": "m-1"},
            track_settings,
            http_client=transport.client(),
        )
        assert transport.requests_to(PROFILE_PATH)[0].url.path.endswith("group_id:g1/traits")
        assert transport.json_sent_to(TRACK_PATH)["event"] == "Account Traits Update"

    @pytest.mark.asyncio
    async def test_missing_settings_fail_before_network(self, transport) -> None:
        with pytest.raises(ValidationError, match="pendoTrackEventSecretKey"):
            await track_destination.on_identify(
                {"userId": "u1"},
                {"personasSpaceId": "spa_123", "profileApiToken": "t"},
                http_client=transport.client(),
            )
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_non_mapping_settings_fail_before_network(self, transport) -> None:
        with pytest.raises(ValidationError, match="settings must be an object"):
            await track_destination.on_identify(
                {"userId": "u1"}, None, http_client=transport.client()
            )
        assert transport.requests == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "handler",
        [
            track_destination.on_track,
            track_destination.on_page,
            track_destination.on_screen,
            track_destination.on_alias,
            track_destination.on_delete,
        ],
    )
    async def test_unsupported_entry_points(self, handler) -> None:
        with pytest.raises(EventNotSupportedError, match="is not supported"):
            await handler({"anything": True}, {})

    @pytest.mark.asyncio
    async def test_handle_event_rejects_unsupported_before_settings(self) -> None:
        with pytest.raises(EventNotSupportedError, match="page is not supported"):
            await track_destination.handle_event({"type": "page"}, {})

    @pytest.mark.asyncio
    async def test_entry_point_forces_event_type(self, transport, track_settings) -> None:
        event = SegmentEvent(type=EventType.GROUP, user_id="u1", group_id="g1")
        transport.route(PROFILE_PATH, body={"traits": {}})
        await track_destination.on_identify(event, track_settings, http_client=transport.client())
        assert transport.json_sent_to(TRACK_PATH)["event"] == "User Traits Update"
