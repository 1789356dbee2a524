"""Destination de track: envia todos os traits como evento genérico.

Required settings: `pendoTrackEventSecretKey`, `personasSpaceId`,
`profileApiToken`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from api.connectors.status_policy import (
    TRACK_GROUP_POLICY,
    TRACK_IDENTIFY_POLICY,
    StatusPolicy,
)
from api.payload_builders.pendo import (
    ACCOUNT_TRAITS_EVENT,
    USER_TRAITS_EVENT,
    build_track_payload,
    provided,
)
from app.domain.events import EventType, SegmentEvent
from app.use_cases.pendo.base import (
    BaseDestination,
    reject_unsupported,
    require_identity,
    run_destination,
)
from config.settings.destinations import TrackDestinationSettings

if TYPE_CHECKING:
    import httpx

    from app.protocols import PendoSenderProtocol, ProfileLookupProtocol


class PendoTrackDestination(BaseDestination):
    """Identify/group → `/data/track` com `properties` = traits do perfil.

    As policies de status são injetáveis: por padrão o group reenvia em 400
    e o identify não.
    """

    name = "pendo_track"
    settings_model = TrackDestinationSettings

    def __init__(
        self,
        *,
        profiles: ProfileLookupProtocol,
        pendo: PendoSenderProtocol,
        identify_policy: StatusPolicy = TRACK_IDENTIFY_POLICY,
        group_policy: StatusPolicy = TRACK_GROUP_POLICY,
    ) -> None:
        super().__init__(profiles=profiles, pendo=pendo)
        self._identify_policy = identify_policy
        self._group_policy = group_policy

    async def on_identify(self, event: SegmentEvent) -> None:
        user_id = require_identity(event.user_id, "userId")
        profile = await self.fetch_profile("users", "user_id", user_id)

        payload = build_track_payload(
            event_name=USER_TRAITS_EVENT,
            visitor_id=event.user_id,
            account_id=provided(profile, "group_id"),
            timestamp=provided(event, "timestamp"),
            traits=profile.traits,
            context=provided(event, "context"),
        )
        await self._pendo.send_track(payload, self._identify_policy)

    async def on_group(self, event: SegmentEvent) -> None:
        group_id = require_identity(event.group_id, "groupId")
        profile = await self.fetch_profile("accounts", "group_id", group_id)

        payload = build_track_payload(
            event_name=ACCOUNT_TRAITS_EVENT,
            visitor_id=provided(event, "user_id"),
            account_id=event.group_id,
            timestamp=provided(event, "timestamp"),
            traits=profile.traits,
            context=provided(event, "context"),
        )
        await self._pendo.send_track(payload, self._group_policy)


async def handle_event(
    event: SegmentEvent | Mapping[str, Any],
    settings: Mapping[str, Any],
    *,
    http_client: httpx.AsyncClient | None = None,
) -> None:
    """Processa um evento de qualquer tipo (roteado por `type`)."""
    await run_destination(PendoTrackDestination, event, settings, http_client=http_client)


async def on_identify(
    event: SegmentEvent | Mapping[str, Any],
    settings: Mapping[str, Any],
    *,
    http_client: httpx.AsyncClient | None = None,
) -> None:
    await run_destination(
        PendoTrackDestination,
        event,
        settings,
        http_client=http_client,
        event_type=EventType.IDENTIFY,
    )


async def on_group(
    event: SegmentEvent | Mapping[str, Any],
    settings: Mapping[str, Any],
    *,
    http_client: httpx.AsyncClient | None = None,
) -> None:
    await run_destination(
        PendoTrackDestination,
        event,
        settings,
        http_client=http_client,
        event_type=EventType.GROUP,
    )


async def on_track(event: Any, settings: Any, **_: Any) -> None:
    reject_unsupported(EventType.TRACK)


async def on_page(event: Any, settings: Any, **_: Any) -> None:
    reject_unsupported(EventType.PAGE)


async def on_screen(event: Any, settings: Any, **_: Any) -> None:
    reject_unsupported(EventType.SCREEN)


async def on_alias(event: Any, settings: Any, **_: Any) -> None:
    reject_unsupported(EventType.ALIAS)


async def on_delete(event: Any, settings: Any, **_: Any) -> None:
    reject_unsupported(EventType.DELETE)
