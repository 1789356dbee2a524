"""Destination de metadata: envia campos curados de visitor e account.

Required settings: `pendoIntegrationKey`, `personasSpaceId`,
`profileApiToken`.

Campos enviados:
- visitor (agent): country, customer_role, tester_role
- account (custom): current_plan, premier_support
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from api.connectors.status_policy import METADATA_POLICY, StatusPolicy
from api.payload_builders.pendo import (
    build_account_metadata_payload,
    build_visitor_metadata_payload,
)
from app.domain.events import EventType, SegmentEvent
from app.use_cases.pendo.base import (
    BaseDestination,
    reject_unsupported,
    require_identity,
    run_destination,
)
from config.settings.destinations import MetadataDestinationSettings

if TYPE_CHECKING:
    import httpx

    from app.protocols import PendoSenderProtocol, ProfileLookupProtocol


class PendoMetadataDestination(BaseDestination):
    """Identify → metadata de visitor; group → metadata de account."""

    name = "pendo_metadata"
    settings_model = MetadataDestinationSettings

    def __init__(
        self,
        *,
        profiles: ProfileLookupProtocol,
        pendo: PendoSenderProtocol,
        policy: StatusPolicy = METADATA_POLICY,
    ) -> None:
        super().__init__(profiles=profiles, pendo=pendo)
        self._policy = policy

    async def on_identify(self, event: SegmentEvent) -> None:
        user_id = require_identity(event.user_id, "userId")
        profile = await self.fetch_profile("users", "user_id", user_id)

        payload = build_visitor_metadata_payload(event.user_id, profile.traits)
        await self._pendo.send_visitor_metadata(payload, self._policy)

    async def on_group(self, event: SegmentEvent) -> None:
        group_id = require_identity(event.group_id, "groupId")
        profile = await self.fetch_profile("accounts", "group_id", group_id)

        payload = build_account_metadata_payload(event.group_id, profile.traits)
        await self._pendo.send_account_metadata(payload, self._policy)


async def handle_event(
    event: SegmentEvent | Mapping[str, Any],
    settings: Mapping[str, Any],
    *,
    http_client: httpx.AsyncClient | None = None,
) -> None:
    """Processa um evento de qualquer tipo (roteado por `type`)."""
    await run_destination(PendoMetadataDestination, event, settings, http_client=http_client)


async def on_identify(
    event: SegmentEvent | Mapping[str, Any],
    settings: Mapping[str, Any],
    *,
    http_client: httpx.AsyncClient | None = None,
) -> None:
    await run_destination(
        PendoMetadataDestination,
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
        PendoMetadataDestination,
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
