"""Protocolo de envio de payloads ao Pendo."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    import httpx

    from api.connectors.status_policy import StatusPolicy


class PendoSenderProtocol(Protocol):
    """Contrato mínimo para os três endpoints usados pelas destinations."""

    async def send_track(
        self,
        payload: dict[str, Any],
        policy: StatusPolicy,
    ) -> httpx.Response: ...

    async def send_visitor_metadata(
        self,
        payload: list[dict[str, Any]],
        policy: StatusPolicy,
    ) -> httpx.Response: ...

    async def send_account_metadata(
        self,
        payload: list[dict[str, Any]],
        policy: StatusPolicy,
    ) -> httpx.Response: ...
