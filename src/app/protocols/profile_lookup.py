"""Protocolo de consulta de traits na Profile API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    import httpx


class ProfileLookupProtocol(Protocol):
    """Contrato mínimo para buscar traits de users/accounts."""

    async def query(
        self,
        entity: str,
        lookup_key: str,
        lookup_value: str,
    ) -> httpx.Response: ...
