"""Connector das APIs de ingestão do Pendo."""

from api.connectors.pendo.client import (
    ACCOUNT_METADATA_PATH,
    INTEGRATION_KEY_HEADER,
    PENDO_API_BASE_URL,
    TRACK_PATH,
    VISITOR_METADATA_PATH,
    PendoClient,
)

__all__ = [
    "ACCOUNT_METADATA_PATH",
    "INTEGRATION_KEY_HEADER",
    "PENDO_API_BASE_URL",
    "TRACK_PATH",
    "VISITOR_METADATA_PATH",
    "PendoClient",
]
