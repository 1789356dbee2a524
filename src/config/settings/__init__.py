"""Agregador de settings do pendo_profile_sync.

- base: ambiente, nome do serviço, nível de log (env)
- endpoints: URLs base e timeout HTTP (env)
- destinations: settings entregues pelo runtime a cada invocação
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.destinations import (
    DestinationSettings,
    MetadataDestinationSettings,
    TrackDestinationSettings,
)
from config.settings.endpoints import (
    PENDO_API_BASE_URL,
    PROFILES_API_BASE_URL,
    EndpointSettings,
    get_endpoint_settings,
)

__all__ = [
    "PENDO_API_BASE_URL",
    "PROFILES_API_BASE_URL",
    "BaseSettings",
    "DestinationSettings",
    "EndpointSettings",
    "Environment",
    "MetadataDestinationSettings",
    "TrackDestinationSettings",
    "get_base_settings",
    "get_endpoint_settings",
]
