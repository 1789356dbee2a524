"""Connector da Profile API."""

from api.connectors.profiles.client import (
    PROFILES_API_BASE_URL,
    ProfileApiClient,
    build_basic_auth,
    query_profile_api,
)
from api.connectors.profiles.models import ProfileRecord

__all__ = [
    "PROFILES_API_BASE_URL",
    "ProfileApiClient",
    "ProfileRecord",
    "build_basic_auth",
    "query_profile_api",
]
