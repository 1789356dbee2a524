"""Builders de payload para Pendo (track e metadata)."""

from api.payload_builders.pendo.metadata import (
    ACCOUNT_METADATA_FIELDS,
    VISITOR_METADATA_FIELDS,
    build_account_metadata_payload,
    build_visitor_metadata_payload,
)
from api.payload_builders.pendo.track import (
    ACCOUNT_TRAITS_EVENT,
    MISSING,
    USER_TRAITS_EVENT,
    build_track_payload,
    provided,
)

__all__ = [
    "ACCOUNT_METADATA_FIELDS",
    "ACCOUNT_TRAITS_EVENT",
    "MISSING",
    "USER_TRAITS_EVENT",
    "VISITOR_METADATA_FIELDS",
    "build_account_metadata_payload",
    "build_track_payload",
    "build_visitor_metadata_payload",
    "provided",
]
