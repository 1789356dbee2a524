"""Use cases das destination functions Pendo.

- track_destination: evento genérico com todos os traits (`/data/track`)
- metadata_destination: campos curados de visitor/account (`/api/v1/metadata`)
"""

from .base import BaseDestination, run_destination
from .metadata_destination import PendoMetadataDestination
from .track_destination import PendoTrackDestination

__all__ = [
    "BaseDestination",
    "PendoMetadataDestination",
    "PendoTrackDestination",
    "run_destination",
]
