"""Protocolos e contratos do core da aplicação."""

from .pendo_sender import PendoSenderProtocol
from .profile_lookup import ProfileLookupProtocol

__all__ = [
    "PendoSenderProtocol",
    "ProfileLookupProtocol",
]
