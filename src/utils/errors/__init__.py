"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    DestinationFunctionError,
    EventNotSupportedError,
    ProfileNotFoundError,
    RetryError,
    ValidationError,
)

__all__ = [
    "DestinationFunctionError",
    "EventNotSupportedError",
    "ProfileNotFoundError",
    "RetryError",
    "ValidationError",
]
