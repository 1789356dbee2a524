"""Exceções de domínio devolvidas ao runtime que hospeda as funções.

O runtime decide o que fazer com cada sinal:
- ValidationError: entrada inválida, nunca reenviar
- RetryError: falha transitória, reenviar mais tarde
- EventNotSupportedError: tipo de evento sem handler, nunca reenviar
"""

from __future__ import annotations


class DestinationFunctionError(RuntimeError):
    """Base para falhas sinalizadas ao runtime."""

    retryable: bool = False

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ValidationError(DestinationFunctionError):
    """Entrada ausente ou malformada (terminal)."""


class ProfileNotFoundError(ValidationError):
    """Profile API respondeu status não tratável (ex: 404)."""


class RetryError(DestinationFunctionError):
    """Falha transitória de rede ou servidor."""

    retryable = True


class EventNotSupportedError(DestinationFunctionError):
    """Tipo de evento sem handler nesta destination."""
