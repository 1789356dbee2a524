"""Filters de logging para injeção de contexto e remoção de segredos.

Campos injetados:
- correlation_id: messageId do evento em processamento
- service: Nome do serviço (ex: pendo_profile_sync)

Campos removidos: qualquer `extra` cujo nome indique credencial ou traits.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Nomes de atributos que nunca podem sair nos logs
SENSITIVE_FIELDS = frozenset(
    {
        "authorization",
        "integration_key",
        "pendo_integration_key",
        "pendo_track_event_secret_key",
        "profile_api_token",
        "api_token",
        "traits",
        "properties",
        "payload",
    }
)

REDACTED = "[redacted]"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class RedactSecretsFilter(logging.Filter):
    """Substitui por REDACTED os atributos sensíveis passados via `extra`."""

    def __init__(self, fields: frozenset[str] = SENSITIVE_FIELDS) -> None:
        super().__init__()
        self._fields = fields

    def filter(self, record: logging.LogRecord) -> bool:
        for name in self._fields:
            if name in record.__dict__:
                record.__dict__[name] = REDACTED
        return True
