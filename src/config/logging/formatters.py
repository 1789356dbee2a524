"""Formatter JSON dos logs estruturados (python-json-logger)."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,123",
            "level": "WARNING",
            "logger": "app.infra.http",
            "message": "http_status_rejected",
            "correlation_id": "ajs-next-1760869800-abc",
            "service": "pendo_profile_sync",
            "policy": "pendo_metadata",
            "status_code": 400
        }
    """
    # Ordem fixa para saída determinística
    format_string = " ".join(f"%({name})s" for name in sorted(REQUIRED_LOG_FIELDS))

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
