"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="pendo_profile_sync")
    logger = get_logger(__name__)
    logger.info("pendo_send_success", extra={"status_code": 200})

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime

Credenciais e traits nunca são logados (RedactSecretsFilter).
"""

from config.logging.config import (
    configure_logging,
    get_logger,
)
from config.logging.filters import CorrelationIdFilter, RedactSecretsFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "RedactSecretsFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
