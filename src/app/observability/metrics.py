"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
posteriormente (BigQuery, CloudWatch Insights, etc.).

Métricas suportadas:
- Latência: tempo de cada chamada HTTP externa por componente/operação
- Outcome: contador de resultados por policy (success/retry/invalid)

Uso:
    from app.observability.metrics import record_latency, record_outcome

    start = time.perf_counter()
    # ... chamada HTTP ...
    latency_ms = (time.perf_counter() - start) * 1000
    record_latency("profile_api", "GET", latency_ms)
    record_outcome("profile_lookup", "success", status_code=200)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "profile_api", "pendo_api")
        operation: Nome da operação (ex: "GET", "POST")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_outcome(
    policy: str,
    outcome: str,
    status_code: int | None = None,
    correlation_id: str | None = None,
) -> None:
    """Registra o resultado da classificação de uma resposta.

    Args:
        policy: Nome da StatusPolicy aplicada
        outcome: success | retry | invalid
        status_code: Status HTTP (None para falha de transporte)
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_outcome",
        extra={
            "metric_type": "outcome",
            "policy": policy,
            "outcome": outcome,
            "status_code": status_code,
            "correlation_id": correlation_id,
        },
    )
