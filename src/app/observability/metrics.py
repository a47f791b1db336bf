"""Registro de métricas via structured logging.

As métricas são emitidas como logs estruturados e agregadas depois
(Cloud Logging / BigQuery). Sem PII: apenas nomes de operação, ids e
contagens.

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Fallback: lookup auxiliar que degradou para resultado vazio

Uso:
    from app.observability.metrics import record_latency, record_lookup_fallback

    start = time.perf_counter()
    # ... operação ...
    record_latency("http", "GET /api/todos", (time.perf_counter() - start) * 1000)

    record_lookup_fallback("list_todos", "users", "FirestoreUnavailableError")
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
        component: Nome do componente (ex: "http", "use_case")
        operation: Nome da operação (ex: "GET /api/todos")
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


def record_lookup_fallback(
    use_case: str,
    lookup: str,
    error_type: str,
    correlation_id: str | None = None,
) -> None:
    """Registra counter de lookup auxiliar degradado.

    Args:
        use_case: Use case que fez o enriquecimento (ex: "list_todos")
        lookup: Tipo de lookup (ex: "users", "projects", "agenda_tasks")
        error_type: Nome da exceção capturada
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_lookup_fallback",
        extra={
            "metric_type": "counter",
            "use_case": use_case,
            "lookup": lookup,
            "error_type": error_type,
            "correlation_id": correlation_id,
        },
    )
