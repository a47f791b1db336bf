"""Observabilidade: correlation_id e métricas via logs estruturados."""

from app.observability.correlation import (
    CORRELATION_HEADER,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import record_latency, record_lookup_fallback

__all__ = [
    "CORRELATION_HEADER",
    "generate_correlation_id",
    "get_correlation_id",
    "record_latency",
    "record_lookup_fallback",
    "reset_correlation_id",
    "set_correlation_id",
]
