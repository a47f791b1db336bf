"""Middleware HTTP de correlação e latência.

Cada requisição recebe um correlation_id (do header x-correlation-id
ou gerado), disponível para todos os logs emitidos durante ela e
devolvido no header da resposta.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from app.observability import (
    CORRELATION_HEADER,
    get_correlation_id,
    record_latency,
    reset_correlation_id,
    set_correlation_id,
)

if TYPE_CHECKING:
    from starlette.middleware.base import RequestResponseEndpoint
    from starlette.requests import Request
    from starlette.responses import Response


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        token = set_correlation_id(request.headers.get(CORRELATION_HEADER) or None)
        correlation_id = get_correlation_id()
        started_at = time.perf_counter()
        try:
            response = await call_next(request)
        finally:
            reset_correlation_id(token)

        response.headers[CORRELATION_HEADER] = correlation_id
        record_latency(
            "http",
            f"{request.method} {request.url.path}",
            (time.perf_counter() - started_at) * 1000,
            correlation_id,
        )
        return response
