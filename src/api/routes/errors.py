"""Mapeamento de erros para respostas HTTP.

Envelope de erro: {"success": false, "error": "<mensagem>"}.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from app.domain.errors import (
    DomainError,
    InvalidStateTransition,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from utils.errors import InfrastructureError

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)

# Ordem importa: subclasses antes das bases
DOMAIN_STATUS: tuple[tuple[type[DomainError], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFound, status.HTTP_404_NOT_FOUND),
    (PermissionDenied, status.HTTP_403_FORBIDDEN),
    (InvalidStateTransition, status.HTTP_409_CONFLICT),
)


def success(data: Any, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(content={"success": True, "data": data}, status_code=status_code)


def failure(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(content={"success": False, "error": message}, status_code=status_code)


def status_for(exc: DomainError) -> int:
    for error_type, status_code in DOMAIN_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def _domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    logger.info(
        "request_rejected",
        extra={
            "path": request.url.path,
            "status_code": status_code,
            "error_type": type(exc).__name__,
        },
    )
    return failure(str(exc), status_code)


async def _infrastructure_error_handler(request: Request, exc: InfrastructureError) -> JSONResponse:
    logger.error(
        "request_infrastructure_error",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return failure(str(exc), status.HTTP_503_SERVICE_UNAVAILABLE)


async def _http_error_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return failure(str(exc.detail), exc.status_code)


async def _request_validation_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Requisição inválida"
    return failure(message, status.HTTP_400_BAD_REQUEST)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, _domain_error_handler)
    app.add_exception_handler(InfrastructureError, _infrastructure_error_handler)
    app.add_exception_handler(HTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
