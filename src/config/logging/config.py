"""Configuração centralizada de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # Uma vez, no lifespan da aplicação
    configure_logging(level="INFO", correlation_id_getter=get_correlation_id)

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("todo_created", extra={"todo_id": 42})

Sem PII nos logs: nada de nomes ou e-mails, apenas ids e contagens.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "otus_plataforma"

# Loggers de bibliotecas que poluem o output em INFO
NOISY_LOGGERS = ("google.auth", "urllib3", "httpx")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala um único handler JSON no root logger.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço gravado em todo log.
        correlation_id_getter: Função que retorna o correlation_id atual.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """Registra que um fallback foi aplicado (sem PII).

    Usado quando um lookup auxiliar falha e a resposta segue com dados
    vazios, ou quando um efeito colateral best-effort é descartado.

    Args:
        logger: Logger do módulo chamador.
        component: Componente afetado (ex: "list_todos.users").
        reason: Motivo curto (ex: nome da exceção).
        elapsed_ms: Tempo decorrido, quando aplicável.
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason
    if elapsed_ms is not None:
        extra["elapsed_ms"] = round(elapsed_ms, 2)

    logger.warning("fallback_applied", extra=extra)
