"""Logging estruturado JSON (python-json-logger).

Campos obrigatórios em todo log: asctime, level, logger, message,
correlation_id, service.
"""

from config.logging.config import (
    DEFAULT_SERVICE_NAME,
    configure_logging,
    get_logger,
    log_fallback,
)
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
