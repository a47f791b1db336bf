"""Formatter JSON dos logs estruturados.

Todo log sai com: asctime, level, logger, message, correlation_id,
service. Campos passados via `extra` entram como chaves adicionais.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem fixa para o output ficar estável entre execuções
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter JSON padrão da plataforma.

    Exemplo de output:
        {"asctime": "2026-03-10T14:02:11+0000", "level": "INFO",
         "logger": "app.use_cases.todos.list_todos",
         "message": "todos_listed", "correlation_id": "9f1c...",
         "service": "otus_plataforma", "count": 12}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
        datefmt=DATE_FORMAT,
    )
