"""Helpers de data/hora compartilhados pelas entidades.

Todas as datas do domínio são `datetime` timezone-aware em UTC.
Datas sem fuso vindas do store ou da API são tratadas como UTC.
"""

from __future__ import annotations

from datetime import UTC, date, datetime


def utcnow() -> datetime:
    return datetime.now(UTC)


def parse_datetime(value: datetime | date | str | None) -> datetime | None:
    """Converte valor cru (ISO-8601, date, datetime) para datetime UTC.

    Strings vazias e None viram None.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    else:
        text = str(value).strip()
        if not text:
            return None
        parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def to_iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None
