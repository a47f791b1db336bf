"""Patch parcial de ToDo (apenas campos informados).

Campo ausente = não altera; presente com None = limpa;
presente com valor = define. A distinção usa `model_fields_set`.
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic

from pydantic import BaseModel, ConfigDict

DETAIL_FIELDS: frozenset[str] = frozenset({"name", "description", "start_date", "due_date"})


class TodoPatch(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    description: str | None = None
    status: str | None = None
    priority: str | None = None
    start_date: datetime | None = None
    due_date: datetime | None = None
    assignee: str | None = None
    project_id: int | None = None
    agenda_task_id: int | None = None

    def provided(self, field_name: str) -> bool:
        """Indica se o campo foi informado explicitamente (mesmo que None)."""
        return field_name in self.model_fields_set

    def has_updates(self) -> bool:
        return bool(self.model_fields_set)

    def has_detail_updates(self) -> bool:
        return bool(self.model_fields_set & DETAIL_FIELDS)
