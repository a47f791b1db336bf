"""Filtros e ordenação da listagem de ToDo's."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

SortDirection = Literal["asc", "desc"]

DEFAULT_SORT_FIELD = "created_at"
SORTABLE_FIELDS: frozenset[str] = frozenset({
    "created_at",
    "updated_at",
    "start_date",
    "due_date",
    "name",
    "status",
    "priority",
})


class TodoFilters(BaseModel):
    """Filtros opcionais; None = sem filtro."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    status: str | None = None
    priority: str | None = None
    project_id: int | None = None
    assignee: str | None = None
    search: str | None = None
    team_id: int | None = None
    # Por padrão só tarefas independentes (sem atividade de agenda)
    standalone_only: bool = True


class TodoSort(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    field: str = DEFAULT_SORT_FIELD
    direction: SortDirection = "desc"

    @property
    def descending(self) -> bool:
        return self.direction != "asc"

    @property
    def safe_field(self) -> str:
        """Campo de ordenação suportado (desconhecido cai no padrão)."""
        return self.field if self.field in SORTABLE_FIELDS else DEFAULT_SORT_FIELD
