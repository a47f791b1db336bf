"""Contrato de persistência de ToDo's.

A implementação concreta fica em app.infra.stores (memória ou Firestore).
Lookups auxiliares (usuários, projetos, agenda) são consultas em lote:
recebem a lista de ids distintos e devolvem um dict indexado por id.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from app.domain.todos import Todo, TodoFilters, TodoSort


class TodoRepositoryProtocol(ABC):
    """Contrato assíncrono do repositório de ToDo's."""

    @abstractmethod
    async def find_all(
        self,
        filters: TodoFilters | None = None,
        sort: TodoSort | None = None,
    ) -> list[Todo]: ...

    @abstractmethod
    async def find_by_id(self, todo_id: int) -> Todo | None: ...

    @abstractmethod
    async def save(self, todo: Todo) -> Todo:
        """Persiste novo ToDo e retorna a entidade com id atribuído."""

    @abstractmethod
    async def update(self, todo: Todo) -> Todo: ...

    @abstractmethod
    async def delete(self, todo_id: int) -> None: ...

    @abstractmethod
    async def get_stats(self, user_id: str | None = None) -> dict[str, Any]:
        """Retorna {total, by_status, by_priority} das tarefas independentes."""

    @abstractmethod
    async def get_users_by_ids(self, user_ids: Iterable[str]) -> dict[str, dict[str, Any]]:
        """Retorna {id: {id, name, email}}."""

    @abstractmethod
    async def get_projects_by_ids(self, project_ids: Iterable[int]) -> dict[int, dict[str, Any]]:
        """Retorna {id: {id, name, team_id, team_name}}."""

    @abstractmethod
    async def get_agenda_tasks_by_ids(
        self,
        agenda_task_ids: Iterable[int],
    ) -> dict[int, dict[str, Any]]: ...

    @abstractmethod
    async def get_agenda_task_by_id(self, agenda_task_id: int) -> dict[str, Any] | None: ...

    @abstractmethod
    async def ensure_agenda_project_link(self, agenda_task_id: int, project_id: int) -> None:
        """Garante o vínculo atividade de agenda ↔ projeto (idempotente)."""

    @abstractmethod
    async def get_teams(self) -> list[dict[str, Any]]:
        """Lista times {id, name} ordenados por nome."""
