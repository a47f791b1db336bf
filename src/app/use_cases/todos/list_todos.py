"""Use case: listar ToDo's com filtros e ordenação."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.domain.todos import TodoFilters, TodoSort
from app.use_cases._enrichment import enrich_todos

if TYPE_CHECKING:
    from app.protocols import TodoRepositoryProtocol

logger = logging.getLogger(__name__)


class ListTodosUseCase:
    """Lista ToDo's enriquecidos com uma consulta em lote por entidade."""

    def __init__(self, todo_repository: TodoRepositoryProtocol) -> None:
        self._todos = todo_repository

    async def execute(
        self,
        filters: TodoFilters | None = None,
        sort: TodoSort | None = None,
    ) -> list[dict[str, Any]]:
        todos = await self._todos.find_all(filters or TodoFilters(), sort or TodoSort())
        logger.debug("todos_listed", extra={"count": len(todos)})
        return await enrich_todos(self._todos, todos, use_case="list_todos")
