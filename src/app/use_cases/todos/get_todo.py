"""Use case: buscar ToDo por id."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.use_cases._enrichment import enrich_todo
from app.use_cases.todos._common import require_todo_id

if TYPE_CHECKING:
    from app.protocols import TodoRepositoryProtocol


class GetTodoUseCase:
    """Leitura idempotente: retorna None quando o ToDo não existe."""

    def __init__(self, todo_repository: TodoRepositoryProtocol) -> None:
        self._todos = todo_repository

    async def execute(self, todo_id: int | None) -> dict[str, Any] | None:
        todo_id = require_todo_id(todo_id)
        todo = await self._todos.find_by_id(todo_id)
        if todo is None:
            return None
        return await enrich_todo(self._todos, todo, use_case="get_todo")
