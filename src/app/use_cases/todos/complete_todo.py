"""Use case: checkbox de conclusão (alterna finalizado ↔ a fazer)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.use_cases._enrichment import enrich_todo
from app.use_cases.todos._common import load_todo, require_todo_id

if TYPE_CHECKING:
    from app.protocols import TodoRepositoryProtocol

logger = logging.getLogger(__name__)


class CompleteTodoUseCase:
    """Fechado → reabre; aberto → finaliza em nome de `user_id`."""

    def __init__(self, todo_repository: TodoRepositoryProtocol) -> None:
        self._todos = todo_repository

    async def execute(self, todo_id: int | None, user_id: str | None) -> dict[str, Any]:
        todo_id = require_todo_id(todo_id)
        todo = await load_todo(self._todos, todo_id)

        if todo.is_closed:
            todo.reopen()
        else:
            todo.complete(user_id)

        updated = await self._todos.update(todo)
        logger.info(
            "todo_completion_toggled",
            extra={"todo_id": updated.id, "status": updated.status.value},
        )
        return await enrich_todo(self._todos, updated, use_case="complete_todo")
