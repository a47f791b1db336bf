"""Use case: remover ToDo."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.use_cases.todos._common import load_todo, require_todo_id

if TYPE_CHECKING:
    from app.protocols import TodoRepositoryProtocol

logger = logging.getLogger(__name__)


class DeleteTodoUseCase:
    def __init__(self, todo_repository: TodoRepositoryProtocol) -> None:
        self._todos = todo_repository

    async def execute(self, todo_id: int | None) -> None:
        todo_id = require_todo_id(todo_id)
        await load_todo(self._todos, todo_id)
        await self._todos.delete(todo_id)
        logger.info("todo_deleted", extra={"todo_id": todo_id})
