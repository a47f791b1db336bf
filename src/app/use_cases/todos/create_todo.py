"""Use case: criar ToDo."""

from __future__ import annotations

import logging
from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from app.domain.todos import Todo
from app.use_cases._enrichment import enrich_todo

if TYPE_CHECKING:
    from app.protocols import TodoRepositoryProtocol

logger = logging.getLogger(__name__)


class CreateTodoInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    description: str | None = None
    priority: str | None = None
    start_date: datetime | None = None
    due_date: datetime | None = None
    assignee: str | None = None
    created_by: str | None = None
    project_id: int | None = None


class CreateTodoUseCase:
    """Cria ToDo em backlog e retorna o DTO enriquecido."""

    def __init__(self, todo_repository: TodoRepositoryProtocol) -> None:
        self._todos = todo_repository

    async def execute(self, data: CreateTodoInput) -> dict[str, Any]:
        # Validação acontece na construção, antes de qualquer I/O
        todo = Todo.create(
            name=data.name,
            description=data.description,
            priority=data.priority,
            start_date=data.start_date,
            due_date=data.due_date,
            assignee=data.assignee,
            created_by=data.created_by,
            project_id=data.project_id,
        )
        saved = await self._todos.save(todo)
        logger.info(
            "todo_created",
            extra={"todo_id": saved.id, "project_id": saved.project_id},
        )
        return await enrich_todo(self._todos, saved, use_case="create_todo")
