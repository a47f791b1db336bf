"""Use case: atualizar ToDo (patch parcial)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.domain.errors import ValidationError
from app.domain.todos.value_objects import TaskPriority, TaskStatus
from app.use_cases._enrichment import enrich_todo
from app.use_cases.todos._common import load_todo, require_todo_id
from config.logging import log_fallback

if TYPE_CHECKING:
    from app.domain.todos import Todo, TodoPatch
    from app.protocols import TodoRepositoryProtocol

logger = logging.getLogger(__name__)


class UpdateTodoUseCase:
    """Aplica o patch via comportamentos da entidade e persiste.

    Campos ausentes no patch não são tocados. Status/prioridade com
    None explícito são ignorados.
    """

    def __init__(self, todo_repository: TodoRepositoryProtocol) -> None:
        self._todos = todo_repository

    async def execute(
        self,
        todo_id: int | None,
        patch: TodoPatch,
        user_id: str | None = None,
    ) -> dict[str, Any]:
        todo_id = require_todo_id(todo_id)
        if not patch.has_updates():
            raise ValidationError("Nenhum campo para atualizar")
        # Valores de enum inválidos falham antes de qualquer leitura
        status = TaskStatus.coerce(patch.status) if patch.status is not None else None
        priority = TaskPriority.coerce(patch.priority) if patch.priority is not None else None

        todo = await load_todo(self._todos, todo_id)
        self._apply(todo, patch, status, priority, user_id)
        updated = await self._todos.update(todo)
        logger.info(
            "todo_updated",
            extra={"todo_id": updated.id, "fields": sorted(patch.model_fields_set)},
        )

        if updated.agenda_task_id and updated.project_id:
            await self._link_agenda_project(updated)

        return await enrich_todo(self._todos, updated, use_case="update_todo")

    @staticmethod
    def _apply(
        todo: Todo,
        patch: TodoPatch,
        status: TaskStatus | None,
        priority: TaskPriority | None,
        user_id: str | None,
    ) -> None:
        if status is not None:
            todo.update_status(status, user_id)
        if priority is not None:
            todo.update_priority(priority)
        if patch.has_detail_updates():
            todo.update_details(patch)
        if patch.provided("assignee"):
            todo.reassign(patch.assignee)
        if patch.provided("project_id"):
            todo.link_to_project(patch.project_id)
        if patch.provided("agenda_task_id"):
            todo.link_to_agenda_task(patch.agenda_task_id)

    async def _link_agenda_project(self, todo: Todo) -> None:
        """Vínculo agenda ↔ projeto é best-effort: falha só gera log."""
        try:
            await self._todos.ensure_agenda_project_link(todo.agenda_task_id, todo.project_id)
        except Exception as exc:
            log_fallback(logger, "update_todo.agenda_project_link", reason=type(exc).__name__)
