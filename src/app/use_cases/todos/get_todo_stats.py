"""Use case: estatísticas de ToDo's."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols import TodoRepositoryProtocol


class GetTodoStatsUseCase:
    """Contagens {total, by_status, by_priority} das tarefas independentes.

    Com `user_id`, conta apenas tarefas atribuídas ou criadas pelo usuário.
    """

    def __init__(self, todo_repository: TodoRepositoryProtocol) -> None:
        self._todos = todo_repository

    async def execute(self, user_id: str | None = None) -> dict[str, Any]:
        return await self._todos.get_stats(user_id)
