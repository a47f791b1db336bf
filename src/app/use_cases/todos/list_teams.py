"""Use case: times disponíveis para o filtro de ToDo's."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols import TodoRepositoryProtocol


class ListTeamsUseCase:
    def __init__(self, todo_repository: TodoRepositoryProtocol) -> None:
        self._todos = todo_repository

    async def execute(self) -> list[dict[str, Any]]:
        return await self._todos.get_teams()
