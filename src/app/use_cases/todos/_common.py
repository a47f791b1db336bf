"""Helpers compartilhados pelos use cases de ToDo."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.errors import NotFound, ValidationError

if TYPE_CHECKING:
    from app.domain.todos import Todo
    from app.protocols import TodoRepositoryProtocol

TODO_ENTITY = "ToDo"


def require_todo_id(todo_id: int | None) -> int:
    if not todo_id:
        raise ValidationError("ID do ToDo é obrigatório")
    return todo_id


async def load_todo(repository: TodoRepositoryProtocol, todo_id: int) -> Todo:
    todo = await repository.find_by_id(todo_id)
    if todo is None:
        raise NotFound(TODO_ENTITY, todo_id)
    return todo
