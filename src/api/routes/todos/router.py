"""Endpoints de ToDo's.

Endpoints:
- GET    /api/todos              listagem com filtros e ordenação
- GET    /api/todos/teams        times para o filtro
- GET    /api/todos/stats        contagens por status/prioridade
- GET    /api/todos/{id}
- POST   /api/todos              criação (responsável padrão: o usuário)
- PUT    /api/todos/{id}         atualização parcial
- PATCH  /api/todos/{id}/complete  alterna finalizado ↔ a fazer
- DELETE /api/todos/{id}
"""

from __future__ import annotations

import logging
from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict

from api.routes.dependencies import CurrentUser, get_container, get_current_user
from api.routes.errors import failure, success
from app.bootstrap.dependencies import Container
from app.domain.todos import TodoFilters, TodoPatch, TodoSort
from app.use_cases.todos import (
    CompleteTodoUseCase,
    CreateTodoInput,
    CreateTodoUseCase,
    DeleteTodoUseCase,
    GetTodoStatsUseCase,
    GetTodoUseCase,
    ListTeamsUseCase,
    ListTodosUseCase,
    UpdateTodoUseCase,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class TodoCreateBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    description: str | None = None
    priority: str | None = None
    start_date: datetime | None = None
    due_date: datetime | None = None
    assignee: str | None = None
    project_id: int | None = None


@router.get("")
async def list_todos(
    status_filter: str | None = Query(default=None, alias="status"),
    priority: str | None = None,
    project_id: int | None = None,
    assignee: str | None = None,
    search: str | None = None,
    team_id: int | None = None,
    sort_field: str = "created_at",
    sort_dir: str = "desc",
    user: CurrentUser = Depends(get_current_user),
    container: Container = Depends(get_container),
) -> JSONResponse:
    filters = TodoFilters(
        status=status_filter or None,
        priority=priority or None,
        project_id=project_id,
        assignee=assignee or None,
        search=search or None,
        team_id=team_id,
    )
    sort = TodoSort(field=sort_field, direction="asc" if sort_dir.lower() == "asc" else "desc")
    todos = await ListTodosUseCase(container.todo_repository).execute(filters, sort)
    return success(todos)


@router.get("/teams")
async def list_teams(
    user: CurrentUser = Depends(get_current_user),
    container: Container = Depends(get_container),
) -> JSONResponse:
    return success(await ListTeamsUseCase(container.todo_repository).execute())


@router.get("/stats")
async def todo_stats(
    user_id: str | None = None,
    user: CurrentUser = Depends(get_current_user),
    container: Container = Depends(get_container),
) -> JSONResponse:
    stats = await GetTodoStatsUseCase(container.todo_repository).execute(user_id or None)
    return success(stats)


@router.get("/{todo_id}")
async def get_todo(
    todo_id: int,
    user: CurrentUser = Depends(get_current_user),
    container: Container = Depends(get_container),
) -> JSONResponse:
    todo = await GetTodoUseCase(container.todo_repository).execute(todo_id)
    if todo is None:
        return failure("ToDo não encontrado", status.HTTP_404_NOT_FOUND)
    return success(todo)


@router.post("")
async def create_todo(
    body: TodoCreateBody,
    user: CurrentUser = Depends(get_current_user),
    container: Container = Depends(get_container),
) -> JSONResponse:
    data = CreateTodoInput(
        name=body.name or "",
        description=body.description,
        priority=body.priority,
        start_date=body.start_date,
        due_date=body.due_date,
        assignee=body.assignee or user.id,
        created_by=user.id,
        project_id=body.project_id,
    )
    todo = await CreateTodoUseCase(container.todo_repository).execute(data)
    return success(todo, status.HTTP_201_CREATED)


@router.put("/{todo_id}")
async def update_todo(
    todo_id: int,
    patch: TodoPatch,
    user: CurrentUser = Depends(get_current_user),
    container: Container = Depends(get_container),
) -> JSONResponse:
    todo = await UpdateTodoUseCase(container.todo_repository).execute(todo_id, patch, user.id)
    return success(todo)


@router.patch("/{todo_id}/complete")
async def complete_todo(
    todo_id: int,
    user: CurrentUser = Depends(get_current_user),
    container: Container = Depends(get_container),
) -> JSONResponse:
    todo = await CompleteTodoUseCase(container.todo_repository).execute(todo_id, user.id)
    return success(todo)


@router.delete("/{todo_id}")
async def delete_todo(
    todo_id: int,
    user: CurrentUser = Depends(get_current_user),
    container: Container = Depends(get_container),
) -> JSONResponse:
    await DeleteTodoUseCase(container.todo_repository).execute(todo_id)
    logger.info("todo_deleted_by_user", extra={"todo_id": todo_id, "user_id": user.id})
    return success({"id": todo_id})
