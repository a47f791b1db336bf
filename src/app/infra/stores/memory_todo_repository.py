"""Repositório de ToDo's em memória: apenas desenvolvimento e testes.

ATENÇÃO: não usar em staging/production. Sem persistência entre reinícios.
Linhas são guardadas no formato de persistência (to_persistence) para
exercitar o mesmo caminho de serialização do Firestore.
"""

from __future__ import annotations

import copy
import itertools
from collections.abc import Iterable
from typing import Any

from app.domain.todos import Todo, TodoFilters, TodoSort
from app.infra.stores._rows import (
    Row,
    agenda_task_display,
    matches_todo_filters,
    project_display,
    sort_todo_rows,
    todo_stats,
    user_display,
)
from app.protocols.todo_repository import TodoRepositoryProtocol


class MemoryTodoRepository(TodoRepositoryProtocol):
    """ToDo's + tabelas auxiliares (usuários, projetos, times, agenda)."""

    def __init__(
        self,
        *,
        users: Iterable[Row] = (),
        projects: Iterable[Row] = (),
        teams: Iterable[Row] = (),
        agenda_tasks: Iterable[Row] = (),
    ) -> None:
        self._rows: dict[int, Row] = {}
        self._ids = itertools.count(1)
        self._users = {row["id"]: dict(row) for row in users}
        self._projects = {row["id"]: dict(row) for row in projects}
        self._teams = {row["id"]: dict(row) for row in teams}
        self._agenda_tasks = {row["id"]: dict(row) for row in agenda_tasks}
        self.agenda_project_links: set[tuple[int, int]] = set()

    # --- ToDo's ---

    async def find_all(
        self,
        filters: TodoFilters | None = None,
        sort: TodoSort | None = None,
    ) -> list[Todo]:
        filters = filters or TodoFilters()
        team_project_ids = self._team_project_ids(filters.team_id)
        rows = [
            row
            for row in self._rows.values()
            if matches_todo_filters(row, filters, team_project_ids)
        ]
        return [Todo.from_persistence(row) for row in sort_todo_rows(rows, sort or TodoSort())]

    async def find_by_id(self, todo_id: int) -> Todo | None:
        row = self._rows.get(todo_id)
        return Todo.from_persistence(row) if row else None

    async def save(self, todo: Todo) -> Todo:
        todo.id = next(self._ids)
        self._rows[todo.id] = copy.deepcopy(todo.to_persistence())
        return Todo.from_persistence(self._rows[todo.id])

    async def update(self, todo: Todo) -> Todo:
        self._rows[todo.id] = copy.deepcopy(todo.to_persistence())
        return Todo.from_persistence(self._rows[todo.id])

    async def delete(self, todo_id: int) -> None:
        self._rows.pop(todo_id, None)

    async def get_stats(self, user_id: str | None = None) -> dict[str, Any]:
        return todo_stats(self._rows.values(), user_id)

    # --- Lookups auxiliares ---

    async def get_users_by_ids(self, user_ids: Iterable[str]) -> dict[str, Row]:
        return {
            user_id: user_display(self._users[user_id])
            for user_id in set(user_ids)
            if user_id in self._users
        }

    async def get_projects_by_ids(self, project_ids: Iterable[int]) -> dict[int, Row]:
        return {
            project_id: project_display(self._projects[project_id], self._teams)
            for project_id in set(project_ids)
            if project_id in self._projects
        }

    async def get_agenda_tasks_by_ids(self, agenda_task_ids: Iterable[int]) -> dict[int, Row]:
        return {
            task_id: agenda_task_display(self._agenda_tasks[task_id])
            for task_id in set(agenda_task_ids)
            if task_id in self._agenda_tasks
        }

    async def get_agenda_task_by_id(self, agenda_task_id: int) -> Row | None:
        row = self._agenda_tasks.get(agenda_task_id)
        return agenda_task_display(row) if row else None

    async def ensure_agenda_project_link(self, agenda_task_id: int, project_id: int) -> None:
        self.agenda_project_links.add((agenda_task_id, project_id))

    async def get_teams(self) -> list[Row]:
        teams = [{"id": row["id"], "name": row.get("name")} for row in self._teams.values()]
        return sorted(teams, key=lambda team: (team["name"] or "").lower())

    def _team_project_ids(self, team_id: int | None) -> set[int] | None:
        if not team_id:
            return None
        return {
            project_id
            for project_id, row in self._projects.items()
            if row.get("team_id") == team_id
        }
