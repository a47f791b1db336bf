"""Repositório de ToDo's no Firestore.

Estrutura:
    tasks/{id}                 linha de persistência do ToDo
    users_otus/{user_id}       {name, email}
    projects/{id}              {name, comercial_name, team_id}
    teams/{id}                 {name}
    agenda_tasks/{id}          {name}
    agenda_projects/{agenda_task_id}_{project_id}
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from google.cloud.firestore_v1.base_query import FieldFilter

from app.domain.todos import Todo, TodoFilters, TodoSort
from app.domain.todos.value_objects import normalize_enum_input
from app.infra.stores._firestore import FirestoreRepositoryBase
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

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

    from config.settings import FirestoreSettings

logger = logging.getLogger(__name__)


class FirestoreTodoRepository(FirestoreRepositoryBase, TodoRepositoryProtocol):
    """ToDo's e lookups auxiliares sobre o Firestore."""

    def __init__(self, firestore_client: FirestoreClient, settings: FirestoreSettings) -> None:
        super().__init__(firestore_client, settings)
        self._tasks = settings.collection_tasks

    # --- ToDo's ---

    async def find_all(
        self,
        filters: TodoFilters | None = None,
        sort: TodoSort | None = None,
    ) -> list[Todo]:
        return await self._run(self._find_all_sync, filters or TodoFilters(), sort or TodoSort())

    def _find_all_sync(self, filters: TodoFilters, sort: TodoSort) -> list[Todo]:
        def query() -> list[Row]:
            # Igualdades vão para o servidor; o resto é filtrado em memória
            ref = self._db.collection(self._tasks)
            if filters.standalone_only:
                ref = ref.where(filter=FieldFilter("agenda_task_id", "==", None))
            if filters.status:
                status = normalize_enum_input(filters.status)
                ref = ref.where(filter=FieldFilter("status", "==", status))
            if filters.assignee:
                ref = ref.where(filter=FieldFilter("assignee", "==", filters.assignee))
            if filters.project_id:
                ref = ref.where(filter=FieldFilter("project_id", "==", filters.project_id))
            return self._stream(ref)

        rows = self._primary("find_all", self._tasks, query)
        team_project_ids = self._team_project_ids(filters.team_id)
        selected = [row for row in rows if matches_todo_filters(row, filters, team_project_ids)]
        return [Todo.from_persistence(row) for row in sort_todo_rows(selected, sort)]

    async def find_by_id(self, todo_id: int) -> Todo | None:
        return await self._run(self._find_by_id_sync, todo_id)

    def _find_by_id_sync(self, todo_id: int) -> Todo | None:
        snapshot = self._primary(
            "find_by_id",
            self._tasks,
            lambda: self._db.collection(self._tasks).document(str(todo_id)).get(),
        )
        if not snapshot.exists:
            return None
        return Todo.from_persistence({**(snapshot.to_dict() or {}), "id": todo_id})

    async def save(self, todo: Todo) -> Todo:
        return await self._run(self._save_sync, todo)

    def _save_sync(self, todo: Todo) -> Todo:
        def write() -> Row:
            todo.id = self._next_id(self._tasks)
            row = todo.to_persistence()
            self._db.collection(self._tasks).document(str(todo.id)).set(row)
            return row

        row = self._primary("save", self._tasks, write)
        logger.debug("todo_persisted", extra={"todo_id": todo.id})
        return Todo.from_persistence(row)

    async def update(self, todo: Todo) -> Todo:
        return await self._run(self._update_sync, todo)

    def _update_sync(self, todo: Todo) -> Todo:
        row = todo.to_persistence()
        self._primary(
            "update",
            self._tasks,
            lambda: self._db.collection(self._tasks).document(str(todo.id)).set(row, merge=True),
        )
        return Todo.from_persistence(row)

    async def delete(self, todo_id: int) -> None:
        await self._run(
            self._primary,
            "delete",
            self._tasks,
            lambda: self._db.collection(self._tasks).document(str(todo_id)).delete(),
        )

    async def get_stats(self, user_id: str | None = None) -> dict[str, Any]:
        return await self._run(self._get_stats_sync, user_id)

    def _get_stats_sync(self, user_id: str | None) -> dict[str, Any]:
        rows = self._primary(
            "get_stats",
            self._tasks,
            lambda: self._stream(
                self._db.collection(self._tasks).where(
                    filter=FieldFilter("agenda_task_id", "==", None)
                )
            ),
        )
        return todo_stats(rows, user_id)

    # --- Lookups auxiliares ---

    async def get_users_by_ids(self, user_ids: Iterable[str]) -> dict[str, Row]:
        rows = await self._run(self._get_many, self._settings.collection_users, list(user_ids))
        return {user_id: user_display(row) for user_id, row in rows.items()}

    async def get_projects_by_ids(self, project_ids: Iterable[int]) -> dict[int, Row]:
        return await self._run(self._get_projects_sync, list(project_ids))

    def _get_projects_sync(self, project_ids: list[int]) -> dict[int, Row]:
        projects = self._get_many(self._settings.collection_projects, project_ids)
        team_ids = {row["team_id"] for row in projects.values() if row.get("team_id") is not None}
        teams = self._get_many(self._settings.collection_teams, team_ids)
        return {project_id: project_display(row, teams) for project_id, row in projects.items()}

    async def get_agenda_tasks_by_ids(self, agenda_task_ids: Iterable[int]) -> dict[int, Row]:
        rows = await self._run(
            self._get_many,
            self._settings.collection_agenda_tasks,
            list(agenda_task_ids),
        )
        return {task_id: agenda_task_display(row) for task_id, row in rows.items()}

    async def get_agenda_task_by_id(self, agenda_task_id: int) -> Row | None:
        rows = await self.get_agenda_tasks_by_ids([agenda_task_id])
        return rows.get(agenda_task_id)

    async def ensure_agenda_project_link(self, agenda_task_id: int, project_id: int) -> None:
        await self._run(self._ensure_link_sync, agenda_task_id, project_id)

    def _ensure_link_sync(self, agenda_task_id: int, project_id: int) -> None:
        collection = self._settings.collection_agenda_projects
        self._primary(
            "ensure_agenda_project_link",
            collection,
            lambda: self._db.collection(collection)
            .document(f"{agenda_task_id}_{project_id}")
            .set({"agenda_task_id": agenda_task_id, "project_id": project_id}, merge=True),
        )

    async def get_teams(self) -> list[Row]:
        return await self._run(self._get_teams_sync)

    def _get_teams_sync(self) -> list[Row]:
        collection = self._settings.collection_teams
        docs = self._primary(
            "get_teams",
            collection,
            lambda: list(self._db.collection(collection).stream()),
        )
        teams = []
        for doc in docs:
            data = doc.to_dict() or {}
            teams.append({"id": data.get("id", doc.id), "name": data.get("name")})
        return sorted(teams, key=lambda team: (team["name"] or "").lower())

    def _team_project_ids(self, team_id: int | None) -> set[int] | None:
        if not team_id:
            return None
        collection = self._settings.collection_projects
        docs = self._primary(
            "team_projects",
            collection,
            lambda: list(
                self._db.collection(collection)
                .where(filter=FieldFilter("team_id", "==", team_id))
                .stream()
            ),
        )
        # A chave do projeto é o id do documento, como em get_projects_by_ids
        return {int(doc.id) for doc in docs if doc.id.isdigit()}
