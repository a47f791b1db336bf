"""Entidade Todo: aggregate root do domínio de ToDo's.

Representa uma tarefa independente (nível 3 da EAP). Pode existir
vinculada a uma atividade de agenda ou de forma independente.

Invariante: closed_at/closed_by preenchidos se e somente se o status
é fechado (finalizado/cancelado). Mutável apenas via comportamentos.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from app.domain.errors import AlreadyClosed, NotClosed, ValidationError
from app.domain.timestamps import parse_datetime, to_iso, utcnow
from app.domain.todos.todo_patch import TodoPatch
from app.domain.todos.value_objects import TaskPriority, TaskStatus

DateInput = datetime | date | str | None


def _require_name(name: str | None) -> str:
    if not name or not str(name).strip():
        raise ValidationError("O nome da tarefa é obrigatório")
    return str(name).strip()


def _clean_text(value: str | None) -> str | None:
    if value is None:
        return None
    return str(value).strip() or None


@dataclass(slots=True, eq=False)
class Todo:
    """Tarefa com ciclo de vida backlog → ... → finalizado/cancelado."""

    name: str
    id: int | None = None
    description: str | None = None
    status: TaskStatus = field(default_factory=TaskStatus.backlog)
    priority: TaskPriority = field(default_factory=TaskPriority.media)
    start_date: datetime | None = None
    due_date: datetime | None = None
    assignee: str | None = None
    created_by: str | None = None
    project_id: int | None = None
    agenda_task_id: int | None = None
    closed_at: datetime | None = None
    closed_by: str | None = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def __post_init__(self) -> None:
        self.name = _require_name(self.name)
        self.description = _clean_text(self.description)
        self.status = TaskStatus.coerce(self.status)
        self.priority = TaskPriority.coerce(self.priority)
        self.start_date = parse_datetime(self.start_date)
        self.due_date = parse_datetime(self.due_date)
        self.closed_at = parse_datetime(self.closed_at)
        self.created_at = parse_datetime(self.created_at) or utcnow()
        self.updated_at = parse_datetime(self.updated_at) or utcnow()
        self.assignee = self.assignee or None
        self.created_by = self.created_by or None
        self.project_id = self.project_id or None
        self.agenda_task_id = self.agenda_task_id or None
        self.closed_by = self.closed_by or None

    # --- Derivados ---

    @property
    def is_closed(self) -> bool:
        return self.status.is_closed

    @property
    def is_overdue(self) -> bool:
        if self.due_date is None or self.is_closed:
            return False
        return utcnow() > self.due_date

    def is_assigned_to(self, user_id: str) -> bool:
        return self.assignee == user_id

    def belongs_to(self, user_id: str) -> bool:
        return self.created_by == user_id

    # --- Comportamentos do domínio ---

    def complete(self, user_id: str | None) -> None:
        """Finaliza a tarefa (checkbox)."""
        if self.is_closed:
            raise AlreadyClosed()
        self._close(TaskStatus.finalizado(), user_id)

    def reopen(self) -> None:
        """Reabre a tarefa; sempre volta para 'a fazer'."""
        if not self.is_closed:
            raise NotClosed()
        self.status = TaskStatus.a_fazer()
        self.closed_at = None
        self.closed_by = None
        self.updated_at = utcnow()

    def update_status(self, new_status: TaskStatus | str, user_id: str | None = None) -> None:
        """Aceita qualquer status válido, mantendo a contabilidade de fechamento.

        Fechado → fechado (ex: finalizado → cancelado) preserva o
        closed_at/closed_by originais.
        """
        status = TaskStatus.coerce(new_status)
        if status.is_closed and not self.is_closed:
            self._close(status, user_id)
            return
        if self.is_closed and status.is_open:
            self.closed_at = None
            self.closed_by = None
        self.status = status
        self.updated_at = utcnow()

    def update_priority(self, new_priority: TaskPriority | str) -> None:
        self.priority = TaskPriority.coerce(new_priority)
        self.updated_at = utcnow()

    def update_details(self, patch: TodoPatch) -> None:
        """Aplica nome/descrição/datas informados no patch."""
        if patch.provided("name"):
            self.name = _require_name(patch.name)
        if patch.provided("description"):
            self.description = _clean_text(patch.description)
        if patch.provided("start_date"):
            self.start_date = parse_datetime(patch.start_date)
        if patch.provided("due_date"):
            self.due_date = parse_datetime(patch.due_date)
        self.updated_at = utcnow()

    def reassign(self, assignee_id: str | None) -> None:
        self.assignee = assignee_id or None
        self.updated_at = utcnow()

    def link_to_project(self, project_id: int | None) -> None:
        self.project_id = project_id or None
        self.updated_at = utcnow()

    def link_to_agenda_task(self, agenda_task_id: int | None) -> None:
        self.agenda_task_id = agenda_task_id or None
        self.updated_at = utcnow()

    def _close(self, status: TaskStatus, user_id: str | None) -> None:
        if not user_id:
            raise ValidationError("É necessário informar quem está fechando a tarefa")
        now = utcnow()
        self.status = status
        self.closed_at = now
        self.closed_by = user_id
        self.updated_at = now

    # --- Projeções ---

    def to_persistence(self) -> dict[str, Any]:
        """Converte para linha de persistência (snake_case, datas ISO)."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
            "priority": self.priority.value,
            "start_date": to_iso(self.start_date),
            "due_date": to_iso(self.due_date),
            "assignee": self.assignee,
            "created_by": self.created_by,
            "project_id": self.project_id,
            "agenda_task_id": self.agenda_task_id,
            "closed_at": to_iso(self.closed_at),
            "closed_by": self.closed_by,
            "created_at": to_iso(self.created_at),
            "updated_at": to_iso(self.updated_at),
        }

    def to_response(
        self,
        assignee_data: dict[str, Any] | None = None,
        created_by_data: dict[str, Any] | None = None,
        project_data: dict[str, Any] | None = None,
        agenda_task_data: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Converte para o formato de resposta da API, com dados auxiliares."""
        assignee_data = assignee_data or {}
        created_by_data = created_by_data or {}
        project_data = project_data or {}
        agenda_task_data = agenda_task_data or {}
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
            "status_label": self.status.label,
            "priority": self.priority.value,
            "priority_label": self.priority.label,
            "priority_color": self.priority.color,
            "start_date": to_iso(self.start_date),
            "due_date": to_iso(self.due_date),
            "assignee": self.assignee,
            "assignee_name": assignee_data.get("name"),
            "created_by": self.created_by,
            "created_by_name": created_by_data.get("name"),
            "project_id": self.project_id,
            "project_name": project_data.get("name"),
            "team_id": project_data.get("team_id"),
            "team_name": project_data.get("team_name"),
            "agenda_task_id": self.agenda_task_id,
            "agenda_task_name": agenda_task_data.get("name"),
            "closed_at": to_iso(self.closed_at),
            "created_at": to_iso(self.created_at),
            "updated_at": to_iso(self.updated_at),
            "is_closed": self.is_closed,
            "is_overdue": self.is_overdue,
        }

    @classmethod
    def from_persistence(cls, data: dict[str, Any]) -> Todo:
        """Reconstrói a entidade a partir de uma linha do store."""
        return cls(
            id=data.get("id"),
            name=data.get("name", ""),
            description=data.get("description"),
            status=data.get("status") or TaskStatus.backlog(),
            priority=data.get("priority") or TaskPriority.media(),
            start_date=data.get("start_date"),
            due_date=data.get("due_date"),
            assignee=data.get("assignee"),
            created_by=data.get("created_by"),
            project_id=data.get("project_id"),
            agenda_task_id=data.get("agenda_task_id"),
            closed_at=data.get("closed_at"),
            closed_by=data.get("closed_by"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    @classmethod
    def create(
        cls,
        *,
        name: str,
        description: str | None = None,
        priority: TaskPriority | str | None = None,
        start_date: DateInput = None,
        due_date: DateInput = None,
        assignee: str | None = None,
        created_by: str | None = None,
        project_id: int | None = None,
    ) -> Todo:
        """Cria novo ToDo em backlog (prioridade padrão: média)."""
        return cls(
            name=name,
            description=description,
            status=TaskStatus.backlog(),
            priority=priority or TaskPriority.media(),
            start_date=start_date,
            due_date=due_date,
            assignee=assignee,
            created_by=created_by,
            project_id=project_id,
        )
