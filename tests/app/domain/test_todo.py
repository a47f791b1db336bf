"""Testes da entidade Todo (ciclo de vida e projeções)."""

from __future__ import annotations

import itertools
from datetime import UTC, datetime, timedelta

import pytest

from app.domain.errors import AlreadyClosed, InvalidStateTransition, NotClosed, ValidationError
from app.domain.todos import TaskPriority, TaskStatus, Todo, TodoPatch


def _todo(**overrides) -> Todo:
    data = {"name": "Revisar memorial", "created_by": "u1", "assignee": "u1"}
    data.update(overrides)
    return Todo.create(**data)


class TestCreate:
    def test_defaults(self) -> None:
        todo = Todo.create(name="  Revisar memorial ", priority="alta")

        assert todo.name == "Revisar memorial"
        assert todo.status == TaskStatus.backlog()
        assert todo.priority == TaskPriority.alta()
        assert todo.id is None
        assert todo.closed_at is None

    def test_default_priority_is_media(self) -> None:
        assert Todo.create(name="x").priority == TaskPriority.media()

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_name_required(self, name) -> None:
        with pytest.raises(ValidationError, match="O nome da tarefa é obrigatório"):
            Todo.create(name=name)

    def test_parses_dates(self) -> None:
        todo = Todo.create(name="x", due_date="2026-03-10T12:00:00")
        assert todo.due_date == datetime(2026, 3, 10, 12, tzinfo=UTC)


class TestComplete:
    def test_complete_closes_with_user(self) -> None:
        todo = Todo.create(name="Revisar memorial", priority="alta")
        todo.complete("user1")

        assert todo.status.value == "finalizado"
        assert todo.is_closed
        assert todo.closed_by == "user1"
        assert todo.closed_at is not None

    def test_complete_twice_fails(self) -> None:
        todo = _todo()
        todo.complete("user1")

        with pytest.raises(AlreadyClosed) as exc_info:
            todo.complete("user1")
        assert isinstance(exc_info.value, InvalidStateTransition)

    def test_complete_requires_user(self) -> None:
        todo = _todo()
        with pytest.raises(ValidationError):
            todo.complete(None)
        assert not todo.is_closed
        assert todo.closed_at is None


class TestReopen:
    def test_reopen_goes_to_a_fazer(self) -> None:
        todo = _todo()
        todo.update_status("em progresso")
        todo.complete("u1")

        todo.reopen()

        assert todo.status == TaskStatus.a_fazer()
        assert todo.closed_at is None
        assert todo.closed_by is None

    def test_reopen_open_todo_fails(self) -> None:
        with pytest.raises(NotClosed, match="Tarefa já está aberta"):
            _todo().reopen()


class TestUpdateStatus:
    def test_open_to_closed_sets_closure(self) -> None:
        todo = _todo()
        todo.update_status("cancelado", "u2")

        assert todo.status == TaskStatus.cancelado()
        assert todo.closed_by == "u2"
        assert todo.closed_at is not None

    def test_closed_to_closed_keeps_original_closure(self) -> None:
        todo = _todo()
        todo.complete("u1")
        closed_at = todo.closed_at

        todo.update_status("cancelado", "u2")

        assert todo.status == TaskStatus.cancelado()
        assert todo.closed_at == closed_at
        assert todo.closed_by == "u1"

    def test_closed_to_open_clears_closure(self) -> None:
        todo = _todo()
        todo.complete("u1")

        todo.update_status("validação")

        assert todo.status == TaskStatus.validacao()
        assert todo.closed_at is None
        assert todo.closed_by is None

    def test_open_to_open(self) -> None:
        todo = _todo()
        todo.update_status("a fazer")
        assert todo.status.is_actionable
        assert todo.closed_at is None

    def test_invalid_status_does_not_mutate(self) -> None:
        todo = _todo()
        with pytest.raises(ValidationError):
            todo.update_status("pausado")
        assert todo.status == TaskStatus.backlog()

    @pytest.mark.parametrize("sequence", list(itertools.product(TaskStatus.valid_values(), repeat=3)))
    def test_closure_tracks_status_across_sequences(self, sequence: tuple[str, ...]) -> None:
        todo = _todo()

        for status in sequence:
            todo.update_status(status, "u1")

            assert (todo.closed_at is not None) == todo.status.is_closed
            assert (todo.closed_by is not None) == todo.status.is_closed


class TestDetails:
    def test_only_provided_fields_change(self) -> None:
        todo = _todo(description="original")
        todo.update_details(TodoPatch(name="Novo nome"))

        assert todo.name == "Novo nome"
        assert todo.description == "original"

    def test_explicit_none_clears(self) -> None:
        todo = _todo(description="original", due_date="2026-01-01")
        todo.update_details(TodoPatch(description=None, due_date=None))

        assert todo.description is None
        assert todo.due_date is None

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _todo().update_details(TodoPatch(name=" "))

    def test_reassign_and_links(self) -> None:
        todo = _todo()
        todo.reassign("u9")
        todo.link_to_project(7)
        todo.link_to_agenda_task(0)

        assert todo.is_assigned_to("u9")
        assert todo.project_id == 7
        assert todo.agenda_task_id is None
        assert todo.belongs_to("u1")


class TestOverdue:
    def test_overdue_when_past_due_and_open(self) -> None:
        todo = _todo(due_date=datetime.now(UTC) - timedelta(days=1))
        assert todo.is_overdue

    def test_not_overdue_when_closed(self) -> None:
        todo = _todo(due_date=datetime.now(UTC) - timedelta(days=1))
        todo.complete("u1")
        assert not todo.is_overdue

    def test_not_overdue_without_due_date(self) -> None:
        assert not _todo().is_overdue


class TestProjections:
    def test_persistence_round_trip(self) -> None:
        todo = _todo(priority="baixa", project_id=3, due_date="2026-05-01T08:00:00+00:00")
        todo.id = 11
        todo.complete("u1")

        restored = Todo.from_persistence(todo.to_persistence())

        assert restored.id == 11
        assert restored.status == todo.status
        assert restored.priority == todo.priority
        assert restored.due_date == todo.due_date
        assert restored.closed_at == todo.closed_at
        assert restored.closed_by == "u1"

    def test_from_persistence_defaults(self) -> None:
        todo = Todo.from_persistence({"id": 1, "name": "x", "status": None, "priority": ""})
        assert todo.status == TaskStatus.backlog()
        assert todo.priority == TaskPriority.media()

    def test_response_uses_auxiliary_data(self) -> None:
        todo = _todo(project_id=3)
        todo.id = 5

        response = todo.to_response(
            assignee_data={"name": "Ana"},
            created_by_data={"name": "Bruno"},
            project_data={"name": "Obra X", "team_id": 2, "team_name": "Time A"},
            agenda_task_data={"name": "Compatibilização"},
        )

        assert response["assignee_name"] == "Ana"
        assert response["created_by_name"] == "Bruno"
        assert response["project_name"] == "Obra X"
        assert response["team_id"] == 2
        assert response["team_name"] == "Time A"
        assert response["agenda_task_name"] == "Compatibilização"
        assert response["status_label"] == "Backlog"
        assert response["priority_color"] == "#f59e0b"
        assert response["is_closed"] is False

    def test_response_without_auxiliary_data(self) -> None:
        response = _todo().to_response()
        assert response["assignee_name"] is None
        assert response["project_name"] is None
        assert response["agenda_task_name"] is None
