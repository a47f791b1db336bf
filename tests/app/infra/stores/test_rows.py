"""Testes dos helpers de linhas (filtros, ordenação, contagens)."""

from __future__ import annotations

from app.domain.todos import TodoFilters, TodoSort
from app.infra.stores._rows import (
    matches_relato_filters,
    matches_todo_filters,
    relato_stats,
    sort_todo_rows,
    todo_stats,
)


def _row(**data):
    row = {"name": "Tarefa", "status": "backlog", "priority": "média", "agenda_task_id": None}
    row.update(data)
    return row


def test_status_filter_is_normalized() -> None:
    assert matches_todo_filters(_row(status="em progresso"), TodoFilters(status=" Em Progresso"))
    assert not matches_todo_filters(_row(), TodoFilters(status="finalizado"))


def test_team_filter_uses_project_ids() -> None:
    filters = TodoFilters(team_id=1)
    assert matches_todo_filters(_row(project_id=10), filters, {10, 11})
    assert not matches_todo_filters(_row(project_id=None), filters, {10, 11})


def test_sort_by_name_ignores_case() -> None:
    rows = [_row(name="beta"), _row(name="Alfa"), _row(name="gama")]
    ordered = sort_todo_rows(rows, TodoSort(field="name", direction="asc"))
    assert [row["name"] for row in ordered] == ["Alfa", "beta", "gama"]


def test_sort_accepts_generator() -> None:
    rows = (_row(name=name) for name in ("b", "a"))
    assert [row["name"] for row in sort_todo_rows(rows, TodoSort(field="name", direction="asc"))] == ["a", "b"]


def test_todo_stats_ignores_agenda_tasks() -> None:
    rows = [_row(), _row(status="finalizado", priority="alta"), _row(agenda_task_id=3)]
    assert todo_stats(rows) == {
        "total": 2,
        "by_status": {"backlog": 1, "finalizado": 1},
        "by_priority": {"média": 1, "alta": 1},
    }


def test_relato_helpers() -> None:
    rows = [
        {"tipo_slug": "risco", "prioridade_slug": "alta", "is_resolved": True},
        {"tipo_slug": "risco", "prioridade_slug": "baixa", "is_resolved": False},
    ]
    assert relato_stats(rows) == {
        "total": 2,
        "by_tipo": {"risco": 2},
        "by_prioridade": {"alta": 1, "baixa": 1},
        "resolved": 1,
    }
    assert matches_relato_filters(rows[0], "RISCO", None)
    assert not matches_relato_filters(rows[1], None, "alta")
