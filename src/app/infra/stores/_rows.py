"""Filtros, ordenação e agregações sobre linhas de persistência.

Compartilhado pelos repositórios em memória e Firestore: o Firestore
aplica no servidor só os filtros de igualdade; busca textual, time,
ordenação e contagens rodam aqui sobre as linhas já carregadas.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import Any

from app.domain.todos import TodoFilters, TodoSort
from app.domain.todos.value_objects import PRIORITY_ORDER, normalize_enum_input

Row = dict[str, Any]


def project_display(row: Row, teams: dict[Any, Row]) -> Row:
    """Projeção de projeto usada no DTO de ToDo (nome comercial primeiro)."""
    team_id = row.get("team_id")
    team = teams.get(team_id) if team_id is not None else None
    return {
        "id": row.get("id"),
        "name": row.get("comercial_name") or row.get("name"),
        "team_id": team_id,
        "team_name": team.get("name") if team else None,
    }


def user_display(row: Row) -> Row:
    return {"id": row.get("id"), "name": row.get("name"), "email": row.get("email")}


def agenda_task_display(row: Row) -> Row:
    return {"id": row.get("id"), "name": row.get("name")}


def matches_todo_filters(
    row: Row,
    filters: TodoFilters,
    team_project_ids: set[int] | None = None,
) -> bool:
    """Aplica os filtros de listagem a uma linha de tasks.

    `team_project_ids` são os projetos do time filtrado; None quando
    não há filtro de time.
    """
    if filters.standalone_only and row.get("agenda_task_id") is not None:
        return False
    if filters.status and row.get("status") != normalize_enum_input(filters.status):
        return False
    if filters.priority and row.get("priority") != normalize_enum_input(filters.priority):
        return False
    if filters.project_id and row.get("project_id") != filters.project_id:
        return False
    if filters.assignee and row.get("assignee") != filters.assignee:
        return False
    if filters.search and filters.search.strip().lower() not in (row.get("name") or "").lower():
        return False
    if team_project_ids is not None and row.get("project_id") not in team_project_ids:
        return False
    return True


def _sort_value(row: Row, field: str) -> Any:
    value = row.get(field)
    if field == "priority":
        return PRIORITY_ORDER.get(value, len(PRIORITY_ORDER) + 1)
    if isinstance(value, str):
        return value.lower()
    return value


def sort_todo_rows(rows: Iterable[Row], sort: TodoSort) -> list[Row]:
    """Ordena pelo campo pedido; valores nulos sempre no fim."""
    field = sort.safe_field
    rows = list(rows)
    present = [row for row in rows if row.get(field) is not None]
    missing = [row for row in rows if row.get(field) is None]
    present.sort(key=lambda row: _sort_value(row, field), reverse=sort.descending)
    return present + missing


def todo_stats(rows: Iterable[Row], user_id: str | None = None) -> dict[str, Any]:
    """{total, by_status, by_priority} de tarefas independentes."""
    selected = [
        row
        for row in rows
        if row.get("agenda_task_id") is None
        and (not user_id or user_id in (row.get("assignee"), row.get("created_by")))
    ]
    return {
        "total": len(selected),
        "by_status": dict(Counter(row["status"] for row in selected if row.get("status"))),
        "by_priority": dict(Counter(row["priority"] for row in selected if row.get("priority"))),
    }


def relato_stats(rows: Iterable[Row]) -> dict[str, Any]:
    """{total, by_tipo, by_prioridade, resolved} dos relatos de um projeto."""
    rows = list(rows)
    return {
        "total": len(rows),
        "by_tipo": dict(Counter(row["tipo_slug"] for row in rows if row.get("tipo_slug"))),
        "by_prioridade": dict(
            Counter(row["prioridade_slug"] for row in rows if row.get("prioridade_slug"))
        ),
        "resolved": sum(1 for row in rows if row.get("is_resolved")),
    }


def matches_relato_filters(row: Row, tipo: str | None, prioridade: str | None) -> bool:
    if tipo and row.get("tipo_slug") != normalize_enum_input(tipo):
        return False
    if prioridade and row.get("prioridade_slug") != normalize_enum_input(prioridade):
        return False
    return True


def sort_newest_first(rows: Iterable[Row]) -> list[Row]:
    return sorted(rows, key=lambda row: row.get("created_at") or "", reverse=True)
