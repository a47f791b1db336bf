"""Testes do enriquecimento em lote (fan-out/fan-in)."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from app.domain.relatos import Relato
from app.domain.todos import Todo
from app.use_cases._enrichment import distinct, enrich_relatos, enrich_todo, safe_lookup


def _relato(author_id: str) -> Relato:
    return Relato.create(
        project_code="PRJ1",
        tipo="risco",
        prioridade="alta",
        titulo="t",
        descricao="d",
        author_id=author_id,
        author_name=f"snapshot-{author_id}",
    )


def test_distinct_keeps_first_occurrence_and_drops_empty() -> None:
    assert distinct(["b", None, "a", "b", "", "a"]) == ["b", "a"]


@pytest.mark.asyncio
async def test_safe_lookup_returns_default_on_error() -> None:
    lookup = AsyncMock(side_effect=RuntimeError("boom"))

    result = await safe_lookup(lookup(), use_case="list_todos", lookup="users", default={})

    assert result == {}


@pytest.mark.asyncio
async def test_enrich_relatos_batches_authors_and_degrades_catalogs() -> None:
    repository = MagicMock()
    repository.find_all_tipos = AsyncMock(side_effect=RuntimeError("catalog down"))
    repository.find_all_prioridades = AsyncMock(return_value=[])
    repository.get_users_by_ids = AsyncMock(return_value={"u1": {"name": "Ana"}})

    responses = await enrich_relatos(
        repository,
        [_relato("u1"), _relato("u2"), _relato("u1")],
        use_case="list_relatos",
    )

    repository.get_users_by_ids.assert_awaited_once()
    assert sorted(repository.get_users_by_ids.await_args.args[0]) == ["u1", "u2"]
    assert [response["author_name"] for response in responses] == ["Ana", "snapshot-u2", "Ana"]
    assert responses[0]["tipo_label"] == "risco"


@pytest.mark.asyncio
async def test_enrich_todo_fetches_agenda_task_by_id() -> None:
    todo = Todo.create(name="x", assignee="u1")
    todo.link_to_agenda_task(7)
    repository = MagicMock()
    repository.get_users_by_ids = AsyncMock(return_value={"u1": {"name": "Ana"}})
    repository.get_projects_by_ids = AsyncMock(return_value={})
    repository.get_agenda_task_by_id = AsyncMock(return_value={"id": 7, "name": "Projeto executivo"})

    response = await enrich_todo(repository, todo, use_case="get_todo")

    repository.get_projects_by_ids.assert_not_awaited()
    repository.get_agenda_task_by_id.assert_awaited_once_with(7)
    assert response["agenda_task_name"] == "Projeto executivo"
    assert response["assignee_name"] == "Ana"
