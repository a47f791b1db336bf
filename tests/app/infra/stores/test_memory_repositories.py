"""Testes dos repositórios em memória."""

from __future__ import annotations

import pytest

from app.domain.relatos import CatalogEntry, Relato
from app.domain.todos import Todo, TodoFilters, TodoSort
from app.infra.stores import MemoryRelatoRepository, MemoryTodoRepository


class TestMemoryTodoRepository:
    @pytest.mark.asyncio
    async def test_save_assigns_sequential_ids(self) -> None:
        repository = MemoryTodoRepository()

        first = await repository.save(Todo.create(name="A"))
        second = await repository.save(Todo.create(name="B"))

        assert (first.id, second.id) == (1, 2)
        assert (await repository.find_by_id(2)).name == "B"

    @pytest.mark.asyncio
    async def test_returned_entities_are_copies(self) -> None:
        repository = MemoryTodoRepository()
        saved = await repository.save(Todo.create(name="A"))

        saved.update_priority("alta")

        assert (await repository.find_by_id(saved.id)).priority.value == "média"

    @pytest.mark.asyncio
    async def test_update_and_delete(self) -> None:
        repository = MemoryTodoRepository()
        saved = await repository.save(Todo.create(name="A"))
        saved.complete("u1")

        updated = await repository.update(saved)
        await repository.delete(saved.id)

        assert updated.closed_by == "u1"
        assert await repository.find_by_id(saved.id) is None

    @pytest.mark.asyncio
    async def test_standalone_only_hides_agenda_tasks(self) -> None:
        repository = MemoryTodoRepository()
        linked = Todo.create(name="Agenda")
        linked.link_to_agenda_task(5)
        await repository.save(linked)
        await repository.save(Todo.create(name="Avulsa"))

        standalone = await repository.find_all(TodoFilters())
        everything = await repository.find_all(TodoFilters(standalone_only=False))

        assert [todo.name for todo in standalone] == ["Avulsa"]
        assert len(everything) == 2

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive(self) -> None:
        repository = MemoryTodoRepository()
        await repository.save(Todo.create(name="Revisar Memorial"))
        await repository.save(Todo.create(name="Emitir ART"))

        found = await repository.find_all(TodoFilters(search="memorial"))

        assert [todo.name for todo in found] == ["Revisar Memorial"]

    @pytest.mark.asyncio
    async def test_sort_by_due_date_puts_nulls_last(self) -> None:
        repository = MemoryTodoRepository()
        await repository.save(Todo.create(name="Sem prazo"))
        await repository.save(Todo.create(name="Depois", due_date="2026-06-01"))
        await repository.save(Todo.create(name="Antes", due_date="2026-05-01"))

        asc = await repository.find_all(sort=TodoSort(field="due_date", direction="asc"))
        desc = await repository.find_all(sort=TodoSort(field="due_date", direction="desc"))

        assert [todo.name for todo in asc] == ["Antes", "Depois", "Sem prazo"]
        assert [todo.name for todo in desc] == ["Depois", "Antes", "Sem prazo"]

    @pytest.mark.asyncio
    async def test_sort_by_priority_uses_urgency(self) -> None:
        repository = MemoryTodoRepository()
        for name, priority in (("b", "baixa"), ("a", "alta"), ("m", "média")):
            await repository.save(Todo.create(name=name, priority=priority))

        ordered = await repository.find_all(sort=TodoSort(field="priority", direction="asc"))

        assert [todo.name for todo in ordered] == ["a", "m", "b"]

    @pytest.mark.asyncio
    async def test_unknown_sort_field_falls_back(self) -> None:
        repository = MemoryTodoRepository()
        await repository.save(Todo.create(name="A"))

        assert len(await repository.find_all(sort=TodoSort(field="drop table"))) == 1

    @pytest.mark.asyncio
    async def test_lookups_skip_unknown_ids(self) -> None:
        repository = MemoryTodoRepository(
            users=[{"id": "u1", "name": "Ana", "email": "ana@otus.eng.br"}],
            projects=[{"id": 1, "name": "interno", "comercial_name": "Obra X", "team_id": 3}],
            teams=[{"id": 3, "name": "Time A"}],
        )

        users = await repository.get_users_by_ids(["u1", "u9"])
        projects = await repository.get_projects_by_ids([1, 2])

        assert users == {"u1": {"id": "u1", "name": "Ana", "email": "ana@otus.eng.br"}}
        assert projects == {1: {"id": 1, "name": "Obra X", "team_id": 3, "team_name": "Time A"}}
        assert await repository.get_agenda_task_by_id(1) is None


class TestMemoryRelatoRepository:
    @pytest.mark.asyncio
    async def test_find_by_project_code_newest_first(self) -> None:
        repository = MemoryRelatoRepository()
        older = Relato.create(
            project_code="PRJ1", tipo="risco", prioridade="alta", titulo="1", descricao="d", author_id="u1"
        )
        older.created_at = older.created_at.replace(year=2025)
        await repository.save(older)
        await repository.save(
            Relato.create(
                project_code="PRJ1", tipo="risco", prioridade="alta", titulo="2", descricao="d", author_id="u1"
            )
        )

        relatos = await repository.find_by_project_code("PRJ1")

        assert [relato.titulo for relato in relatos] == ["2", "1"]
        assert await repository.find_by_project_code("OUTRO") == []

    @pytest.mark.asyncio
    async def test_catalog_ids_follow_seed(self) -> None:
        repository = MemoryRelatoRepository(
            tipos=[{"id": 5, "slug": "risco", "label": "Risco"}],
        )

        entry = await repository.save_tipo(CatalogEntry(slug="decisao", label="Decisão"))

        assert entry.id == 6
        assert await repository.update_tipo(99, {"label": "x"}) is None
