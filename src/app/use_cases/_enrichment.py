"""Enriquecimento de respostas com lookups auxiliares em lote.

Fan-out/fan-in: coleta os ids distintos de cada tipo de entidade
estrangeira, dispara uma consulta em lote por tipo (em paralelo via
asyncio.gather) e monta os DTOs. Falha de lookup nunca derruba a
operação principal: vira dict vazio + log de fallback.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import TYPE_CHECKING, Any, TypeVar

from app.domain.relatos.catalog import meta_by_slug
from app.observability import get_correlation_id, record_lookup_fallback
from config.logging import log_fallback

if TYPE_CHECKING:
    from app.domain.relatos import CatalogEntry, Relato
    from app.domain.todos import Todo
    from app.protocols import RelatoRepositoryProtocol, TodoRepositoryProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def safe_lookup(
    call: Awaitable[T],
    *,
    use_case: str,
    lookup: str,
    default: T,
) -> T:
    """Aguarda um lookup auxiliar; em erro, loga e retorna `default`."""
    try:
        return await call
    except Exception as exc:
        log_fallback(logger, f"{use_case}.{lookup}", reason=type(exc).__name__)
        record_lookup_fallback(use_case, lookup, type(exc).__name__, get_correlation_id())
        return default


async def _no_lookup() -> dict[Any, dict[str, Any]]:
    return {}


def distinct(values: Iterable[T | None]) -> list[T]:
    """Ids distintos, na ordem de primeira ocorrência, sem vazios."""
    seen: dict[T, None] = {}
    for value in values:
        if value:
            seen.setdefault(value, None)
    return list(seen)


def _batch(
    ids: list[Any],
    fetch: Callable[[list[Any]], Awaitable[dict[Any, dict[str, Any]]]],
    *,
    use_case: str,
    lookup: str,
) -> Awaitable[dict[Any, dict[str, Any]]]:
    # Sem ids, nada a buscar
    if not ids:
        return _no_lookup()
    return safe_lookup(fetch(ids), use_case=use_case, lookup=lookup, default={})


async def enrich_todos(
    repository: TodoRepositoryProtocol,
    todos: list[Todo],
    *,
    use_case: str,
) -> list[dict[str, Any]]:
    """Monta DTOs de ToDo com usuários, projetos e atividades de agenda.

    Uma chamada em lote por tipo de entidade, independentemente do
    número de ToDo's.
    """
    if not todos:
        return []

    user_ids = distinct(value for todo in todos for value in (todo.assignee, todo.created_by))
    project_ids = distinct(todo.project_id for todo in todos)
    agenda_task_ids = distinct(todo.agenda_task_id for todo in todos)

    users, projects, agenda_tasks = await asyncio.gather(
        _batch(user_ids, repository.get_users_by_ids, use_case=use_case, lookup="users"),
        _batch(project_ids, repository.get_projects_by_ids, use_case=use_case, lookup="projects"),
        _batch(
            agenda_task_ids,
            repository.get_agenda_tasks_by_ids,
            use_case=use_case,
            lookup="agenda_tasks",
        ),
    )

    return [
        todo.to_response(
            users.get(todo.assignee),
            users.get(todo.created_by),
            projects.get(todo.project_id),
            agenda_tasks.get(todo.agenda_task_id),
        )
        for todo in todos
    ]


async def enrich_todo(
    repository: TodoRepositoryProtocol,
    todo: Todo,
    *,
    use_case: str,
) -> dict[str, Any]:
    """Versão de um único ToDo; a atividade de agenda vem por id direto."""
    user_ids = distinct((todo.assignee, todo.created_by))
    project_ids = distinct((todo.project_id,))

    async def agenda_task() -> dict[str, Any] | None:
        if not todo.agenda_task_id:
            return None
        return await safe_lookup(
            repository.get_agenda_task_by_id(todo.agenda_task_id),
            use_case=use_case,
            lookup="agenda_task",
            default=None,
        )

    users, projects, agenda_task_data = await asyncio.gather(
        _batch(user_ids, repository.get_users_by_ids, use_case=use_case, lookup="users"),
        _batch(project_ids, repository.get_projects_by_ids, use_case=use_case, lookup="projects"),
        agenda_task(),
    )

    return todo.to_response(
        users.get(todo.assignee),
        users.get(todo.created_by),
        projects.get(todo.project_id),
        agenda_task_data,
    )


async def load_catalogs(
    repository: RelatoRepositoryProtocol,
    *,
    use_case: str,
) -> tuple[list[CatalogEntry], list[CatalogEntry]]:
    """Carrega tipos e prioridades em paralelo, degradando para vazio."""
    tipos, prioridades = await asyncio.gather(
        safe_lookup(repository.find_all_tipos(), use_case=use_case, lookup="tipos", default=[]),
        safe_lookup(
            repository.find_all_prioridades(),
            use_case=use_case,
            lookup="prioridades",
            default=[],
        ),
    )
    return tipos, prioridades


async def enrich_relatos(
    repository: RelatoRepositoryProtocol,
    relatos: list[Relato],
    *,
    use_case: str,
    tipos: list[CatalogEntry] | None = None,
    prioridades: list[CatalogEntry] | None = None,
) -> list[dict[str, Any]]:
    """Monta DTOs de Relato com metadata do catálogo e nome do autor.

    Catálogos já carregados pelo chamador (validação) são reaproveitados.
    """
    if not relatos:
        return []

    async def catalogs() -> tuple[list[CatalogEntry], list[CatalogEntry]]:
        if tipos is not None and prioridades is not None:
            return tipos, prioridades
        return await load_catalogs(repository, use_case=use_case)

    author_ids = distinct(relato.author_id for relato in relatos)
    (tipo_entries, prioridade_entries), authors = await asyncio.gather(
        catalogs(),
        _batch(author_ids, repository.get_users_by_ids, use_case=use_case, lookup="authors"),
    )

    tipo_meta = meta_by_slug(tipo_entries)
    prioridade_meta = meta_by_slug(prioridade_entries)
    return [
        relato.to_response(
            tipo_meta.get(relato.tipo.value),
            prioridade_meta.get(relato.prioridade.value),
            authors.get(relato.author_id),
        )
        for relato in relatos
    ]


async def enrich_relato(
    repository: RelatoRepositoryProtocol,
    relato: Relato,
    *,
    use_case: str,
    tipos: list[CatalogEntry] | None = None,
    prioridades: list[CatalogEntry] | None = None,
) -> dict[str, Any]:
    """Versão de um único Relato; o autor vem por id direto."""

    async def catalogs() -> tuple[list[CatalogEntry], list[CatalogEntry]]:
        if tipos is not None and prioridades is not None:
            return tipos, prioridades
        return await load_catalogs(repository, use_case=use_case)

    (tipo_entries, prioridade_entries), author = await asyncio.gather(
        catalogs(),
        safe_lookup(
            repository.get_user_by_id(relato.author_id),
            use_case=use_case,
            lookup="author",
            default=None,
        ),
    )

    return relato.to_response(
        meta_by_slug(tipo_entries).get(relato.tipo.value),
        meta_by_slug(prioridade_entries).get(relato.prioridade.value),
        author,
    )
