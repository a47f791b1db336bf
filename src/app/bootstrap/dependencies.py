"""Factories de repositórios e container de dependências.

O container é montado uma vez no lifespan da aplicação e guardado em
app.state; as rotas constroem os use cases a partir dele.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from app.bootstrap.clients import create_firestore_client
from app.domain.relatos import CatalogEntry
from app.infra.stores import (
    FirestoreRelatoRepository,
    FirestoreTodoRepository,
    MemoryRelatoRepository,
    MemoryTodoRepository,
)
from app.protocols import RelatoRepositoryProtocol, TodoRepositoryProtocol
from config.settings import (
    AuthSettings,
    get_auth_settings,
    get_firestore_settings,
    get_store_settings,
)

logger = logging.getLogger(__name__)

# Catálogo inicial do backend em memória (dev)
DEV_RELATO_TIPOS: tuple[CatalogEntry, ...] = (
    CatalogEntry(slug="risco", label="Risco", color="#ef4444", icon="alert-triangle", sort_order=1),
    CatalogEntry(slug="decisao", label="Decisão", color="#3b82f6", icon="check-circle", sort_order=2),
    CatalogEntry(slug="bloqueio", label="Bloqueio", color="#f97316", icon="x-circle", sort_order=3),
    CatalogEntry(slug="informativo", label="Informativo", color="#6B7280", icon="info", sort_order=4),
)

DEV_RELATO_PRIORIDADES: tuple[CatalogEntry, ...] = (
    CatalogEntry(slug="baixa", label="Baixa", color="#22c55e", sort_order=1),
    CatalogEntry(slug="media", label="Média", color="#f59e0b", sort_order=2),
    CatalogEntry(slug="alta", label="Alta", color="#ef4444", sort_order=3),
)


@dataclass(frozen=True, slots=True)
class Container:
    """Dependências compartilhadas pela aplicação (montadas no startup)."""

    todo_repository: TodoRepositoryProtocol
    relato_repository: RelatoRepositoryProtocol
    auth: AuthSettings


def create_todo_repository() -> TodoRepositoryProtocol:
    """Cria repositório de ToDo's conforme STORE_BACKEND."""
    backend = get_store_settings().backend

    if backend == "firestore":
        repository: TodoRepositoryProtocol = FirestoreTodoRepository(
            create_firestore_client(),
            get_firestore_settings(),
        )
    else:
        repository = MemoryTodoRepository()

    logger.info("todo_repository_created", extra={"backend": backend})
    return repository


def create_relato_repository() -> RelatoRepositoryProtocol:
    """Cria repositório de Relatos conforme STORE_BACKEND."""
    backend = get_store_settings().backend

    if backend == "firestore":
        repository: RelatoRepositoryProtocol = FirestoreRelatoRepository(
            create_firestore_client(),
            get_firestore_settings(),
        )
    else:
        repository = MemoryRelatoRepository(
            tipos=DEV_RELATO_TIPOS,
            prioridades=DEV_RELATO_PRIORIDADES,
        )

    logger.info("relato_repository_created", extra={"backend": backend})
    return repository


def build_container() -> Container:
    return Container(
        todo_repository=create_todo_repository(),
        relato_repository=create_relato_repository(),
        auth=get_auth_settings(),
    )
