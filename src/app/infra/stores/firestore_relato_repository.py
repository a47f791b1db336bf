"""Repositório de Relatos no Firestore.

Estrutura:
    relatos/{id}               linha de persistência do Relato
    relato_tipos/{id}          CatalogEntry
    relato_prioridades/{id}    CatalogEntry
    users_otus/{user_id}       {name, email}
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from google.cloud.firestore_v1.base_query import FieldFilter

from app.domain.relatos import CatalogEntry, Relato
from app.domain.relatos.catalog import active_sorted
from app.infra.stores._firestore import FirestoreRepositoryBase
from app.infra.stores._rows import (
    Row,
    matches_relato_filters,
    relato_stats,
    sort_newest_first,
    user_display,
)
from app.protocols.relato_repository import RelatoRepositoryProtocol

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

    from config.settings import FirestoreSettings

logger = logging.getLogger(__name__)


class FirestoreRelatoRepository(FirestoreRepositoryBase, RelatoRepositoryProtocol):
    """Relatos, catálogos e usuários sobre o Firestore."""

    def __init__(self, firestore_client: FirestoreClient, settings: FirestoreSettings) -> None:
        super().__init__(firestore_client, settings)
        self._relatos = settings.collection_relatos

    # --- Relatos ---

    async def find_by_project_code(
        self,
        project_code: str,
        tipo: str | None = None,
        prioridade: str | None = None,
    ) -> list[Relato]:
        rows = await self._run(self._project_rows_sync, project_code)
        selected = [row for row in rows if matches_relato_filters(row, tipo, prioridade)]
        return [Relato.from_persistence(row) for row in sort_newest_first(selected)]

    def _project_rows_sync(self, project_code: str) -> list[Row]:
        return self._primary(
            "find_by_project_code",
            self._relatos,
            lambda: self._stream(
                self._db.collection(self._relatos).where(
                    filter=FieldFilter("project_code", "==", project_code)
                )
            ),
        )

    async def find_by_id(self, relato_id: int) -> Relato | None:
        return await self._run(self._find_by_id_sync, relato_id)

    def _find_by_id_sync(self, relato_id: int) -> Relato | None:
        snapshot = self._primary(
            "find_by_id",
            self._relatos,
            lambda: self._db.collection(self._relatos).document(str(relato_id)).get(),
        )
        if not snapshot.exists:
            return None
        return Relato.from_persistence({**(snapshot.to_dict() or {}), "id": relato_id})

    async def save(self, relato: Relato) -> Relato:
        return await self._run(self._save_sync, relato)

    def _save_sync(self, relato: Relato) -> Relato:
        def write() -> Row:
            relato.id = self._next_id(self._relatos)
            row = relato.to_persistence()
            self._db.collection(self._relatos).document(str(relato.id)).set(row)
            return row

        row = self._primary("save", self._relatos, write)
        logger.debug("relato_persisted", extra={"relato_id": relato.id})
        return Relato.from_persistence(row)

    async def update(self, relato: Relato) -> Relato:
        return await self._run(self._update_sync, relato)

    def _update_sync(self, relato: Relato) -> Relato:
        row = relato.to_persistence()
        self._primary(
            "update",
            self._relatos,
            lambda: self._db.collection(self._relatos).document(str(relato.id)).set(row, merge=True),
        )
        return Relato.from_persistence(row)

    async def delete(self, relato_id: int) -> None:
        await self._run(
            self._primary,
            "delete",
            self._relatos,
            lambda: self._db.collection(self._relatos).document(str(relato_id)).delete(),
        )

    async def get_stats_by_project(self, project_code: str) -> dict[str, Any]:
        rows = await self._run(self._project_rows_sync, project_code)
        return relato_stats(rows)

    # --- Catálogos ---

    async def find_all_tipos(self) -> list[CatalogEntry]:
        return await self._run(self._find_catalog_sync, self._settings.collection_relato_tipos)

    async def save_tipo(self, entry: CatalogEntry) -> CatalogEntry:
        return await self._run(self._save_entry_sync, self._settings.collection_relato_tipos, entry)

    async def update_tipo(self, tipo_id: int, changes: dict[str, Any]) -> CatalogEntry | None:
        return await self._run(
            self._update_entry_sync,
            self._settings.collection_relato_tipos,
            tipo_id,
            changes,
        )

    async def find_all_prioridades(self) -> list[CatalogEntry]:
        return await self._run(
            self._find_catalog_sync,
            self._settings.collection_relato_prioridades,
        )

    async def save_prioridade(self, entry: CatalogEntry) -> CatalogEntry:
        return await self._run(
            self._save_entry_sync,
            self._settings.collection_relato_prioridades,
            entry,
        )

    async def update_prioridade(
        self,
        prioridade_id: int,
        changes: dict[str, Any],
    ) -> CatalogEntry | None:
        return await self._run(
            self._update_entry_sync,
            self._settings.collection_relato_prioridades,
            prioridade_id,
            changes,
        )

    def _find_catalog_sync(self, collection: str) -> list[CatalogEntry]:
        rows = self._primary(
            "find_catalog",
            collection,
            lambda: self._stream(
                self._db.collection(collection).where(filter=FieldFilter("is_active", "==", True))
            ),
        )
        return active_sorted(CatalogEntry.model_validate(row) for row in rows)

    def _save_entry_sync(self, collection: str, entry: CatalogEntry) -> CatalogEntry:
        def write() -> CatalogEntry:
            saved = entry.model_copy(update={"id": self._next_id(collection)})
            self._db.collection(collection).document(str(saved.id)).set(saved.model_dump())
            return saved

        return self._primary("save_catalog_entry", collection, write)

    def _update_entry_sync(
        self,
        collection: str,
        entry_id: int,
        changes: dict[str, Any],
    ) -> CatalogEntry | None:
        def write() -> CatalogEntry | None:
            ref = self._db.collection(collection).document(str(entry_id))
            snapshot = ref.get()
            if not snapshot.exists:
                return None
            ref.set(changes, merge=True)
            current = snapshot.to_dict() or {}
            return CatalogEntry.model_validate({**current, **changes, "id": entry_id})

        return self._primary("update_catalog_entry", collection, write)

    # --- Usuários ---

    async def get_user_by_id(self, user_id: str) -> Row | None:
        users = await self.get_users_by_ids([user_id])
        return users.get(user_id)

    async def get_users_by_ids(self, user_ids: Iterable[str]) -> dict[str, Row]:
        rows = await self._run(self._get_many, self._settings.collection_users, list(user_ids))
        return {user_id: user_display(row) for user_id, row in rows.items()}
