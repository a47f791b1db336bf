"""Repositório de Relatos em memória: apenas desenvolvimento e testes."""

from __future__ import annotations

import copy
import itertools
from collections.abc import Iterable
from typing import Any

from app.domain.relatos import CatalogEntry, Relato
from app.domain.relatos.catalog import active_sorted
from app.infra.stores._rows import (
    Row,
    matches_relato_filters,
    relato_stats,
    sort_newest_first,
    user_display,
)
from app.protocols.relato_repository import RelatoRepositoryProtocol


class MemoryRelatoRepository(RelatoRepositoryProtocol):
    """Relatos + catálogos de tipo/prioridade + usuários."""

    def __init__(
        self,
        *,
        users: Iterable[Row] = (),
        tipos: Iterable[CatalogEntry | Row] = (),
        prioridades: Iterable[CatalogEntry | Row] = (),
    ) -> None:
        self._rows: dict[int, Row] = {}
        self._ids = itertools.count(1)
        self._users = {row["id"]: dict(row) for row in users}
        self._tipos: dict[int, CatalogEntry] = {}
        self._prioridades: dict[int, CatalogEntry] = {}
        for entry in tipos:
            self._add_entry(self._tipos, entry)
        for entry in prioridades:
            self._add_entry(self._prioridades, entry)

    # --- Relatos ---

    async def find_by_project_code(
        self,
        project_code: str,
        tipo: str | None = None,
        prioridade: str | None = None,
    ) -> list[Relato]:
        rows = [
            row
            for row in self._rows.values()
            if row["project_code"] == project_code and matches_relato_filters(row, tipo, prioridade)
        ]
        return [Relato.from_persistence(row) for row in sort_newest_first(rows)]

    async def find_by_id(self, relato_id: int) -> Relato | None:
        row = self._rows.get(relato_id)
        return Relato.from_persistence(row) if row else None

    async def save(self, relato: Relato) -> Relato:
        relato.id = next(self._ids)
        self._rows[relato.id] = copy.deepcopy(relato.to_persistence())
        return Relato.from_persistence(self._rows[relato.id])

    async def update(self, relato: Relato) -> Relato:
        self._rows[relato.id] = copy.deepcopy(relato.to_persistence())
        return Relato.from_persistence(self._rows[relato.id])

    async def delete(self, relato_id: int) -> None:
        self._rows.pop(relato_id, None)

    async def get_stats_by_project(self, project_code: str) -> dict[str, Any]:
        return relato_stats(row for row in self._rows.values() if row["project_code"] == project_code)

    # --- Catálogos ---

    async def find_all_tipos(self) -> list[CatalogEntry]:
        return active_sorted(self._tipos.values())

    async def save_tipo(self, entry: CatalogEntry) -> CatalogEntry:
        return self._add_entry(self._tipos, entry)

    async def update_tipo(self, tipo_id: int, changes: dict[str, Any]) -> CatalogEntry | None:
        return self._update_entry(self._tipos, tipo_id, changes)

    async def find_all_prioridades(self) -> list[CatalogEntry]:
        return active_sorted(self._prioridades.values())

    async def save_prioridade(self, entry: CatalogEntry) -> CatalogEntry:
        return self._add_entry(self._prioridades, entry)

    async def update_prioridade(
        self,
        prioridade_id: int,
        changes: dict[str, Any],
    ) -> CatalogEntry | None:
        return self._update_entry(self._prioridades, prioridade_id, changes)

    def _add_entry(self, table: dict[int, CatalogEntry], entry: CatalogEntry | Row) -> CatalogEntry:
        if not isinstance(entry, CatalogEntry):
            entry = CatalogEntry.model_validate(entry)
        entry = entry.model_copy(update={"id": entry.id or max(table, default=0) + 1})
        table[entry.id] = entry
        return entry

    @staticmethod
    def _update_entry(
        table: dict[int, CatalogEntry],
        entry_id: int,
        changes: dict[str, Any],
    ) -> CatalogEntry | None:
        current = table.get(entry_id)
        if current is None:
            return None
        table[entry_id] = current.model_copy(update=changes)
        return table[entry_id]

    # --- Usuários ---

    async def get_user_by_id(self, user_id: str) -> Row | None:
        row = self._users.get(user_id)
        return user_display(row) if row else None

    async def get_users_by_ids(self, user_ids: Iterable[str]) -> dict[str, Row]:
        return {
            user_id: user_display(self._users[user_id])
            for user_id in set(user_ids)
            if user_id in self._users
        }
