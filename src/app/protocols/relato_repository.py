"""Contrato de persistência de Relatos e de seus catálogos."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from app.domain.relatos import CatalogEntry, Relato


class RelatoRepositoryProtocol(ABC):
    """Contrato assíncrono do repositório de Relatos."""

    @abstractmethod
    async def find_by_project_code(
        self,
        project_code: str,
        tipo: str | None = None,
        prioridade: str | None = None,
    ) -> list[Relato]:
        """Relatos do projeto, mais recentes primeiro."""

    @abstractmethod
    async def find_by_id(self, relato_id: int) -> Relato | None: ...

    @abstractmethod
    async def save(self, relato: Relato) -> Relato: ...

    @abstractmethod
    async def update(self, relato: Relato) -> Relato: ...

    @abstractmethod
    async def delete(self, relato_id: int) -> None: ...

    @abstractmethod
    async def get_stats_by_project(self, project_code: str) -> dict[str, Any]:
        """Retorna {total, by_tipo, by_prioridade, resolved}."""

    # --- Catálogos ---

    @abstractmethod
    async def find_all_tipos(self) -> list[CatalogEntry]:
        """Tipos ativos ordenados por sort_order."""

    @abstractmethod
    async def save_tipo(self, entry: CatalogEntry) -> CatalogEntry: ...

    @abstractmethod
    async def update_tipo(self, tipo_id: int, changes: dict[str, Any]) -> CatalogEntry | None:
        """Aplica mudanças; None quando o id não existe."""

    @abstractmethod
    async def find_all_prioridades(self) -> list[CatalogEntry]: ...

    @abstractmethod
    async def save_prioridade(self, entry: CatalogEntry) -> CatalogEntry: ...

    @abstractmethod
    async def update_prioridade(
        self,
        prioridade_id: int,
        changes: dict[str, Any],
    ) -> CatalogEntry | None: ...

    # --- Lookups auxiliares ---

    @abstractmethod
    async def get_user_by_id(self, user_id: str) -> dict[str, Any] | None: ...

    @abstractmethod
    async def get_users_by_ids(self, user_ids: Iterable[str]) -> dict[str, dict[str, Any]]: ...
