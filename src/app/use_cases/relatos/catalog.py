"""Use cases de administração dos catálogos de tipo e prioridade.

Tipos e prioridades compartilham o mesmo fluxo; cada subclasse só
aponta para os métodos do repositório do seu catálogo.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict

from app.domain.errors import NotFound, ValidationError
from app.domain.relatos.catalog import (
    NULLABLE_FIELDS,
    PATCHABLE_FIELDS,
    CatalogEntry,
    CatalogPatch,
)
from app.domain.relatos.value_objects import DEFAULT_CATALOG_COLOR
from app.domain.todos.value_objects import normalize_enum_input

if TYPE_CHECKING:
    from app.protocols import RelatoRepositoryProtocol

logger = logging.getLogger(__name__)


class CreateCatalogEntryInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    slug: str | None = None
    label: str | None = None
    color: str | None = None
    icon: str | None = None
    sort_order: int | None = None


class _CatalogUseCase:
    entity: ClassVar[str]
    kind: ClassVar[str]
    not_found_message: ClassVar[str]
    supports_icon: ClassVar[bool] = False

    def __init__(self, relato_repository: RelatoRepositoryProtocol) -> None:
        self._relatos = relato_repository

    async def _find_all(self) -> list[CatalogEntry]:
        if self.kind == "tipo":
            return await self._relatos.find_all_tipos()
        return await self._relatos.find_all_prioridades()

    async def _save(self, entry: CatalogEntry) -> CatalogEntry:
        if self.kind == "tipo":
            return await self._relatos.save_tipo(entry)
        return await self._relatos.save_prioridade(entry)

    async def _update(self, entry_id: int, changes: dict[str, Any]) -> CatalogEntry | None:
        if self.kind == "tipo":
            return await self._relatos.update_tipo(entry_id, changes)
        return await self._relatos.update_prioridade(entry_id, changes)


class _ListCatalog(_CatalogUseCase):
    async def execute(self) -> list[CatalogEntry]:
        return await self._find_all()


class _CreateCatalogEntry(_CatalogUseCase):
    async def execute(self, data: CreateCatalogEntryInput) -> CatalogEntry:
        slug = normalize_enum_input(data.slug) if data.slug else ""
        label = data.label.strip() if data.label else ""
        if not slug or not label:
            raise ValidationError("slug e label são obrigatórios")

        entry = CatalogEntry(
            slug=slug,
            label=label,
            color=data.color or DEFAULT_CATALOG_COLOR,
            icon=(data.icon or None) if self.supports_icon else None,
            sort_order=data.sort_order or 0,
        )
        saved = await self._save(entry)
        logger.info(
            "catalog_entry_created",
            extra={"catalog": self.kind, "entry_id": saved.id, "slug": saved.slug},
        )
        return saved


class _UpdateCatalogEntry(_CatalogUseCase):
    async def execute(self, entry_id: int | None, patch: CatalogPatch) -> CatalogEntry:
        if not entry_id:
            raise ValidationError("ID da entrada do catálogo é obrigatório")

        allowed = PATCHABLE_FIELDS if self.supports_icon else PATCHABLE_FIELDS - {"icon"}
        changes = patch.changes(allowed)
        for name, value in changes.items():
            if value is None and name not in NULLABLE_FIELDS:
                raise ValidationError(f"{name} não pode ser nulo")
        if "label" in changes:
            label = (changes["label"] or "").strip()
            if not label:
                raise ValidationError("label não pode ser vazio")
            changes["label"] = label
        if not changes:
            raise ValidationError("Nenhum campo para atualizar")

        updated = await self._update(entry_id, changes)
        if updated is None:
            raise NotFound(self.entity, entry_id, self.not_found_message)
        logger.info(
            "catalog_entry_updated",
            extra={"catalog": self.kind, "entry_id": entry_id, "fields": sorted(changes)},
        )
        return updated


class ListTiposUseCase(_ListCatalog):
    entity = "Tipo"
    kind = "tipo"


class CreateTipoUseCase(_CreateCatalogEntry):
    entity = "Tipo"
    kind = "tipo"
    supports_icon = True


class UpdateTipoUseCase(_UpdateCatalogEntry):
    entity = "Tipo"
    kind = "tipo"
    not_found_message = "Tipo não encontrado"
    supports_icon = True


class ListPrioridadesUseCase(_ListCatalog):
    entity = "Prioridade"
    kind = "prioridade"


class CreatePrioridadeUseCase(_CreateCatalogEntry):
    entity = "Prioridade"
    kind = "prioridade"


class UpdatePrioridadeUseCase(_UpdateCatalogEntry):
    entity = "Prioridade"
    kind = "prioridade"
    not_found_message = "Prioridade não encontrada"
