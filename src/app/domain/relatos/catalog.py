"""Catálogo administrável de tipos e prioridades de relato.

Entradas ficam numa tabela por catálogo (relato_tipos,
relato_prioridades) e são editadas por usuários privilegiados.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from app.domain.relatos.value_objects import DEFAULT_CATALOG_COLOR

PATCHABLE_FIELDS: frozenset[str] = frozenset({"label", "color", "icon", "sort_order", "is_active"})
# Único campo que aceita null explícito (remove o ícone)
NULLABLE_FIELDS: frozenset[str] = frozenset({"icon"})


class CatalogEntry(BaseModel):
    """Linha do catálogo (tipo ou prioridade)."""

    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    slug: str
    label: str
    color: str = DEFAULT_CATALOG_COLOR
    icon: str | None = None
    sort_order: int = 0
    is_active: bool = True

    def to_meta(self) -> dict[str, str]:
        return {"label": self.label, "color": self.color}


class CatalogPatch(BaseModel):
    """Atualização parcial de uma entrada do catálogo."""

    model_config = ConfigDict(extra="ignore")

    label: str | None = None
    color: str | None = None
    icon: str | None = None
    sort_order: int | None = None
    is_active: bool | None = None

    def changes(self, allowed: Iterable[str] = PATCHABLE_FIELDS) -> dict[str, object]:
        """Retorna somente os campos informados e permitidos."""
        allowed_set = set(allowed)
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name in allowed_set
        }


def active_sorted(entries: Iterable[CatalogEntry]) -> list[CatalogEntry]:
    """Entradas ativas ordenadas por sort_order."""
    return sorted((entry for entry in entries if entry.is_active), key=lambda entry: entry.sort_order)


def meta_by_slug(entries: Iterable[CatalogEntry]) -> dict[str, dict[str, str]]:
    return {entry.slug: entry.to_meta() for entry in entries}
