"""Patch parcial de Relato (apenas campos informados)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RelatoPatch(BaseModel):
    model_config = ConfigDict(extra="ignore")

    titulo: str | None = None
    descricao: str | None = None
    tipo: str | None = None
    prioridade: str | None = None
    is_resolved: bool | None = None

    def provided(self, field_name: str) -> bool:
        return field_name in self.model_fields_set

    def has_updates(self) -> bool:
        return bool(self.model_fields_set)
