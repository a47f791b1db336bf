"""Value objects de Relato: tipo e prioridade (catálogo aberto).

O catálogo é administrável em runtime, então aqui só se valida que o
slug não é vazio. A pertinência ao catálogo é checada pelo use case
antes da construção. Label/cor servem apenas de fallback até o
metadata do catálogo sobrescrevê-los na resposta.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from app.domain.errors import ValidationError
from app.domain.todos.value_objects import normalize_enum_input

DEFAULT_CATALOG_COLOR = "#6B7280"


@dataclass(frozen=True, slots=True)
class _CatalogSlug:
    """Slug normalizado; igualdade apenas pelo slug."""

    required_message: ClassVar[str] = "Slug é obrigatório"

    value: str
    label: str | None = field(default=None, compare=False)
    color: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.value is None or not str(self.value).strip():
            raise ValidationError(self.required_message)
        slug = normalize_enum_input(self.value)
        object.__setattr__(self, "value", slug)
        object.__setattr__(self, "label", self.label or slug)
        object.__setattr__(self, "color", self.color or DEFAULT_CATALOG_COLOR)

    @property
    def slug(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class RelatoTipo(_CatalogSlug):
    """Tipo do relato (risco, decisão, bloqueio, informativo...)."""

    required_message: ClassVar[str] = "Tipo do relato é obrigatório"

    @classmethod
    def coerce(cls, value: RelatoTipo | str) -> RelatoTipo:
        return value if isinstance(value, RelatoTipo) else cls(value)


@dataclass(frozen=True, slots=True)
class RelatoPrioridade(_CatalogSlug):
    """Prioridade do relato."""

    required_message: ClassVar[str] = "Prioridade do relato é obrigatória"

    @classmethod
    def coerce(cls, value: RelatoPrioridade | str) -> RelatoPrioridade:
        return value if isinstance(value, RelatoPrioridade) else cls(value)
