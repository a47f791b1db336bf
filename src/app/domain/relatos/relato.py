"""Entidade Relato: aggregate root do diário de projeto.

Registra riscos, decisões, bloqueios ou informativos de um projeto.

Invariante: is_resolved == True <=> resolved_at e resolved_by_id
preenchidos. resolve()/reopen() mantêm os três campos em sincronia.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from app.domain.errors import MissingResolver, ValidationError
from app.domain.relatos.value_objects import RelatoPrioridade, RelatoTipo
from app.domain.timestamps import parse_datetime, to_iso, utcnow

CODE_PREFIX = "RL-"


def _require_text(value: str | None, message: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(message)
    return str(value).strip()


def _require_titulo(value: str | None) -> str:
    return _require_text(value, "O título do relato é obrigatório")


def _require_descricao(value: str | None) -> str:
    return _require_text(value, "A descrição do relato é obrigatória")


@dataclass(slots=True, eq=False)
class Relato:
    project_code: str
    tipo: RelatoTipo
    prioridade: RelatoPrioridade
    titulo: str
    descricao: str
    author_id: str
    id: int | None = None
    author_name: str | None = None
    is_resolved: bool = False
    resolved_at: datetime | None = None
    resolved_by_id: str | None = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def __post_init__(self) -> None:
        self.project_code = _require_text(self.project_code, "O código do projeto é obrigatório")
        self.titulo = _require_titulo(self.titulo)
        self.descricao = _require_descricao(self.descricao)
        if not self.author_id:
            raise ValidationError("O autor do relato é obrigatório")
        self.tipo = RelatoTipo.coerce(self.tipo)
        self.prioridade = RelatoPrioridade.coerce(self.prioridade)
        self.author_name = self.author_name or None
        self.resolved_at = parse_datetime(self.resolved_at)
        self.resolved_by_id = self.resolved_by_id or None
        # Linha inconsistente no store: o estado resolvido exige os dois campos
        self.is_resolved = bool(self.is_resolved) and bool(self.resolved_at and self.resolved_by_id)
        if not self.is_resolved:
            self.resolved_at = None
            self.resolved_by_id = None
        self.created_at = parse_datetime(self.created_at) or utcnow()
        self.updated_at = parse_datetime(self.updated_at) or utcnow()

    @property
    def code(self) -> str | None:
        return f"{CODE_PREFIX}{self.id}" if self.id else None

    def belongs_to(self, user_id: str) -> bool:
        return self.author_id == user_id

    # --- Comportamentos do domínio ---

    def update_content(self, titulo: str | None = None, descricao: str | None = None) -> None:
        """Atualiza título/descrição; None mantém o valor atual."""
        if titulo is not None:
            self.titulo = _require_titulo(titulo)
        if descricao is not None:
            self.descricao = _require_descricao(descricao)
        self.updated_at = utcnow()

    def change_tipo(self, tipo: RelatoTipo | str) -> None:
        self.tipo = RelatoTipo.coerce(tipo)
        self.updated_at = utcnow()

    def change_prioridade(self, prioridade: RelatoPrioridade | str) -> None:
        self.prioridade = RelatoPrioridade.coerce(prioridade)
        self.updated_at = utcnow()

    def resolve(self, resolved_by_id: str | None) -> None:
        if not resolved_by_id:
            raise MissingResolver()
        now = utcnow()
        self.is_resolved = True
        self.resolved_at = now
        self.resolved_by_id = resolved_by_id
        self.updated_at = now

    def reopen(self) -> None:
        """Limpa o estado de resolução (idempotente)."""
        self.is_resolved = False
        self.resolved_at = None
        self.resolved_by_id = None
        self.updated_at = utcnow()

    # --- Projeções ---

    def to_persistence(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "project_code": self.project_code,
            "tipo_slug": self.tipo.value,
            "prioridade_slug": self.prioridade.value,
            "titulo": self.titulo,
            "descricao": self.descricao,
            "author_id": self.author_id,
            "author_name": self.author_name,
            "is_resolved": self.is_resolved,
            "resolved_at": to_iso(self.resolved_at),
            "resolved_by_id": self.resolved_by_id,
            "created_at": to_iso(self.created_at),
            "updated_at": to_iso(self.updated_at),
        }

    def to_response(
        self,
        tipo_meta: dict[str, Any] | None = None,
        prioridade_meta: dict[str, Any] | None = None,
        author_data: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Formato da API; metadata do catálogo sobrescreve label/cor."""
        tipo_meta = tipo_meta or {}
        prioridade_meta = prioridade_meta or {}
        author_data = author_data or {}
        return {
            "id": self.id,
            "code": self.code,
            "project_code": self.project_code,
            "tipo_slug": self.tipo.value,
            "tipo_label": tipo_meta.get("label") or self.tipo.label,
            "tipo_color": tipo_meta.get("color") or self.tipo.color,
            "prioridade_slug": self.prioridade.value,
            "prioridade_label": prioridade_meta.get("label") or self.prioridade.label,
            "prioridade_color": prioridade_meta.get("color") or self.prioridade.color,
            "titulo": self.titulo,
            "descricao": self.descricao,
            "author_id": self.author_id,
            "author_name": author_data.get("name") or self.author_name,
            "is_resolved": self.is_resolved,
            "resolved_at": to_iso(self.resolved_at),
            "resolved_by_id": self.resolved_by_id,
            "created_at": to_iso(self.created_at),
            "updated_at": to_iso(self.updated_at),
        }

    @classmethod
    def from_persistence(cls, data: dict[str, Any]) -> Relato:
        return cls(
            id=data.get("id"),
            project_code=data.get("project_code", ""),
            tipo=data.get("tipo_slug", ""),
            prioridade=data.get("prioridade_slug", ""),
            titulo=data.get("titulo", ""),
            descricao=data.get("descricao", ""),
            author_id=data.get("author_id", ""),
            author_name=data.get("author_name"),
            is_resolved=bool(data.get("is_resolved")),
            resolved_at=data.get("resolved_at"),
            resolved_by_id=data.get("resolved_by_id"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    @classmethod
    def create(
        cls,
        *,
        project_code: str,
        tipo: RelatoTipo | str,
        prioridade: RelatoPrioridade | str,
        titulo: str,
        descricao: str,
        author_id: str,
        author_name: str | None = None,
    ) -> Relato:
        return cls(
            project_code=project_code,
            tipo=tipo,
            prioridade=prioridade,
            titulo=titulo,
            descricao=descricao,
            author_id=author_id,
            author_name=author_name,
        )
