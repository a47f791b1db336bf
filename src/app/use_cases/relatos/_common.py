"""Helpers compartilhados pelos use cases de Relato."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.errors import InvalidEnumValue, NotFound, PermissionDenied, ValidationError
from app.domain.todos.value_objects import normalize_enum_input

if TYPE_CHECKING:
    from app.domain.relatos import CatalogEntry, Relato
    from app.protocols import RelatoRepositoryProtocol

RELATO_ENTITY = "Relato"


def require_relato_id(relato_id: int | None) -> int:
    if not relato_id:
        raise ValidationError("ID do relato é obrigatório")
    return relato_id


def require_project_code(project_code: str | None) -> str:
    if not project_code or not project_code.strip():
        raise ValidationError("O código do projeto é obrigatório")
    return project_code.strip()


async def load_relato(repository: RelatoRepositoryProtocol, relato_id: int) -> Relato:
    relato = await repository.find_by_id(relato_id)
    if relato is None:
        raise NotFound(RELATO_ENTITY, relato_id)
    return relato


def ensure_in_catalog(field_name: str, value: str, entries: list[CatalogEntry]) -> str:
    """Valida o slug contra o catálogo ativo; retorna o slug normalizado."""
    slug = normalize_enum_input(value)
    slugs = [entry.slug for entry in entries]
    if slug not in slugs:
        raise InvalidEnumValue(field_name, value, slugs)
    return slug


def ensure_can_manage(relato: Relato, user_id: str | None, is_privileged: bool) -> None:
    """Somente o autor ou um usuário privilegiado altera/remove o relato."""
    if is_privileged or (user_id and relato.belongs_to(user_id)):
        return
    raise PermissionDenied("Apenas o autor ou um administrador pode alterar este relato")
