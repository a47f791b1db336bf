"""Use case: buscar relato por id."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.use_cases._enrichment import enrich_relato
from app.use_cases.relatos._common import require_relato_id

if TYPE_CHECKING:
    from app.protocols import RelatoRepositoryProtocol


class GetRelatoUseCase:
    """Leitura idempotente: None quando o relato não existe."""

    def __init__(self, relato_repository: RelatoRepositoryProtocol) -> None:
        self._relatos = relato_repository

    async def execute(self, relato_id: int | None) -> dict[str, Any] | None:
        relato_id = require_relato_id(relato_id)
        relato = await self._relatos.find_by_id(relato_id)
        if relato is None:
            return None
        return await enrich_relato(self._relatos, relato, use_case="get_relato")
