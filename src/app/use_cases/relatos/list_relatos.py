"""Use case: listar relatos de um projeto."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

from app.use_cases._enrichment import enrich_relatos, load_catalogs
from app.use_cases.relatos._common import require_project_code

if TYPE_CHECKING:
    from app.protocols import RelatoRepositoryProtocol


class ListRelatosUseCase:
    """Relatos do projeto com metadata do catálogo e nome dos autores.

    Relatos e catálogos são buscados em paralelo; autores em um único
    lote depois.
    """

    def __init__(self, relato_repository: RelatoRepositoryProtocol) -> None:
        self._relatos = relato_repository

    async def execute(
        self,
        project_code: str | None,
        tipo: str | None = None,
        prioridade: str | None = None,
    ) -> list[dict[str, Any]]:
        project_code = require_project_code(project_code)
        relatos, (tipos, prioridades) = await asyncio.gather(
            self._relatos.find_by_project_code(project_code, tipo=tipo, prioridade=prioridade),
            load_catalogs(self._relatos, use_case="list_relatos"),
        )
        return await enrich_relatos(
            self._relatos,
            relatos,
            use_case="list_relatos",
            tipos=tipos,
            prioridades=prioridades,
        )
