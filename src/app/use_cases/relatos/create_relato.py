"""Use case: registrar relato no diário do projeto."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from app.domain.relatos import Relato
from app.use_cases._enrichment import enrich_relato
from app.use_cases.relatos._common import ensure_in_catalog

if TYPE_CHECKING:
    from app.protocols import RelatoRepositoryProtocol

logger = logging.getLogger(__name__)


class CreateRelatoInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    project_code: str
    tipo: str
    prioridade: str
    titulo: str
    descricao: str
    author_id: str
    author_name: str | None = None


class CreateRelatoUseCase:
    """Valida campos, confere tipo/prioridade no catálogo e persiste."""

    def __init__(self, relato_repository: RelatoRepositoryProtocol) -> None:
        self._relatos = relato_repository

    async def execute(self, data: CreateRelatoInput) -> dict[str, Any]:
        # Campos obrigatórios falham aqui, antes de consultar o catálogo
        relato = Relato.create(
            project_code=data.project_code,
            tipo=data.tipo,
            prioridade=data.prioridade,
            titulo=data.titulo,
            descricao=data.descricao,
            author_id=data.author_id,
            author_name=data.author_name,
        )

        tipos, prioridades = await asyncio.gather(
            self._relatos.find_all_tipos(),
            self._relatos.find_all_prioridades(),
        )
        ensure_in_catalog("tipo", data.tipo, tipos)
        ensure_in_catalog("prioridade", data.prioridade, prioridades)

        saved = await self._relatos.save(relato)
        logger.info(
            "relato_created",
            extra={"relato_id": saved.id, "tipo": saved.tipo.value},
        )
        return await enrich_relato(
            self._relatos,
            saved,
            use_case="create_relato",
            tipos=tipos,
            prioridades=prioridades,
        )
