"""Use case: atualizar relato (conteúdo, classificação, resolução)."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from app.domain.errors import ValidationError
from app.use_cases._enrichment import enrich_relato
from app.use_cases.relatos._common import (
    ensure_can_manage,
    ensure_in_catalog,
    load_relato,
    require_relato_id,
)

if TYPE_CHECKING:
    from app.domain.relatos import RelatoPatch
    from app.protocols import RelatoRepositoryProtocol

logger = logging.getLogger(__name__)


class UpdateRelatoUseCase:
    """Aplica o patch após validar tipo/prioridade contra o catálogo.

    Toda validação ocorre antes da primeira mutação: um slug inválido
    deixa a entidade intacta e nada é persistido.
    is_resolved=True resolve em nome de `user_id`; False reabre.
    """

    def __init__(self, relato_repository: RelatoRepositoryProtocol) -> None:
        self._relatos = relato_repository

    async def execute(
        self,
        relato_id: int | None,
        patch: RelatoPatch,
        user_id: str | None = None,
        *,
        is_privileged: bool = False,
    ) -> dict[str, Any]:
        relato_id = require_relato_id(relato_id)
        if not patch.has_updates():
            raise ValidationError("Nenhum campo para atualizar")
        relato = await load_relato(self._relatos, relato_id)
        ensure_can_manage(relato, user_id, is_privileged)

        tipos, prioridades = await asyncio.gather(
            self._relatos.find_all_tipos(),
            self._relatos.find_all_prioridades(),
        )
        tipo = ensure_in_catalog("tipo", patch.tipo, tipos) if patch.tipo is not None else None
        prioridade = (
            ensure_in_catalog("prioridade", patch.prioridade, prioridades)
            if patch.prioridade is not None
            else None
        )

        if patch.titulo is not None or patch.descricao is not None:
            relato.update_content(patch.titulo, patch.descricao)
        if tipo is not None:
            relato.change_tipo(tipo)
        if prioridade is not None:
            relato.change_prioridade(prioridade)
        if patch.is_resolved is True:
            relato.resolve(user_id)
        elif patch.is_resolved is False:
            relato.reopen()

        updated = await self._relatos.update(relato)
        logger.info(
            "relato_updated",
            extra={
                "relato_id": updated.id,
                "fields": sorted(patch.model_fields_set),
                "is_resolved": updated.is_resolved,
            },
        )
        return await enrich_relato(
            self._relatos,
            updated,
            use_case="update_relato",
            tipos=tipos,
            prioridades=prioridades,
        )
