"""Use case: remover relato."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.use_cases.relatos._common import ensure_can_manage, load_relato, require_relato_id

if TYPE_CHECKING:
    from app.protocols import RelatoRepositoryProtocol

logger = logging.getLogger(__name__)


class DeleteRelatoUseCase:
    """Remove o relato e retorna seu DTO (usado na mensagem de auditoria)."""

    def __init__(self, relato_repository: RelatoRepositoryProtocol) -> None:
        self._relatos = relato_repository

    async def execute(
        self,
        relato_id: int | None,
        user_id: str | None = None,
        *,
        is_privileged: bool = False,
    ) -> dict[str, Any]:
        relato_id = require_relato_id(relato_id)
        relato = await load_relato(self._relatos, relato_id)
        ensure_can_manage(relato, user_id, is_privileged)

        await self._relatos.delete(relato_id)
        logger.info("relato_deleted", extra={"relato_id": relato_id})
        return relato.to_response()
