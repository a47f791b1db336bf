"""Use case: estatísticas de relatos por projeto."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.use_cases.relatos._common import require_project_code

if TYPE_CHECKING:
    from app.protocols import RelatoRepositoryProtocol


class GetRelatoStatsUseCase:
    """Retorna {total, by_tipo, by_prioridade, resolved} do projeto."""

    def __init__(self, relato_repository: RelatoRepositoryProtocol) -> None:
        self._relatos = relato_repository

    async def execute(self, project_code: str | None) -> dict[str, Any]:
        return await self._relatos.get_stats_by_project(require_project_code(project_code))
