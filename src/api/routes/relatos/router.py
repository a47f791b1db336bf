"""Endpoints de Relatos (diário de projeto) e dos catálogos.

Endpoints:
- GET/POST /api/relatos/tipos, PUT /api/relatos/tipos/{id}
- GET/POST /api/relatos/prioridades, PUT /api/relatos/prioridades/{id}
- GET    /api/relatos/project/{code}        filtros: tipo, prioridade
- GET    /api/relatos/project/{code}/stats
- GET    /api/relatos/{id}
- POST   /api/relatos                       autor = usuário autenticado
- PUT    /api/relatos/{id}                  autor ou privilegiado
- DELETE /api/relatos/{id}                  autor ou privilegiado

Escrita nos catálogos é restrita a usuários privilegiados.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict

from api.routes.dependencies import (
    CurrentUser,
    get_container,
    get_current_user,
    is_privileged,
    require_privileged,
)
from api.routes.errors import failure, success
from app.bootstrap.dependencies import Container
from app.domain.relatos import CatalogPatch, RelatoPatch
from app.use_cases.relatos import (
    CreateCatalogEntryInput,
    CreatePrioridadeUseCase,
    CreateRelatoInput,
    CreateRelatoUseCase,
    CreateTipoUseCase,
    DeleteRelatoUseCase,
    GetRelatoStatsUseCase,
    GetRelatoUseCase,
    ListPrioridadesUseCase,
    ListRelatosUseCase,
    ListTiposUseCase,
    UpdatePrioridadeUseCase,
    UpdateRelatoUseCase,
    UpdateTipoUseCase,
)

router = APIRouter()


class RelatoCreateBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    project_code: str | None = None
    tipo: str | None = None
    prioridade: str | None = None
    titulo: str | None = None
    descricao: str | None = None


# --- Catálogos ---


@router.get("/tipos")
async def list_tipos(
    user: CurrentUser = Depends(get_current_user),
    container: Container = Depends(get_container),
) -> JSONResponse:
    tipos = await ListTiposUseCase(container.relato_repository).execute()
    return success([entry.model_dump() for entry in tipos])


@router.post("/tipos")
async def create_tipo(
    body: CreateCatalogEntryInput,
    user: CurrentUser = Depends(get_current_user),
    container: Container = Depends(get_container),
) -> JSONResponse:
    require_privileged(container, user)
    entry = await CreateTipoUseCase(container.relato_repository).execute(body)
    return success(entry.model_dump(), status.HTTP_201_CREATED)


@router.put("/tipos/{tipo_id}")
async def update_tipo(
    tipo_id: int,
    patch: CatalogPatch,
    user: CurrentUser = Depends(get_current_user),
    container: Container = Depends(get_container),
) -> JSONResponse:
    require_privileged(container, user)
    entry = await UpdateTipoUseCase(container.relato_repository).execute(tipo_id, patch)
    return success(entry.model_dump())


@router.get("/prioridades")
async def list_prioridades(
    user: CurrentUser = Depends(get_current_user),
    container: Container = Depends(get_container),
) -> JSONResponse:
    prioridades = await ListPrioridadesUseCase(container.relato_repository).execute()
    return success([entry.model_dump() for entry in prioridades])


@router.post("/prioridades")
async def create_prioridade(
    body: CreateCatalogEntryInput,
    user: CurrentUser = Depends(get_current_user),
    container: Container = Depends(get_container),
) -> JSONResponse:
    require_privileged(container, user)
    entry = await CreatePrioridadeUseCase(container.relato_repository).execute(body)
    return success(entry.model_dump(), status.HTTP_201_CREATED)


@router.put("/prioridades/{prioridade_id}")
async def update_prioridade(
    prioridade_id: int,
    patch: CatalogPatch,
    user: CurrentUser = Depends(get_current_user),
    container: Container = Depends(get_container),
) -> JSONResponse:
    require_privileged(container, user)
    entry = await UpdatePrioridadeUseCase(container.relato_repository).execute(prioridade_id, patch)
    return success(entry.model_dump())


# --- Relatos ---


@router.get("/project/{project_code}")
async def list_relatos(
    project_code: str,
    tipo: str | None = None,
    prioridade: str | None = None,
    user: CurrentUser = Depends(get_current_user),
    container: Container = Depends(get_container),
) -> JSONResponse:
    relatos = await ListRelatosUseCase(container.relato_repository).execute(
        project_code,
        tipo=tipo or None,
        prioridade=prioridade or None,
    )
    return success(relatos)


@router.get("/project/{project_code}/stats")
async def relato_stats(
    project_code: str,
    user: CurrentUser = Depends(get_current_user),
    container: Container = Depends(get_container),
) -> JSONResponse:
    stats = await GetRelatoStatsUseCase(container.relato_repository).execute(project_code)
    return success(stats)


@router.get("/{relato_id}")
async def get_relato(
    relato_id: int,
    user: CurrentUser = Depends(get_current_user),
    container: Container = Depends(get_container),
) -> JSONResponse:
    relato = await GetRelatoUseCase(container.relato_repository).execute(relato_id)
    if relato is None:
        return failure("Relato não encontrado", status.HTTP_404_NOT_FOUND)
    return success(relato)


@router.post("")
async def create_relato(
    body: RelatoCreateBody,
    user: CurrentUser = Depends(get_current_user),
    container: Container = Depends(get_container),
) -> JSONResponse:
    data = CreateRelatoInput(
        project_code=body.project_code or "",
        tipo=body.tipo or "",
        prioridade=body.prioridade or "",
        titulo=body.titulo or "",
        descricao=body.descricao or "",
        author_id=user.id,
        author_name=user.name,
    )
    relato = await CreateRelatoUseCase(container.relato_repository).execute(data)
    return success(relato, status.HTTP_201_CREATED)


@router.put("/{relato_id}")
async def update_relato(
    relato_id: int,
    patch: RelatoPatch,
    user: CurrentUser = Depends(get_current_user),
    container: Container = Depends(get_container),
) -> JSONResponse:
    relato = await UpdateRelatoUseCase(container.relato_repository).execute(
        relato_id,
        patch,
        user.id,
        is_privileged=is_privileged(container, user),
    )
    return success(relato)


@router.delete("/{relato_id}")
async def delete_relato(
    relato_id: int,
    user: CurrentUser = Depends(get_current_user),
    container: Container = Depends(get_container),
) -> JSONResponse:
    relato = await DeleteRelatoUseCase(container.relato_repository).execute(
        relato_id,
        user.id,
        is_privileged=is_privileged(container, user),
    )
    return success(relato)
