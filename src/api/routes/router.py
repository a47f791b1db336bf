"""Agregador de rotas: registra os routers por módulo.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.relatos.router import router as relatos_router
from api.routes.todos.router import router as todos_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # Health checks na raiz (/health, /ready)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(todos_router, prefix="/api/todos", tags=["todos"])
    api_router.include_router(relatos_router, prefix="/api/relatos", tags=["relatos"])

    return api_router
