"""Fixtures HTTP: app com container em memória."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.app import create_app
from app.bootstrap.dependencies import DEV_RELATO_PRIORIDADES, DEV_RELATO_TIPOS, Container
from app.infra.stores import MemoryRelatoRepository, MemoryTodoRepository
from config.settings import AuthSettings

USERS = [
    {"id": "u1", "name": "Ana", "email": "ana@otus.eng.br"},
    {"id": "u2", "name": "Bruno", "email": "bruno@otus.eng.br"},
    {"id": "adm", "name": "Carla", "email": "carla@otus.eng.br"},
]


@pytest.fixture
def client() -> TestClient:
    """App sem lifespan: o container é injetado diretamente no state."""
    app = create_app()
    app.state.container = Container(
        todo_repository=MemoryTodoRepository(
            users=USERS,
            projects=[{"id": 10, "name": "Obra X", "team_id": 1}],
            teams=[{"id": 1, "name": "Time A"}],
        ),
        relato_repository=MemoryRelatoRepository(
            users=USERS,
            tipos=DEV_RELATO_TIPOS,
            prioridades=DEV_RELATO_PRIORIDADES,
        ),
        auth=AuthSettings(),
    )
    return TestClient(app)
