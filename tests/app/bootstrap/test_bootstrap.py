"""Testes do bootstrap: validação de settings e montagem do container."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from app.bootstrap import build_container, validate_runtime_settings
from app.infra.stores import MemoryRelatoRepository, MemoryTodoRepository
from config.settings import (
    get_auth_settings,
    get_base_settings,
    get_firestore_settings,
    get_store_settings,
)

_CACHED_GETTERS = (
    get_auth_settings,
    get_base_settings,
    get_firestore_settings,
    get_store_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("ENVIRONMENT", "STORE_BACKEND", "PRIVILEGED_ROLES", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    for getter in _CACHED_GETTERS:
        getter.cache_clear()
    yield
    for getter in _CACHED_GETTERS:
        getter.cache_clear()


def test_development_with_memory_backend_is_valid() -> None:
    validate_runtime_settings()


def test_production_with_memory_backend_fails_fast(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")

    with pytest.raises(RuntimeError, match="STORE_BACKEND=memory proibido"):
        validate_runtime_settings()


def test_development_only_warns(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "LOUD")

    validate_runtime_settings()


def test_build_container_with_memory_backend() -> None:
    container = build_container()

    assert isinstance(container.todo_repository, MemoryTodoRepository)
    assert isinstance(container.relato_repository, MemoryRelatoRepository)
    assert container.auth.is_privileged("admin")


@pytest.mark.asyncio
async def test_memory_container_has_dev_catalog() -> None:
    container = build_container()

    tipos = await container.relato_repository.find_all_tipos()

    assert [tipo.slug for tipo in tipos] == ["risco", "decisao", "bloqueio", "informativo"]
