"""Testes dos settings (base, store, auth, firestore)."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from config.settings import (
    DEFAULT_PRIVILEGED_ROLES,
    AuthSettings,
    BaseSettings,
    FirestoreSettings,
    StoreSettings,
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
def _clear_settings_cache() -> Iterator[None]:
    for getter in _CACHED_GETTERS:
        getter.cache_clear()
    yield
    for getter in _CACHED_GETTERS:
        getter.cache_clear()


class TestBaseSettings:
    def test_defaults_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("ENVIRONMENT", "SERVICE_NAME", "LOG_LEVEL", "GCP_PROJECT", "GOOGLE_CLOUD_PROJECT"):
            monkeypatch.delenv(name, raising=False)

        settings = get_base_settings()

        assert settings.environment == "development"
        assert settings.service_name == "otus-plataforma"
        assert settings.log_level == "INFO"
        assert settings.validate() == []

    def test_environment_aliases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        assert get_base_settings().is_production

    def test_invalid_log_level(self) -> None:
        errors = BaseSettings(log_level="LOUD").validate()
        assert errors == ["LOG_LEVEL inválido: LOUD"]


class TestStoreSettings:
    def test_memory_is_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("STORE_BACKEND", raising=False)
        assert get_store_settings().backend == "memory"

    def test_unknown_backend_falls_back_to_memory(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STORE_BACKEND", "postgres")
        assert get_store_settings().backend == "memory"

    def test_memory_forbidden_outside_development(self) -> None:
        errors = StoreSettings(backend="memory").validate(BaseSettings(environment="production"))
        assert errors == ["STORE_BACKEND=memory proibido em staging/production"]

    def test_firestore_allowed_in_production(self) -> None:
        assert StoreSettings(backend="firestore").validate(BaseSettings(environment="production")) == []


class TestAuthSettings:
    def test_default_roles(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PRIVILEGED_ROLES", raising=False)
        assert get_auth_settings().privileged_roles == DEFAULT_PRIVILEGED_ROLES

    def test_roles_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PRIVILEGED_ROLES", " Admin, coordenador ,")
        assert get_auth_settings().privileged_roles == frozenset({"admin", "coordenador"})

    @pytest.mark.parametrize(
        ("role", "expected"),
        [("admin", True), ("Director", True), ("user", False), (None, False), ("", False)],
    )
    def test_is_privileged(self, role: str | None, expected: bool) -> None:
        assert AuthSettings().is_privileged(role) is expected

    def test_empty_roles_invalid(self) -> None:
        assert AuthSettings(privileged_roles=frozenset()).validate() == [
            "PRIVILEGED_ROLES não pode ser vazio"
        ]


class TestFirestoreSettings:
    def test_collection_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FIRESTORE_COLLECTION_USERS", "usuarios")
        settings = get_firestore_settings()

        assert settings.collection_users == "usuarios"
        assert settings.collection_tasks == "tasks"

    def test_requires_project(self) -> None:
        assert FirestoreSettings().validate("") == [
            "FIRESTORE_PROJECT_ID ou GCP_PROJECT deve estar configurado"
        ]
        assert FirestoreSettings().validate("otus-prod") == []
