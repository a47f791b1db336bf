"""Testes da factory do cliente Firestore."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import patch

import pytest

from app.bootstrap.clients import create_firestore_client
from config.settings import get_base_settings, get_firestore_settings
from utils.errors import FirestoreUnavailableError


@pytest.fixture(autouse=True)
def _clear_caches(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("FIRESTORE_PROJECT_ID", "otus-test")
    monkeypatch.setenv("FIRESTORE_DATABASE", "otus-db")
    for cached in (create_firestore_client, get_base_settings, get_firestore_settings):
        cached.cache_clear()
    yield
    for cached in (create_firestore_client, get_base_settings, get_firestore_settings):
        cached.cache_clear()


def test_uses_project_and_database_from_settings() -> None:
    with patch("google.cloud.firestore.Client") as client_cls:
        client = create_firestore_client()

    client_cls.assert_called_once_with(project="otus-test", database="otus-db")
    assert client is client_cls.return_value


def test_credentials_failure_becomes_unavailable() -> None:
    with patch("google.cloud.firestore.Client", side_effect=RuntimeError("no credentials")):
        with pytest.raises(FirestoreUnavailableError):
            create_firestore_client()
