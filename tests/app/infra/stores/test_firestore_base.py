"""Testes da base dos repositórios Firestore (cliente mockado)."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from app.infra.stores._firestore import GET_ALL_CHUNK, FirestoreRepositoryBase
from config.settings import FirestoreSettings
from utils.errors import InfrastructureError, StoreError


def _snapshot(doc_id: str, data: dict | None, exists: bool = True) -> SimpleNamespace:
    return SimpleNamespace(id=doc_id, exists=exists, to_dict=lambda: data)


def _base(client: MagicMock) -> FirestoreRepositoryBase:
    return FirestoreRepositoryBase(client, FirestoreSettings())


class TestGetMany:
    def test_maps_back_to_original_keys(self) -> None:
        client = MagicMock()
        client.get_all.return_value = [
            _snapshot("1", {"name": "Obra X"}),
            _snapshot("2", None, exists=False),
        ]

        found = _base(client)._get_many("projects", [1, 2, None])

        assert found == {1: {"name": "Obra X", "id": 1}}

    def test_chunks_requests(self) -> None:
        client = MagicMock()
        client.get_all.return_value = []

        _base(client)._get_many("users_otus", [f"u{i}" for i in range(GET_ALL_CHUNK + 1)])

        assert client.get_all.call_count == 2

    def test_failure_returns_empty(self) -> None:
        client = MagicMock()
        client.get_all.side_effect = RuntimeError("unavailable")

        assert _base(client)._get_many("users_otus", ["u1"]) == {}

    def test_no_ids_skips_call(self) -> None:
        client = MagicMock()

        assert _base(client)._get_many("users_otus", ["", None]) == {}
        client.get_all.assert_not_called()


class TestPrimary:
    def test_wraps_errors(self) -> None:
        def broken() -> None:
            raise RuntimeError("deadline exceeded")

        with pytest.raises(StoreError) as exc_info:
            _base(MagicMock())._primary("save", "tasks", broken)

        assert isinstance(exc_info.value, InfrastructureError)
        assert exc_info.value.operation == "save"
        assert exc_info.value.collection == "tasks"

    def test_returns_value(self) -> None:
        assert _base(MagicMock())._primary("find", "tasks", lambda: 42) == 42


@pytest.mark.asyncio
async def test_run_offloads_to_thread() -> None:
    assert await _base(MagicMock())._run(sum, [1, 2, 3]) == 6
