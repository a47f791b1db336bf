"""Testes HTTP dos endpoints de Relatos e catálogos."""

from __future__ import annotations

from fastapi.testclient import TestClient

ANA = {"X-User-Id": "u1", "X-User-Name": "Ana", "X-User-Role": "user"}
BRUNO = {"X-User-Id": "u2", "X-User-Name": "Bruno", "X-User-Role": "user"}
ADMIN = {"X-User-Id": "adm", "X-User-Name": "Carla", "X-User-Role": "admin"}


def _create(client: TestClient, **body) -> dict:
    payload = {
        "project_code": "PRJ1",
        "tipo": "risco",
        "prioridade": "alta",
        "titulo": "Fundação",
        "descricao": "Sondagem atrasada",
    }
    payload.update(body)
    response = client.post("/api/relatos", json=payload, headers=ANA)
    assert response.status_code == 201
    return response.json()["data"]


def test_create_uses_caller_as_author(client: TestClient) -> None:
    relato = _create(client)

    assert relato["code"] == "RL-1"
    assert relato["author_id"] == "u1"
    assert relato["author_name"] == "Ana"
    assert relato["tipo_label"] == "Risco"


def test_create_with_unknown_tipo(client: TestClient) -> None:
    response = client.post(
        "/api/relatos",
        json={"project_code": "PRJ1", "tipo": "alerta", "prioridade": "alta", "titulo": "t", "descricao": "d"},
        headers=ANA,
    )

    assert response.status_code == 400
    assert "risco, decisao, bloqueio, informativo" in response.json()["error"]


def test_create_with_missing_fields(client: TestClient) -> None:
    response = client.post("/api/relatos", json={"project_code": "PRJ1"}, headers=ANA)

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_list_and_stats_by_project(client: TestClient) -> None:
    _create(client)
    _create(client, tipo="decisao")
    _create(client, project_code="PRJ2")

    listed = client.get("/api/relatos/project/PRJ1", headers=ANA).json()["data"]
    filtered = client.get("/api/relatos/project/PRJ1", params={"tipo": "decisao"}, headers=ANA).json()["data"]
    stats = client.get("/api/relatos/project/PRJ1/stats", headers=ANA).json()["data"]

    assert len(listed) == 2
    assert [relato["tipo_slug"] for relato in filtered] == ["decisao"]
    assert stats["total"] == 2
    assert stats["by_tipo"] == {"risco": 1, "decisao": 1}


def test_get_missing(client: TestClient) -> None:
    response = client.get("/api/relatos/3", headers=ANA)

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Relato não encontrado"}


def test_update_by_other_user_is_forbidden(client: TestClient) -> None:
    relato = _create(client)

    response = client.put(f"/api/relatos/{relato['id']}", json={"titulo": "x"}, headers=BRUNO)

    assert response.status_code == 403


def test_admin_resolves_relato(client: TestClient) -> None:
    relato = _create(client)

    response = client.put(f"/api/relatos/{relato['id']}", json={"is_resolved": True}, headers=ADMIN)

    data = response.json()["data"]
    assert response.status_code == 200
    assert data["is_resolved"] is True
    assert data["resolved_by_id"] == "adm"


def test_delete_by_author(client: TestClient) -> None:
    relato = _create(client)

    response = client.delete(f"/api/relatos/{relato['id']}", headers=ANA)

    assert response.status_code == 200
    assert response.json()["data"]["id"] == relato["id"]
    assert client.get(f"/api/relatos/{relato['id']}", headers=ANA).status_code == 404


def test_catalog_listing_is_open_to_users(client: TestClient) -> None:
    tipos = client.get("/api/relatos/tipos", headers=ANA).json()["data"]
    prioridades = client.get("/api/relatos/prioridades", headers=ANA).json()["data"]

    assert [tipo["slug"] for tipo in tipos] == ["risco", "decisao", "bloqueio", "informativo"]
    assert [prioridade["slug"] for prioridade in prioridades] == ["baixa", "media", "alta"]


def test_catalog_writes_require_privilege(client: TestClient) -> None:
    body = {"slug": "licenca", "label": "Licença"}

    denied = client.post("/api/relatos/tipos", json=body, headers=ANA)
    created = client.post("/api/relatos/tipos", json=body, headers=ADMIN)

    assert denied.status_code == 403
    assert denied.json() == {"success": False, "error": "Acesso negado"}
    assert created.status_code == 201
    assert created.json()["data"]["slug"] == "licenca"


def test_catalog_update(client: TestClient) -> None:
    prioridades = client.get("/api/relatos/prioridades", headers=ANA).json()["data"]
    baixa = prioridades[0]

    response = client.put(
        f"/api/relatos/prioridades/{baixa['id']}",
        json={"label": "Baixíssima"},
        headers=ADMIN,
    )
    missing = client.put("/api/relatos/prioridades/999", json={"label": "x"}, headers=ADMIN)

    assert response.json()["data"]["label"] == "Baixíssima"
    assert missing.status_code == 404
