# -*- coding: utf-8 -*-
"""
tests/modules/projects/routes/test_projects_routes_crud.py

Rutas CRUD y de token de proyectos (vista del freelancer).

Autor: OrderTrack
Fecha: 2026-03-07
"""

import pytest


@pytest.mark.asyncio
async def test_create_project_returns_token(async_client):
    r = await async_client.post(
        "/projects",
        json={
            "title": "  Café Aurora  ",
            "client_name": "Aurora Ríos",
            "client_email": "aurora@example.com",
            "deadline": "2026-05-30",
        },
    )
    assert r.status_code == 201
    body = r.json()
    assert body["success"] is True
    project = body["project"]
    assert project["title"] == "Café Aurora"
    assert project["deadline"] == "2026-05-30"
    assert len(project["access_token"]) == 32
    assert project["owner_id"] is not None


@pytest.mark.asyncio
async def test_create_project_without_title_is_400(async_client):
    r = await async_client.post("/projects", json={"title": "   "})
    assert r.status_code == 400
    assert r.json()["detail"]["error_code"] == "REQUIRED_FIELD_MISSING"


@pytest.mark.asyncio
async def test_create_project_with_blank_optional_fields(async_client):
    r = await async_client.post("/projects", json={"title": "Web", "client_email": "", "deadline": ""})
    assert r.status_code == 201
    project = r.json()["project"]
    assert project["client_email"] is None
    assert project["deadline"] is None


@pytest.mark.asyncio
async def test_create_project_with_invalid_email_is_422(async_client):
    r = await async_client.post("/projects", json={"title": "Web", "client_email": "no-es-email"})
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_list_and_get_projects(async_client, create_project_http, create_order_http):
    p1 = await create_project_http("Uno")
    p2 = await create_project_http("Dos")
    await create_order_http(p1["id"], "Logo")

    r = await async_client.get("/projects")
    assert r.status_code == 200
    body = r.json()
    assert body["total"] == 2
    assert {p["id"] for p in body["projects"]} == {p1["id"], p2["id"]}

    r = await async_client.get(f"/projects/{p1['id']}")
    assert r.status_code == 200
    assert [o["title"] for o in r.json()["orders"]] == ["Logo"]


@pytest.mark.asyncio
async def test_get_missing_project_is_404(async_client):
    r = await async_client.get("/projects/999")
    assert r.status_code == 404
    assert r.json()["detail"]["error_code"] == "PROJECT_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_project_keeps_email_when_absent(async_client, create_project_http):
    project = await create_project_http("Web", client_email="aurora@example.com", description="x")

    r = await async_client.put(f"/projects/{project['id']}", json={"title": "Web 2"})
    assert r.status_code == 200
    updated = r.json()["project"]
    assert updated["title"] == "Web 2"
    assert updated["client_email"] == "aurora@example.com"
    assert updated["description"] is None
    assert updated["access_token"] == project["access_token"]


@pytest.mark.asyncio
async def test_update_project_requires_title(async_client, create_project_http):
    project = await create_project_http()
    r = await async_client.put(f"/projects/{project['id']}", json={"title": ""})
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_delete_project_then_404(async_client, create_project_http, create_order_http, blob_store):
    project = await create_project_http()
    order = await create_order_http(project["id"])
    await async_client.post(
        f"/projects/{project['id']}/orders/{order['id']}/upload",
        files={"file": ("logo.png", b"png", "image/png")},
    )

    r = await async_client.delete(f"/projects/{project['id']}")
    assert r.status_code == 200
    assert r.json()["success"] is True
    assert blob_store.blobs == {}

    assert (await async_client.get(f"/projects/{project['id']}")).status_code == 404
    assert (await async_client.delete(f"/projects/{project['id']}")).status_code == 404
    assert (await async_client.get(f"/client/{project['access_token']}")).status_code == 404


@pytest.mark.asyncio
async def test_regenerate_and_revoke_token(async_client, create_project_http):
    project = await create_project_http()
    old = project["access_token"]

    r = await async_client.post(f"/projects/{project['id']}/token/regenerate")
    assert r.status_code == 200
    new = r.json()["access_token"]
    assert new != old
    assert len(new) == 48

    assert (await async_client.get(f"/client/{old}")).status_code == 404
    assert (await async_client.get(f"/client/{new}")).status_code == 200

    r = await async_client.post(f"/projects/{project['id']}/token/revoke")
    assert r.status_code == 200
    assert r.json()["access_token"] is None
    assert (await async_client.get(f"/client/{new}")).status_code == 404

    r = await async_client.get(f"/projects/{project['id']}")
    assert r.json()["access_token"] is None


@pytest.mark.asyncio
async def test_regenerate_token_missing_project_is_404(async_client):
    r = await async_client.post("/projects/777/token/regenerate")
    assert r.status_code == 404

# Fin del archivo tests/modules/projects/routes/test_projects_routes_crud.py
