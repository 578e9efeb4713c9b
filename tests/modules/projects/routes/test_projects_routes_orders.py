# -*- coding: utf-8 -*-
"""
tests/modules/projects/routes/test_projects_routes_orders.py

Rutas de órdenes: alta, edición, estado, subida de archivo, snapshot y baja.

Autor: OrderTrack
Fecha: 2026-03-07
"""

import pytest

from ordertrack.core.settings import get_settings


@pytest.mark.asyncio
async def test_create_order_starts_pending(async_client, create_project_http):
    project = await create_project_http()
    r = await async_client.post(f"/projects/{project['id']}/orders", json={"title": "Logo v1", "notes": "SVG"})

    assert r.status_code == 201
    order = r.json()["order"]
    assert order["status"] == "PENDING"
    assert order["file_path"] is None
    assert order["project_id"] == project["id"]


@pytest.mark.asyncio
async def test_create_order_without_title_is_400(async_client, create_project_http):
    project = await create_project_http()
    r = await async_client.post(f"/projects/{project['id']}/orders", json={"notes": "sin título"})
    assert r.status_code == 400
    assert r.json()["detail"]["error_code"] == "REQUIRED_FIELD_MISSING"


@pytest.mark.asyncio
async def test_create_order_for_missing_project_is_404(async_client):
    r = await async_client.post("/projects/31337/orders", json={"title": "X"})
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_edit_order(async_client, create_project_http, create_order_http):
    project = await create_project_http()
    order = await create_order_http(project["id"])

    r = await async_client.put(
        f"/projects/{project['id']}/orders/{order['id']}",
        json={"title": "Logo v2", "notes": ""},
    )
    assert r.status_code == 200
    body = r.json()["order"]
    assert body["title"] == "Logo v2"
    assert body["notes"] is None


@pytest.mark.asyncio
async def test_order_under_other_project_is_404(async_client, create_project_http, create_order_http):
    p1 = await create_project_http("Uno")
    p2 = await create_project_http("Dos")
    order = await create_order_http(p1["id"])

    r = await async_client.put(f"/projects/{p2['id']}/orders/{order['id']}", json={"title": "X"})
    assert r.status_code == 404
    assert r.json()["detail"]["error_code"] == "ORDER_NOT_FOUND"


@pytest.mark.asyncio
async def test_set_status(async_client, create_project_http, create_order_http):
    project = await create_project_http()
    order = await create_order_http(project["id"])
    url = f"/projects/{project['id']}/orders/{order['id']}/status"

    r = await async_client.post(url, json={"status": "COMPLETED"})
    assert r.status_code == 200
    assert r.json()["order"]["status"] == "COMPLETED"

    r = await async_client.post(url, json={"status": "PENDING"})
    assert r.json()["order"]["status"] == "PENDING"


@pytest.mark.asyncio
async def test_set_unknown_status_is_400(async_client, create_project_http, create_order_http):
    project = await create_project_http()
    order = await create_order_http(project["id"])

    r = await async_client.post(
        f"/projects/{project['id']}/orders/{order['id']}/status",
        json={"status": "ARCHIVED"},
    )
    assert r.status_code == 400
    assert r.json()["detail"]["error_code"] == "INVALID_STATUS"


@pytest.mark.asyncio
async def test_upload_and_replace_file(async_client, create_project_http, create_order_http, blob_store):
    project = await create_project_http()
    order = await create_order_http(project["id"])
    url = f"/projects/{project['id']}/orders/{order['id']}/upload"

    r = await async_client.post(url, files={"file": ("Logo final (v1).png", b"uno", "image/png")})
    assert r.status_code == 200
    first = r.json()["order"]["file_path"]
    assert first.startswith("/uploads/")
    assert first.endswith("-Logo-final--v1-.png")

    r = await async_client.post(url, files={"file": ("logo-v2.png", b"dos", "image/png")})
    second = r.json()["order"]["file_path"]

    assert second != first
    assert first in blob_store.deleted
    assert list(blob_store.blobs) == [second]
    assert blob_store.blobs[second] == b"dos"


@pytest.mark.asyncio
async def test_upload_without_file_is_400(async_client, create_project_http, create_order_http):
    project = await create_project_http()
    order = await create_order_http(project["id"])

    r = await async_client.post(
        f"/projects/{project['id']}/orders/{order['id']}/upload",
        data={"comentario": "sin archivo"},
    )
    assert r.status_code == 400
    assert r.json()["detail"]["error_code"] == "FILE_REQUIRED"


@pytest.mark.asyncio
async def test_upload_too_large_is_413(async_client, create_project_http, create_order_http, blob_store):
    project = await create_project_http()
    order = await create_order_http(project["id"])
    too_big = b"x" * (get_settings().upload_max_bytes + 1)

    r = await async_client.post(
        f"/projects/{project['id']}/orders/{order['id']}/upload",
        files={"file": ("big.bin", too_big, "application/octet-stream")},
    )
    assert r.status_code == 413
    assert r.json()["detail"]["error_code"] == "FILE_TOO_LARGE"
    assert blob_store.blobs == {}


@pytest.mark.asyncio
async def test_upload_storage_failure_is_500(async_client, create_project_http, create_order_http, blob_store):
    project = await create_project_http()
    order = await create_order_http(project["id"])
    blob_store.fail_saves = True

    r = await async_client.post(
        f"/projects/{project['id']}/orders/{order['id']}/upload",
        files={"file": ("a.txt", b"x", "text/plain")},
    )
    assert r.status_code == 500
    detail = r.json()["detail"]
    assert detail["error_code"] == "STORAGE_FAILURE"
    assert detail["request_id"] == r.headers["x-request-id"]


@pytest.mark.asyncio
async def test_orders_snapshot(async_client, create_project_http, create_order_http):
    project = await create_project_http()
    a = await create_order_http(project["id"], "A")
    b = await create_order_http(project["id"], "B")

    r = await async_client.get(f"/projects/{project['id']}/orders")
    assert r.status_code == 200
    orders = r.json()["orders"]
    assert [o["id"] for o in orders] == [a["id"], b["id"]]
    assert set(orders[0]) == {"id", "status", "file_path", "client_comment"}


@pytest.mark.asyncio
async def test_orders_snapshot_missing_project_is_404(async_client):
    r = await async_client.get("/projects/999/orders")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_delete_order(async_client, create_project_http, create_order_http, blob_store):
    project = await create_project_http()
    order = await create_order_http(project["id"])
    base = f"/projects/{project['id']}/orders/{order['id']}"
    await async_client.post(f"{base}/upload", files={"file": ("a.txt", b"x", "text/plain")})

    r = await async_client.delete(base)
    assert r.status_code == 200
    assert blob_store.blobs == {}

    r = await async_client.delete(base)
    assert r.status_code == 404
    assert r.json()["detail"]["error_code"] == "ORDER_NOT_FOUND"

# Fin del archivo tests/modules/projects/routes/test_projects_routes_orders.py
