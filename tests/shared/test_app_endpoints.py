# -*- coding: utf-8 -*-
"""
tests/shared/test_app_endpoints.py

Endpoints transversales: raíz, health y métricas Prometheus.

Autor: OrderTrack
Fecha: 2026-03-07
"""

import pytest


def test_module_level_app_exposes_every_route():
    from ordertrack import main

    paths = main.app.openapi()["paths"]
    assert {
        "/projects",
        "/projects/{project_id}",
        "/projects/{project_id}/token/regenerate",
        "/projects/{project_id}/token/revoke",
        "/projects/{project_id}/orders",
        "/projects/{project_id}/orders/{order_id}",
        "/projects/{project_id}/orders/{order_id}/status",
        "/projects/{project_id}/orders/{order_id}/upload",
        "/projects/{project_id}/events",
        "/client/{token}",
        "/client/{token}/orders/{order_id}/comment",
        "/client/{token}/orders/{order_id}/approve",
        "/health",
    } <= set(paths)
    assert set(paths["/projects"]) == {"get", "post"}


@pytest.mark.asyncio
async def test_root(async_client):
    r = await async_client.get("/")
    assert r.status_code == 200
    assert r.json()["status"] == "active"


@pytest.mark.asyncio
async def test_health(async_client):
    r = await async_client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["environment"] == "test"
    assert body["status"] in ("ok", "degraded")
    assert "reachable" in body["database"]


@pytest.mark.asyncio
async def test_metrics_exposes_http_and_domain_series(async_client):
    created = await async_client.post("/projects", json={"title": "Métricas"})
    await async_client.get(f"/projects/{created.json()['project']['id']}")

    r = await async_client.get("/metrics")
    assert r.status_code == 200
    assert "ordertrack_http_requests_total" in r.text
    assert 'method="POST",path="/projects"' in r.text
    assert 'method="GET",path="/projects/{project_id}"' in r.text

# Fin del archivo tests/shared/test_app_endpoints.py
