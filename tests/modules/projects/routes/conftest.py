# -*- coding: utf-8 -*-
"""
tests/modules/projects/routes/conftest.py

Helpers HTTP para las rutas de Projects.

Autor: OrderTrack
Fecha: 2026-03-07
"""

import pytest


@pytest.fixture
def create_project_http(async_client):
    async def _create(title="Identidad visual", **fields):
        payload = {"title": title, **fields}
        r = await async_client.post("/projects", json=payload)
        assert r.status_code == 201, r.text
        return r.json()["project"]
    return _create


@pytest.fixture
def create_order_http(async_client):
    async def _create(project_id, title="Logo v1", notes=None):
        r = await async_client.post(f"/projects/{project_id}/orders", json={"title": title, "notes": notes})
        assert r.status_code == 201, r.text
        return r.json()["order"]
    return _create

# Fin del archivo tests/modules/projects/routes/conftest.py
