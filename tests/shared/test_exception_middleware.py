# -*- coding: utf-8 -*-
"""
tests/shared/test_exception_middleware.py

JSONExceptionMiddleware: errores no manejados como JSON con request_id.

Autor: OrderTrack
Fecha: 2026-03-07
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from ordertrack.shared.middleware import JSONExceptionMiddleware


@pytest.fixture
def boom_app():
    app = FastAPI()
    app.add_middleware(JSONExceptionMiddleware)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("fallo inesperado")

    @app.get("/ok")
    async def ok():
        return {"ok": True}

    return app


@pytest.mark.asyncio
async def test_unhandled_error_returns_json_500(boom_app):
    transport = ASGITransport(app=boom_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        r = await client.get("/boom", headers={"X-Request-ID": "req-123"})

    assert r.status_code == 500
    assert r.headers["content-type"].startswith("application/json")
    assert r.headers["x-request-id"] == "req-123"
    detail = r.json()["detail"]
    assert detail["error_code"] == "INTERNAL_SERVER_ERROR"
    assert detail["request_id"] == "req-123"
    assert "fallo inesperado" not in r.text


@pytest.mark.asyncio
async def test_success_gets_generated_request_id(boom_app):
    transport = ASGITransport(app=boom_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        r = await client.get("/ok")

    assert r.status_code == 200
    assert len(r.headers["x-request-id"]) == 16

# Fin del archivo tests/shared/test_exception_middleware.py
