# -*- coding: utf-8 -*-
"""
tests/shared/test_prometheus_route_labels.py

El label `path` de las métricas HTTP usa la plantilla completa de la ruta
(con el prefijo del router), nunca la URL concreta.

Autor: OrderTrack
Fecha: 2026-03-08
"""

import pytest
from starlette.requests import Request

from ordertrack.main import create_app
from ordertrack.observability.prom import _route_template


def _request(app, method, path):
    return Request(
        {
            "type": "http",
            "method": method,
            "path": path,
            "root_path": "",
            "query_string": b"",
            "headers": [],
            "app": app,
        }
    )


@pytest.fixture(scope="module")
def built_app():
    return create_app()


@pytest.mark.parametrize(
    "method,path,expected",
    [
        ("POST", "/projects", "/projects"),
        ("GET", "/projects/12", "/projects/{project_id}"),
        ("POST", "/projects/12/orders/3/upload", "/projects/{project_id}/orders/{order_id}/upload"),
        ("GET", "/client/abc123", "/client/{token}"),
        ("PATCH", "/projects/12", "/projects/{project_id}"),
        ("GET", "/no/existe", "unmatched"),
    ],
)
def test_route_template_uses_full_prefixed_path(built_app, method, path, expected):
    assert _route_template(_request(built_app, method, path)) == expected

# Fin del archivo tests/shared/test_prometheus_route_labels.py
