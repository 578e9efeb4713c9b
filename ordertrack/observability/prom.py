# -*- coding: utf-8 -*-
"""
ordertrack/observability/prom.py

Configuración de observabilidad Prometheus para OrderTrack.

Incluye:
- Middleware HTTP para conteo y latencia por ruta/estado
- Endpoint /metrics compatible con Prometheus (pull model)
- Soporte multiproceso (Prometheus MultiProcess Collector)

El label `path` usa la plantilla de la ruta (/projects/{project_id}) y no
la URL concreta, para no disparar la cardinalidad con IDs y tokens.

Autor: OrderTrack
Fecha: 2026-03-06
"""
from __future__ import annotations

import os
from time import perf_counter
from typing import Optional

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Match
from prometheus_client import (
    CollectorRegistry, multiprocess, generate_latest, CONTENT_TYPE_LATEST,
    Counter, Histogram,
)

REQUEST_COUNT = Counter(
    "ordertrack_http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)
REQUEST_LATENCY = Histogram(
    "ordertrack_http_request_latency_seconds",
    "Latency per request (s)",
    ["method", "path", "status"],
)

# Rutas que no se instrumentan
_SKIP_PATHS = ("/metrics",)


def _route_template(request: Request) -> str:
    """
    Plantilla completa (con prefijos) de la ruta de la app que atiende la
    petición. Se resuelve contra app.router.routes y no contra
    scope["route"], que puede ser la ruta relativa de un subrouter.
    """
    scope = {
        "type": "http",
        "path": request.scope.get("path", ""),
        "root_path": request.scope.get("root_path", ""),
        "method": request.method,
    }
    partial: Optional[str] = None
    for route in request.app.router.routes:
        match, _ = route.matches(scope)
        template = getattr(route, "path_format", None)
        if match == Match.FULL:
            return template or "unmatched"
        if match == Match.PARTIAL and partial is None:
            # Ruta existente con otro método (405)
            partial = template
    return partial or "unmatched"


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware para instrumentar peticiones HTTP en FastAPI."""

    async def dispatch(self, request, call_next):
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        # Antes de call_next: el routing interno muta el scope
        path = _route_template(request)
        start = perf_counter()
        resp = await call_next(request)
        elapsed = perf_counter() - start

        method = request.method
        status = str(resp.status_code)
        REQUEST_LATENCY.labels(method, path, status).observe(elapsed)
        REQUEST_COUNT.labels(method, path, status).inc()
        return resp


def _build_registry() -> Optional[CollectorRegistry]:
    """Inicializa CollectorRegistry con soporte multiproceso (si aplica)."""
    if os.environ.get("PROMETHEUS_MULTIPROC_DIR"):
        registry = CollectorRegistry()
        multiprocess.MultiProcessCollector(registry)
        return registry
    return None


def mount_metrics(app: FastAPI, path: str = "/metrics") -> None:
    """Registra el endpoint /metrics en la app FastAPI."""
    registry = _build_registry()

    @app.get(path, include_in_schema=False)
    def metrics():
        data = generate_latest(registry) if registry else generate_latest()
        return Response(content=data, media_type=CONTENT_TYPE_LATEST)


def setup_observability(app: FastAPI) -> None:
    """Agrega middleware de Prometheus y monta el endpoint /metrics."""
    app.add_middleware(PrometheusMiddleware)
    mount_metrics(app)


# Fin del archivo ordertrack/observability/prom.py
