# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/metrics/collectors.py

Instrumentación Prometheus del ciclo de vida de órdenes y del enlace de cliente.

Métricas expuestas:
- ordertrack_order_status_changes_total{status}
- ordertrack_blob_cleanup_failures_total
- ordertrack_client_token_lookups_total{result}
- ordertrack_order_events_published_total{type}
- ordertrack_operations_total{op,outcome}
- ordertrack_operation_latency_seconds{op,outcome}

🚫 Prohibido: project_id, order_id, tokens (alta cardinalidad / secretos)

Autor: OrderTrack
Fecha: 2026-03-04
"""
from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Literal

from prometheus_client import Counter, Histogram

Outcome = Literal["success", "error"]
LookupResult = Literal["hit", "miss"]

ORDER_STATUS_CHANGES = Counter(
    "ordertrack_order_status_changes_total",
    "Cambios de estado de órdenes por estado destino",
    ["status"],
)
BLOB_CLEANUP_FAILURES = Counter(
    "ordertrack_blob_cleanup_failures_total",
    "Fallos (tolerados) al eliminar blobs reemplazados o huérfanos",
)
CLIENT_TOKEN_LOOKUPS = Counter(
    "ordertrack_client_token_lookups_total",
    "Resoluciones de token de cliente",
    ["result"],
)
ORDER_EVENTS_PUBLISHED = Counter(
    "ordertrack_order_events_published_total",
    "Eventos de órdenes publicados al canal de notificaciones",
    ["type"],
)
OPERATIONS = Counter(
    "ordertrack_operations_total",
    "Operaciones del orquestador por resultado",
    ["op", "outcome"],
)
OPERATION_LATENCY = Histogram(
    "ordertrack_operation_latency_seconds",
    "Latencia de operaciones del orquestador (s)",
    ["op", "outcome"],
)


def record_status_change(status: str) -> None:
    ORDER_STATUS_CHANGES.labels(str(status)).inc()


def record_blob_cleanup_failure() -> None:
    BLOB_CLEANUP_FAILURES.inc()


def record_token_lookup(result: LookupResult) -> None:
    CLIENT_TOKEN_LOOKUPS.labels(result).inc()


def record_event_published(event_type: str) -> None:
    ORDER_EVENTS_PUBLISHED.labels(event_type).inc()


@asynccontextmanager
async def instrument_op(op: str) -> AsyncIterator[None]:
    """
    Context manager async para instrumentar operaciones del orquestador.

    Uso:
        async with instrument_op("upload_file"):
            ...

    Registra success si el bloque termina sin excepción, error en otro caso.
    """
    start = time.perf_counter()
    outcome: Outcome = "error"
    try:
        yield
        outcome = "success"
    finally:
        elapsed = time.perf_counter() - start
        OPERATIONS.labels(op, outcome).inc()
        OPERATION_LATENCY.labels(op, outcome).observe(elapsed)


__all__ = [
    "ORDER_STATUS_CHANGES",
    "BLOB_CLEANUP_FAILURES",
    "CLIENT_TOKEN_LOOKUPS",
    "ORDER_EVENTS_PUBLISHED",
    "OPERATIONS",
    "OPERATION_LATENCY",
    "record_status_change",
    "record_blob_cleanup_failure",
    "record_token_lookup",
    "record_event_published",
    "instrument_op",
]

# Fin del archivo ordertrack/modules/projects/metrics/collectors.py
