# -*- coding: utf-8 -*-
"""
tests/modules/projects/routes/test_events_route.py

Stream SSE de eventos por proyecto: formato, heartbeat y liberación de
la suscripción al desconectarse el cliente.

Autor: OrderTrack
Fecha: 2026-03-07
"""

import json

import pytest

from ordertrack.modules.projects.routes.events import format_sse, stream_order_events


def _disconnect_after(n):
    calls = {"n": 0}

    async def _is_disconnected():
        calls["n"] += 1
        return calls["n"] > n

    return _is_disconnected


def test_format_sse_frame():
    frame = format_sse({"type": "order.created", "project_id": 1, "order_id": 2})
    event_line, data_line, _, _ = frame.split("\n")
    assert event_line == "event: order.created"
    assert json.loads(data_line[len("data: "):]) == {"type": "order.created", "project_id": 1, "order_id": 2}
    assert frame.endswith("\n\n")


@pytest.mark.asyncio
async def test_stream_forwards_events_and_unsubscribes(broker):
    gen = stream_order_events(broker, 7, _disconnect_after(1), heartbeat_seconds=1.0)

    assert await gen.__anext__() == ": connected\n\n"
    assert broker.subscriber_count(7) == 1

    broker.publish(7, {"type": "order.status_changed", "project_id": 7})
    frame = await gen.__anext__()
    assert frame.startswith("event: order.status_changed\n")

    with pytest.raises(StopAsyncIteration):
        await gen.__anext__()
    assert broker.subscriber_count(7) == 0


@pytest.mark.asyncio
async def test_stream_sends_heartbeat_when_idle(broker):
    gen = stream_order_events(broker, 7, _disconnect_after(5), heartbeat_seconds=0.01)

    await gen.__anext__()
    assert await gen.__anext__() == ": ping\n\n"
    await gen.aclose()

    assert broker.subscriber_count(7) == 0


@pytest.mark.asyncio
async def test_stream_ignores_other_projects(broker):
    gen = stream_order_events(broker, 7, _disconnect_after(5), heartbeat_seconds=0.01)
    await gen.__anext__()

    broker.publish(8, {"type": "order.created", "project_id": 8})

    assert await gen.__anext__() == ": ping\n\n"
    await gen.aclose()


@pytest.mark.asyncio
async def test_events_for_missing_project_is_404(async_client):
    r = await async_client.get("/projects/999/events")
    assert r.status_code == 404

# Fin del archivo tests/modules/projects/routes/test_events_route.py
