# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/routes/events.py

Canal de notificaciones en tiempo real (Server-Sent Events) por proyecto.

Formato del stream:
- ": connected" al suscribirse
- "event: <tipo>" + "data: <json>" por cada evento
- ": ping" cada SSE_HEARTBEAT_SECONDS sin eventos

Autor: OrderTrack
Fecha: 2026-03-06
"""

import asyncio
import json
import logging
from typing import AsyncIterator, Awaitable, Callable

from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse

from ordertrack.core.settings import get_settings
from ordertrack.shared.events import OrderEvent, OrderEventBroker
from ordertrack.modules.projects.services import ProjectsQueryService
from ordertrack.modules.projects.routes.deps import (
    get_order_event_broker,
    get_projects_query_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["projects:events"])

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


def format_sse(event: OrderEvent) -> str:
    payload = json.dumps(event, ensure_ascii=False, default=str)
    return f"event: {event.get('type', 'message')}\ndata: {payload}\n\n"


async def stream_order_events(
    broker: OrderEventBroker,
    project_id: int,
    is_disconnected: Callable[[], Awaitable[bool]],
    heartbeat_seconds: float,
) -> AsyncIterator[str]:
    """
    Generador SSE: reenvía los eventos del proyecto hasta que el cliente
    se desconecta. La suscripción se libera siempre al salir.
    """
    queue = broker.subscribe(project_id)
    try:
        yield ": connected\n\n"
        while True:
            if await is_disconnected():
                break
            try:
                event = await asyncio.wait_for(queue.get(), timeout=heartbeat_seconds)
            except asyncio.TimeoutError:
                yield ": ping\n\n"
                continue
            yield format_sse(event)
    finally:
        broker.unsubscribe(project_id, queue)
        logger.debug("order_events_stream_closed project_id=%s", project_id)


@router.get(
    "/{project_id}/events",
    summary="Stream SSE de eventos del proyecto",
    response_class=StreamingResponse,
)
async def project_events(
    project_id: int,
    request: Request,
    q: ProjectsQueryService = Depends(get_projects_query_service),
    broker: OrderEventBroker = Depends(get_order_event_broker),
):
    # 404 antes de abrir el stream
    await q.get_project(project_id)

    return StreamingResponse(
        stream_order_events(
            broker,
            project_id,
            request.is_disconnected,
            get_settings().sse_heartbeat_seconds,
        ),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )


# Fin del archivo ordertrack/modules/projects/routes/events.py
