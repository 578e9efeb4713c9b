# -*- coding: utf-8 -*-
"""
ordertrack/shared/events/order_events.py

Canal publish/subscribe de eventos de órdenes, indexado por project_id.

- Cada suscriptor recibe una asyncio.Queue acotada propia.
- publish() nunca bloquea: si la cola de un suscriptor está llena,
  el evento se descarta para ese suscriptor y se registra un warning.
- subscription() garantiza la baja del suscriptor en todas las salidas.

El broker vive en memoria del proceso; con varios workers cada uno
notifica sólo a sus propias conexiones.

Autor: OrderTrack
Fecha: 2026-03-04
"""

from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional, Set

logger = logging.getLogger(__name__)

OrderEvent = Dict[str, Any]


class OrderEventBroker:
    """
    Broker en memoria de eventos por proyecto.

    Args:
        queue_size: Capacidad de la cola de cada suscriptor
    """

    def __init__(self, queue_size: int = 100):
        self.queue_size = queue_size
        self._subscribers: Dict[int, Set[asyncio.Queue]] = defaultdict(set)

    def subscribe(self, project_id: int) -> asyncio.Queue:
        queue: asyncio.Queue = asyncio.Queue(maxsize=self.queue_size)
        self._subscribers[project_id].add(queue)
        logger.debug("order_events_subscribed project_id=%s total=%s", project_id, self.subscriber_count(project_id))
        return queue

    def unsubscribe(self, project_id: int, queue: asyncio.Queue) -> None:
        queues = self._subscribers.get(project_id)
        if not queues:
            return
        queues.discard(queue)
        if not queues:
            del self._subscribers[project_id]
        logger.debug("order_events_unsubscribed project_id=%s", project_id)

    def subscriber_count(self, project_id: Optional[int] = None) -> int:
        """Suscriptores de un proyecto, o de todos si project_id es None."""
        if project_id is None:
            return sum(len(q) for q in self._subscribers.values())
        return len(self._subscribers.get(project_id, ()))

    def publish(self, project_id: int, event: OrderEvent) -> int:
        """
        Entrega el evento a todos los suscriptores del proyecto.

        Args:
            project_id: Proyecto al que pertenece el evento
            event: Payload serializable a JSON (debe incluir "type")

        Returns:
            Número de suscriptores que recibieron el evento
        """
        delivered = 0
        for queue in list(self._subscribers.get(project_id, ())):
            try:
                queue.put_nowait(event)
                delivered += 1
            except asyncio.QueueFull:
                logger.warning(
                    "order_event_dropped",
                    extra={"project_id": project_id, "event_type": event.get("type")},
                )
        return delivered

    @asynccontextmanager
    async def subscription(self, project_id: int) -> AsyncIterator[asyncio.Queue]:
        queue = self.subscribe(project_id)
        try:
            yield queue
        finally:
            self.unsubscribe(project_id, queue)


__all__ = ["OrderEventBroker", "OrderEvent"]

# Fin del archivo ordertrack/shared/events/order_events.py
