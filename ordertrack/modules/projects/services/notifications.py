# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/services/notifications.py

Construcción y publicación de eventos de órdenes hacia el broker pub/sub.
Se invoca sólo después de un commit exitoso.

Los payloads nunca incluyen el access_token del proyecto.

Autor: OrderTrack
Fecha: 2026-03-05
"""

from __future__ import annotations

import logging
from typing import Optional

from ordertrack.shared.events import OrderEvent, OrderEventBroker
from ordertrack.modules.projects.metrics import record_event_published
from ordertrack.modules.projects.models import Order
from ordertrack.modules.projects.schemas import OrderRead

logger = logging.getLogger(__name__)

# Tipos de evento
PROJECT_UPDATED = "project.updated"
PROJECT_DELETED = "project.deleted"
TOKEN_REGENERATED = "token.regenerated"
TOKEN_REVOKED = "token.revoked"
ORDER_CREATED = "order.created"
ORDER_UPDATED = "order.updated"
ORDER_STATUS_CHANGED = "order.status_changed"
ORDER_FILE_UPLOADED = "order.file_uploaded"
ORDER_DELETED = "order.deleted"
ORDER_COMMENTED = "order.commented"
ORDER_APPROVED = "order.approved"


def build_event(
    event_type: str,
    project_id: int,
    *,
    order: Optional[Order] = None,
    order_id: Optional[int] = None,
) -> OrderEvent:
    """
    Arma el payload JSON de un evento.

    Args:
        event_type: Uno de los tipos definidos en este módulo
        project_id: Proyecto afectado
        order: Orden afectada (se serializa completa)
        order_id: ID de orden cuando ya no existe la instancia (bajas)
    """
    event: OrderEvent = {"type": event_type, "project_id": project_id}
    if order is not None:
        event["order_id"] = order.id
        event["order"] = OrderRead.model_validate(order).model_dump(mode="json")
    elif order_id is not None:
        event["order_id"] = order_id
    return event


def publish(
    broker: OrderEventBroker,
    event_type: str,
    project_id: int,
    *,
    order: Optional[Order] = None,
    order_id: Optional[int] = None,
) -> int:
    """Publica el evento y devuelve el número de suscriptores alcanzados."""
    event = build_event(event_type, project_id, order=order, order_id=order_id)
    delivered = broker.publish(project_id, event)
    record_event_published(event_type)
    logger.debug("order_event_published type=%s project_id=%s delivered=%s", event_type, project_id, delivered)
    return delivered


__all__ = [
    "PROJECT_UPDATED",
    "PROJECT_DELETED",
    "TOKEN_REGENERATED",
    "TOKEN_REVOKED",
    "ORDER_CREATED",
    "ORDER_UPDATED",
    "ORDER_STATUS_CHANGED",
    "ORDER_FILE_UPLOADED",
    "ORDER_DELETED",
    "ORDER_COMMENTED",
    "ORDER_APPROVED",
    "build_event",
    "publish",
]

# Fin del archivo ordertrack/modules/projects/services/notifications.py
