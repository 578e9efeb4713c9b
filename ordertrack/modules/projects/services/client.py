# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/services/client.py

Capa de aplicación del portal de cliente (enlace con token).

Toda operación resuelve primero el token; un token erróneo, revocado o
regenerado produce ClientLinkNotFound sin distinguir la causa.

Autor: OrderTrack
Fecha: 2026-03-05
"""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ordertrack.shared.events import OrderEventBroker
from ordertrack.shared.storage.blob_store import BlobStore
from ordertrack.modules.projects.facades import OrderFacade, ProjectFacade
from ordertrack.modules.projects.metrics import instrument_op
from ordertrack.modules.projects.models import Order
from ordertrack.modules.projects.schemas import ClientProjectView, OrderRead
from ordertrack.modules.projects.services import notifications as ev

logger = logging.getLogger(__name__)


class ClientPortalService:
    """Vista, comentario y aprobación del cliente."""

    def __init__(self, db: AsyncSession, blob_store: BlobStore, broker: OrderEventBroker):
        self.db = db
        self.broker = broker
        self.projects = ProjectFacade(db, blob_store)
        self.orders = OrderFacade(db, blob_store, max_upload_bytes=0)

    async def view_project(self, token: str) -> ClientProjectView:
        """
        Proyecto y órdenes visibles para el cliente.

        Raises:
            ClientLinkNotFound: Si el token no resuelve
        """
        project = await self.projects.resolve_token(token, with_orders=True)
        return ClientProjectView(
            id=project.id,
            title=project.title,
            description=project.description,
            client_name=project.client_name,
            deadline=project.deadline,
            owner_name=project.owner.name if project.owner else None,
            orders=[OrderRead.model_validate(o) for o in project.orders],
        )

    async def submit_comment(self, token: str, order_id: int, comment: Optional[str]) -> Order:
        """
        Raises:
            ClientLinkNotFound: Si el token no resuelve
            OrderNotFound: Si la orden no pertenece al proyecto
            CommentNotAllowed: Si la orden está COMPLETED o APPROVED
        """
        async with instrument_op("client_comment"):
            project = await self.projects.resolve_token(token)
            order = await self.orders.submit_client_comment(project, order_id, comment)
        ev.publish(self.broker, ev.ORDER_COMMENTED, order.project_id, order=order)
        return order

    async def approve_order(self, token: str, order_id: int) -> Order:
        """
        Raises:
            ClientLinkNotFound: Si el token no resuelve
            OrderNotFound: Si la orden no pertenece al proyecto
        """
        async with instrument_op("client_approve"):
            project = await self.projects.resolve_token(token)
            order = await self.orders.approve(project, order_id)
        ev.publish(self.broker, ev.ORDER_APPROVED, order.project_id, order=order)
        return order


__all__ = ["ClientPortalService"]

# Fin del archivo ordertrack/modules/projects/services/client.py
