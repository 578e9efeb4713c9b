# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/services/commands.py

Capa de aplicación (comandos/mutaciones del freelancer) del módulo Projects.
Orquesta ProjectFacade y OrderFacade y NO reimplementa reglas de dominio.

Tras cada mutación confirmada publica un evento en el broker del proyecto.

Autor: OrderTrack
Fecha: 2026-03-05
"""
from __future__ import annotations

from datetime import date
from typing import Any, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ordertrack.shared.events import OrderEventBroker
from ordertrack.shared.storage.blob_store import BlobStore
from ordertrack.modules.projects.facades import OrderFacade, ProjectFacade
from ordertrack.modules.projects.metrics import instrument_op
from ordertrack.modules.projects.models import Order, Project
from ordertrack.modules.projects.services import notifications as ev


class ProjectsCommandService:
    """Comandos: proyectos, tokens y órdenes."""

    def __init__(
        self,
        db: AsyncSession,
        blob_store: BlobStore,
        broker: OrderEventBroker,
        *,
        max_upload_bytes: int = 5 * 1024 * 1024,
        issue_token_bytes: int = 16,
        regenerate_token_bytes: int = 24,
    ):
        self.db = db
        self.broker = broker
        self.projects = ProjectFacade(
            db,
            blob_store,
            issue_bytes=issue_token_bytes,
            regenerate_bytes=regenerate_token_bytes,
        )
        self.orders = OrderFacade(db, blob_store, max_upload_bytes=max_upload_bytes)

    # ---- Proyectos ----
    async def create_project(
        self,
        *,
        owner_id: int,
        title: Optional[str],
        description: Optional[str] = None,
        client_name: Optional[str] = None,
        client_email: Optional[str] = None,
        deadline: Optional[date] = None,
    ) -> Project:
        async with instrument_op("create_project"):
            return await self.projects.create(
                owner_id=owner_id,
                title=title,
                description=description,
                client_name=client_name,
                client_email=client_email,
                deadline=deadline,
            )

    async def update_project(
        self,
        project_id: int,
        *,
        title: Optional[str],
        description: Optional[str] = None,
        client_name: Optional[str] = None,
        deadline: Optional[date] = None,
        client_email: Any = ProjectFacade.UNSET,
    ) -> Project:
        async with instrument_op("update_project"):
            project = await self.projects.update(
                project_id,
                title=title,
                description=description,
                client_name=client_name,
                deadline=deadline,
                client_email=client_email,
            )
        ev.publish(self.broker, ev.PROJECT_UPDATED, project_id)
        return project

    async def delete_project(self, project_id: int) -> List[int]:
        async with instrument_op("delete_project"):
            order_ids = await self.projects.delete(project_id)
        ev.publish(self.broker, ev.PROJECT_DELETED, project_id)
        return order_ids

    # ---- Token de cliente ----
    async def regenerate_token(self, project_id: int) -> str:
        async with instrument_op("regenerate_token"):
            token = await self.projects.regenerate_token(project_id)
        ev.publish(self.broker, ev.TOKEN_REGENERATED, project_id)
        return token

    async def revoke_token(self, project_id: int) -> Project:
        async with instrument_op("revoke_token"):
            project = await self.projects.revoke_token(project_id)
        ev.publish(self.broker, ev.TOKEN_REVOKED, project_id)
        return project

    # ---- Órdenes ----
    async def add_order(self, project_id: int, *, title: Optional[str], notes: Optional[str] = None) -> Order:
        async with instrument_op("add_order"):
            order = await self.orders.create(project_id, title=title, notes=notes)
        ev.publish(self.broker, ev.ORDER_CREATED, project_id, order=order)
        return order

    async def edit_order(
        self,
        order_id: int,
        *,
        title: Optional[str],
        notes: Optional[str] = None,
        project_id: Optional[int] = None,
    ) -> Order:
        async with instrument_op("edit_order"):
            order = await self.orders.update(order_id, title=title, notes=notes, project_id=project_id)
        ev.publish(self.broker, ev.ORDER_UPDATED, order.project_id, order=order)
        return order

    async def set_order_status(self, order_id: int, status: Any, *, project_id: Optional[int] = None) -> Order:
        async with instrument_op("set_order_status"):
            order = await self.orders.set_status(order_id, status, project_id=project_id)
        ev.publish(self.broker, ev.ORDER_STATUS_CHANGED, order.project_id, order=order)
        return order

    async def upload_file(
        self,
        order_id: int,
        *,
        filename: Optional[str],
        data: Optional[bytes],
        project_id: Optional[int] = None,
    ) -> Order:
        async with instrument_op("upload_file"):
            order = await self.orders.upload_file(order_id, filename=filename, data=data, project_id=project_id)
        ev.publish(self.broker, ev.ORDER_FILE_UPLOADED, order.project_id, order=order)
        return order

    async def delete_order(self, order_id: int, *, project_id: Optional[int] = None) -> None:
        async with instrument_op("delete_order"):
            order = await self.orders.delete(order_id, project_id=project_id)
        ev.publish(self.broker, ev.ORDER_DELETED, order.project_id, order_id=order_id)


__all__ = ["ProjectsCommandService"]

# Fin del archivo ordertrack/modules/projects/services/commands.py
