# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/facades/order_facade.py

Facade público para operaciones sobre órdenes (entregables).
Delegación a facades/orders/crud.py con el motor de ciclo de vida inyectado.

Autor: OrderTrack
Fecha: 2026-03-04
"""

from typing import Any, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ordertrack.shared.storage.blob_store import BlobStore
from ordertrack.modules.projects.models import Order, Project

from .orders import crud
from .orders.lifecycle import OrderLifecycle


class OrderFacade:
    """
    Facade público para gestión de órdenes.

    Args:
        db: Sesión async
        blob_store: Almacenamiento de archivos adjuntos
        max_upload_bytes: Tamaño máximo aceptado por upload_file
    """

    def __init__(self, db: AsyncSession, blob_store: BlobStore, *, max_upload_bytes: int):
        self.db = db
        self.lifecycle = OrderLifecycle(blob_store)
        self.max_upload_bytes = max_upload_bytes

    async def list_for_project(self, project_id: int) -> List[Order]:
        return await crud.list_for_project(self.db, project_id)

    async def create(self, project_id: int, *, title: Optional[str], notes: Optional[str] = None) -> Order:
        return await crud.create(self.db, project_id, title=title, notes=notes)

    async def update(
        self,
        order_id: int,
        *,
        title: Optional[str],
        notes: Optional[str] = None,
        project_id: Optional[int] = None,
    ) -> Order:
        return await crud.update(self.db, order_id, title=title, notes=notes, project_id=project_id)

    async def set_status(self, order_id: int, new_status: Any, *, project_id: Optional[int] = None) -> Order:
        return await crud.set_status(self.db, self.lifecycle, order_id, new_status, project_id=project_id)

    async def upload_file(
        self,
        order_id: int,
        *,
        filename: Optional[str],
        data: Optional[bytes],
        project_id: Optional[int] = None,
    ) -> Order:
        return await crud.upload_file(
            self.db,
            self.lifecycle,
            order_id,
            filename=filename,
            data=data,
            max_bytes=self.max_upload_bytes,
            project_id=project_id,
        )

    async def submit_client_comment(self, project: Project, order_id: int, comment: Optional[str]) -> Order:
        return await crud.submit_client_comment(self.db, project, order_id, comment)

    async def approve(self, project: Project, order_id: int) -> Order:
        return await crud.approve(self.db, self.lifecycle, project, order_id)

    async def delete(self, order_id: int, *, project_id: Optional[int] = None) -> Order:
        return await crud.delete(self.db, self.lifecycle, order_id, project_id=project_id)


__all__ = ["OrderFacade"]

# Fin del archivo ordertrack/modules/projects/facades/order_facade.py
