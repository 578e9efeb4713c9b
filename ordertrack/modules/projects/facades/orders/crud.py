# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/facades/orders/crud.py

Operaciones de órdenes: alta, edición, estado, archivo adjunto,
comentario y aprobación del cliente, baja.

Reglas:
- Una orden nace PENDING y sin archivo.
- Cuando se indica project_id, la orden debe pertenecer a ese proyecto;
  en otro caso se responde OrderNotFound.
- upload_file: valida el archivo antes de tocar la BD, guarda el blob nuevo,
  aplica el reemplazo (borrando el anterior) y hace commit. Si el commit
  falla, el blob nuevo se elimina.

Transacciones: commit_or_raise; toda mutación relee la orden con FOR UPDATE.

Autor: OrderTrack
Fecha: 2026-03-04
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncSession

from ordertrack.shared.utils.storage_errors import BlobStorageError
from ordertrack.modules.projects.enums import OrderStatus
from ordertrack.modules.projects.models import Order, Project
from ordertrack.modules.projects.facades.base import commit_or_raise, optional_text, require_text
from ordertrack.modules.projects.facades.errors import (
    CommentNotAllowed,
    MissingUpload,
    OrderNotFound,
    RequiredFieldMissing,
    StorageFailure,
    UploadTooLarge,
)
from ordertrack.modules.projects.facades.orders.lifecycle import OrderLifecycle, can_accept_comment, parse_status
from ordertrack.modules.projects.facades.projects.crud import get_for_update as get_project_for_update

logger = logging.getLogger(__name__)


async def get_for_update(db: AsyncSession, order_id: int, *, project_id: Optional[int] = None) -> Order:
    """
    Obtiene una orden para actualización con bloqueo pesimista.

    Args:
        project_id: Si se indica, la orden debe pertenecer a ese proyecto

    Raises:
        OrderNotFound: Si no existe o pertenece a otro proyecto
    """
    stmt = sa.select(Order).where(Order.id == order_id)
    if project_id is not None:
        stmt = stmt.where(Order.project_id == project_id)
    result = await db.execute(stmt.with_for_update())
    order = result.scalars().first()
    if not order:
        raise OrderNotFound(order_id)
    return order


async def list_for_project(db: AsyncSession, project_id: int) -> list[Order]:
    """Órdenes del proyecto en orden de creación."""
    result = await db.execute(
        sa.select(Order)
        .where(Order.project_id == project_id)
        .order_by(Order.id)
        .execution_options(populate_existing=True)
    )
    return list(result.scalars().all())


async def create(db: AsyncSession, project_id: int, *, title: Optional[str], notes: Optional[str] = None) -> Order:
    """
    Agrega una orden PENDING al proyecto.

    Raises:
        RequiredFieldMissing: Si el título está vacío
        ProjectNotFound: Si el proyecto no existe
    """
    clean_title = require_text(title, "title")

    async def _work() -> Order:
        # Bloquea el proyecto padre para no crear órdenes de un proyecto en baja
        await get_project_for_update(db, project_id)
        order = Order(
            project_id=project_id,
            title=clean_title,
            notes=optional_text(notes),
            status=OrderStatus.PENDING,
            file_path=None,
        )
        db.add(order)
        await db.flush()
        logger.info("order_created", extra={"order_id": order.id, "project_id": project_id})
        return order

    return await commit_or_raise(db, _work)


async def update(
    db: AsyncSession,
    order_id: int,
    *,
    title: Optional[str],
    notes: Optional[str] = None,
    project_id: Optional[int] = None,
) -> Order:
    """
    Edita título y notas de la orden.

    Raises:
        RequiredFieldMissing: Si el título está vacío
        OrderNotFound: Si la orden no existe
    """
    clean_title = require_text(title, "title")

    async def _work() -> Order:
        order = await get_for_update(db, order_id, project_id=project_id)
        order.title = clean_title
        order.notes = optional_text(notes)
        logger.info("order_updated", extra={"order_id": order_id})
        return order

    return await commit_or_raise(db, _work)


async def set_status(
    db: AsyncSession,
    lifecycle: OrderLifecycle,
    order_id: int,
    new_status: Any,
    *,
    project_id: Optional[int] = None,
) -> Order:
    """
    Fija el estado de la orden (cualquier estado desde cualquier otro).

    Raises:
        InvalidOrderStatus: Si el estado no es reconocido (antes de leer la BD)
        OrderNotFound: Si la orden no existe
    """
    status = parse_status(new_status)

    async def _work() -> Order:
        order = await get_for_update(db, order_id, project_id=project_id)
        return lifecycle.set_status(order, status)

    return await commit_or_raise(db, _work)


async def upload_file(
    db: AsyncSession,
    lifecycle: OrderLifecycle,
    order_id: int,
    *,
    filename: Optional[str],
    data: Optional[bytes],
    max_bytes: int,
    project_id: Optional[int] = None,
) -> Order:
    """
    Adjunta (o reemplaza) el archivo de la orden.

    Raises:
        MissingUpload: Si no se recibió archivo o está vacío
        UploadTooLarge: Si excede max_bytes
        OrderNotFound: Si la orden no existe
        StorageFailure: Si el blob nuevo no pudo guardarse
    """
    if data is None or not filename:
        raise MissingUpload()
    if len(data) == 0:
        raise MissingUpload()
    if len(data) > max_bytes:
        raise UploadTooLarge(len(data), max_bytes)

    new_path: Optional[str] = None

    async def _work() -> Order:
        nonlocal new_path
        order = await get_for_update(db, order_id, project_id=project_id)
        try:
            new_path = await lifecycle.blob_store.save(filename, data)
        except BlobStorageError as e:
            logger.error("blob_save_failed", extra={"order_id": order_id, "error": str(e)})
            raise StorageFailure("No se pudo guardar el archivo") from e
        return await lifecycle.replace_file(order, new_path)

    try:
        return await commit_or_raise(db, _work)
    except Exception:
        # La referencia nueva no llegó a persistirse: el blob quedaría huérfano
        if new_path:
            await lifecycle.discard_blob(new_path)
        raise


async def submit_client_comment(
    db: AsyncSession,
    project: Project,
    order_id: int,
    comment: Optional[str],
) -> Order:
    """
    Guarda el comentario del cliente (sobrescribe el anterior).

    Orden de verificación: pertenencia de la orden, política de estado,
    texto no vacío.

    Raises:
        OrderNotFound: Si la orden no pertenece al proyecto del token
        CommentNotAllowed: Si la orden está COMPLETED o APPROVED
        RequiredFieldMissing: Si el comentario está vacío
    """
    async def _work() -> Order:
        order = await get_for_update(db, order_id, project_id=project.id)
        if not can_accept_comment(order):
            raise CommentNotAllowed(order_id, order.status)
        if comment is None or not comment.strip():
            raise RequiredFieldMissing("comment")
        order.client_comment = comment
        logger.info("order_client_commented", extra={"order_id": order_id, "project_id": project.id})
        return order

    return await commit_or_raise(db, _work)


async def approve(db: AsyncSession, lifecycle: OrderLifecycle, project: Project, order_id: int) -> Order:
    """
    Aprobación del cliente (idempotente).

    Raises:
        OrderNotFound: Si la orden no pertenece al proyecto del token
    """
    async def _work() -> Order:
        order = await get_for_update(db, order_id, project_id=project.id)
        return lifecycle.approve(order)

    return await commit_or_raise(db, _work)


async def delete(
    db: AsyncSession,
    lifecycle: OrderLifecycle,
    order_id: int,
    *,
    project_id: Optional[int] = None,
) -> Order:
    """
    Elimina la orden tras limpiar su archivo (best-effort).

    Returns:
        La instancia eliminada (desvinculada de la sesión)

    Raises:
        OrderNotFound: Si la orden no existe
    """
    async def _work() -> Order:
        order = await get_for_update(db, order_id, project_id=project_id)
        await lifecycle.detach_and_delete_file(order)
        await db.execute(
            sa.delete(Order)
            .where(Order.id == order_id)
            .execution_options(synchronize_session=False)
        )
        db.expunge(order)
        logger.info("order_deleted", extra={"order_id": order_id, "project_id": order.project_id})
        return order

    return await commit_or_raise(db, _work)


__all__ = [
    "get_for_update",
    "list_for_project",
    "create",
    "update",
    "set_status",
    "upload_file",
    "submit_client_comment",
    "approve",
    "delete",
]

# Fin del archivo ordertrack/modules/projects/facades/orders/crud.py
