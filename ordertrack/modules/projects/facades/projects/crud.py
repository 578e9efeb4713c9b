# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/facades/projects/crud.py

Operaciones CRUD de proyectos: create, update, hard delete, tokens.

Reglas:
- El título es obligatorio (se recorta); opcionales vacíos se guardan como NULL.
- update reemplaza description, client_name y deadline; client_email sólo
  cambia si se envía.
- hard_delete limpia los archivos de todas las órdenes, elimina las órdenes
  y por último el proyecto, en ese orden.

Transacciones: commit_or_raise como única fuente de verdad.
Toda mutación relee la fila con SELECT ... FOR UPDATE.

Autor: OrderTrack
Fecha: 2026-03-04
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ordertrack.modules.projects.models import Order, Project
from ordertrack.modules.projects.facades.base import commit_or_raise, optional_text, require_text
from ordertrack.modules.projects.facades.errors import ProjectNotFound
from ordertrack.modules.projects.facades.orders.lifecycle import OrderLifecycle
from ordertrack.modules.projects.facades.projects.tokens import AccessTokenManager

logger = logging.getLogger(__name__)

# Marcador para "campo no enviado" (distinto de None = limpiar)
UNSET = object()


async def get_for_update(db: AsyncSession, project_id: int) -> Project:
    """
    Obtiene un proyecto para actualización con bloqueo pesimista.

    Raises:
        ProjectNotFound: Si no existe
    """
    result = await db.execute(
        sa.select(Project).where(Project.id == project_id).with_for_update()
    )
    project = result.scalars().first()

    if not project:
        raise ProjectNotFound(project_id)
    return project


async def get(db: AsyncSession, project_id: int, *, with_orders: bool = False) -> Project:
    """
    Obtiene un proyecto por ID.

    Args:
        with_orders: Cargar órdenes y propietario

    Raises:
        ProjectNotFound: Si no existe
    """
    stmt = sa.select(Project).where(Project.id == project_id)
    if with_orders:
        stmt = stmt.options(
            selectinload(Project.orders),
            selectinload(Project.owner),
        ).execution_options(populate_existing=True)
    result = await db.execute(stmt)
    project = result.scalars().first()
    if not project:
        raise ProjectNotFound(project_id)
    return project


async def create(
    db: AsyncSession,
    tokens: AccessTokenManager,
    *,
    owner_id: int,
    title: Optional[str],
    description: Optional[str] = None,
    client_name: Optional[str] = None,
    client_email: Optional[str] = None,
    deadline: Optional[date] = None,
) -> Project:
    """
    Crea un proyecto con un token de acceso recién emitido.

    Args:
        db: AsyncSession SQLAlchemy
        tokens: Gestor de tokens de cliente
        owner_id: ID del AppUser propietario (obligatorio)
        title: Título (obligatorio, no vacío)

    Returns:
        Proyecto persistido

    Raises:
        RequiredFieldMissing: Si el título está vacío
    """
    clean_title = require_text(title, "title")

    async def _work() -> Project:
        project = Project(
            owner_id=owner_id,
            title=clean_title,
            description=optional_text(description),
            client_name=optional_text(client_name),
            client_email=optional_text(client_email),
            deadline=deadline,
            access_token=tokens.issue(),
        )
        db.add(project)
        await db.flush()
        logger.info("project_created", extra={"project_id": project.id, "owner_id": owner_id})
        return project

    return await commit_or_raise(db, _work)


async def update(
    db: AsyncSession,
    project_id: int,
    *,
    title: Optional[str],
    description: Optional[str] = None,
    client_name: Optional[str] = None,
    deadline: Optional[date] = None,
    client_email=UNSET,
) -> Project:
    """
    Edita un proyecto (reemplazo completo de los campos editables).

    Raises:
        RequiredFieldMissing: Si el título está vacío
        ProjectNotFound: Si el proyecto no existe
    """
    clean_title = require_text(title, "title")

    async def _work() -> Project:
        project = await get_for_update(db, project_id)
        project.title = clean_title
        project.description = optional_text(description)
        project.client_name = optional_text(client_name)
        project.deadline = deadline
        if client_email is not UNSET:
            project.client_email = optional_text(client_email)
        logger.info("project_updated", extra={"project_id": project_id})
        return project

    return await commit_or_raise(db, _work)


async def regenerate_token(db: AsyncSession, tokens: AccessTokenManager, project_id: int) -> str:
    """
    Rota el token del proyecto.

    Raises:
        ProjectNotFound: Si el proyecto no existe
    """
    async def _work() -> str:
        project = await get_for_update(db, project_id)
        return tokens.regenerate(project)

    return await commit_or_raise(db, _work)


async def revoke_token(db: AsyncSession, tokens: AccessTokenManager, project_id: int) -> Project:
    """
    Revoca el token del proyecto (idempotente).

    Raises:
        ProjectNotFound: Si el proyecto no existe
    """
    async def _work() -> Project:
        project = await get_for_update(db, project_id)
        tokens.revoke(project)
        return project

    return await commit_or_raise(db, _work)


async def hard_delete(db: AsyncSession, lifecycle: OrderLifecycle, project_id: int) -> List[int]:
    """
    Elimina un proyecto y todas sus órdenes (hard delete en cascada).

    Orden obligatorio:
    1. Limpieza best-effort de los archivos de cada orden
    2. DELETE de las órdenes
    3. DELETE del proyecto

    Returns:
        IDs de las órdenes eliminadas

    Raises:
        ProjectNotFound: Si el proyecto no existe
    """
    async def _work() -> List[int]:
        project = await get_for_update(db, project_id)

        result = await db.execute(
            sa.select(Order).where(Order.project_id == project_id).with_for_update()
        )
        orders = list(result.scalars().all())
        for order in orders:
            await lifecycle.detach_and_delete_file(order)

        await db.execute(
            sa.delete(Order)
            .where(Order.project_id == project_id)
            .execution_options(synchronize_session=False)
        )
        deleted = await db.execute(
            sa.delete(Project)
            .where(Project.id == project_id)
            .execution_options(synchronize_session=False)
        )
        if deleted.rowcount == 0:
            raise ProjectNotFound(project_id)

        order_ids = [o.id for o in orders]
        # Las filas ya no existen; fuera de la sesión para que el flush
        # del commit no intente actualizarlas
        for order in orders:
            db.expunge(order)
        db.expunge(project)

        logger.info(
            "project_hard_deleted",
            extra={"project_id": project_id, "orders_deleted": len(order_ids)},
        )
        return order_ids

    return await commit_or_raise(db, _work)


__all__ = [
    "UNSET",
    "get_for_update",
    "get",
    "create",
    "update",
    "regenerate_token",
    "revoke_token",
    "hard_delete",
]

# Fin del archivo ordertrack/modules/projects/facades/projects/crud.py
