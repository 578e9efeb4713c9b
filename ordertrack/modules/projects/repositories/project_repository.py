# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/repositories/project_repository.py

Repositorio para acceso a datos de proyectos (Project).

Responsabilidades:
- Lecturas básicas (por id, listado)
- Sin lógica de negocio (validaciones y mutaciones viven en los facades)

Autor: OrderTrack
Fecha: 2026-03-05
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ordertrack.modules.projects.models import Project


async def get_project_by_id(db: AsyncSession, project_id: int, *, with_orders: bool = True) -> Optional[Project]:
    """
    Obtiene un proyecto por su ID, opcionalmente con órdenes y propietario.
    """
    stmt = select(Project).where(Project.id == project_id)
    if with_orders:
        stmt = stmt.options(
            selectinload(Project.orders),
            selectinload(Project.owner),
        ).execution_options(populate_existing=True)
    result = await db.execute(stmt)
    return result.scalars().first()


async def list_projects(
    db: AsyncSession,
    *,
    owner_id: Optional[int] = None,
    limit: int = 50,
    offset: int = 0,
) -> List[Project]:
    """
    Lista proyectos con sus órdenes, ordenados por creación descendente.

    Args:
        db: Sesión de base de datos.
        owner_id: Filtrar por propietario (None = todos).
        limit: Máximo de resultados a devolver.
        offset: Desplazamiento para paginación.
    """
    stmt = (
        select(Project)
        .options(selectinload(Project.orders))
        .order_by(desc(Project.created_at), desc(Project.id))
        .limit(limit)
        .offset(offset)
        .execution_options(populate_existing=True)
    )
    if owner_id is not None:
        stmt = stmt.where(Project.owner_id == owner_id)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def count_projects(db: AsyncSession, *, owner_id: Optional[int] = None) -> int:
    stmt = select(func.count(Project.id))
    if owner_id is not None:
        stmt = stmt.where(Project.owner_id == owner_id)
    result = await db.execute(stmt)
    return int(result.scalar_one())


__all__ = ["get_project_by_id", "list_projects", "count_projects"]

# Fin del archivo ordertrack/modules/projects/repositories/project_repository.py
