# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/services/queries.py

Capa de aplicación (consultas) del módulo Projects.
Sólo lectura: listados, detalle y snapshot de órdenes para polling.
"""
from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ordertrack.modules.projects import repositories as repo
from ordertrack.modules.projects.facades.errors import ProjectNotFound
from ordertrack.modules.projects.facades.orders import crud as orders_crud
from ordertrack.modules.projects.models import Order, Project


class ProjectsQueryService:
    """Consultas: listar proyectos, detalle y órdenes."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_projects(self, *, owner_id: Optional[int] = None, limit: int = 50, offset: int = 0) -> List[Project]:
        return await repo.list_projects(self.db, owner_id=owner_id, limit=limit, offset=offset)

    async def count_projects(self, *, owner_id: Optional[int] = None) -> int:
        return await repo.count_projects(self.db, owner_id=owner_id)

    async def get_project(self, project_id: int) -> Project:
        """
        Proyecto con órdenes.

        Raises:
            ProjectNotFound: Si no existe
        """
        project = await repo.get_project_by_id(self.db, project_id, with_orders=True)
        if project is None:
            raise ProjectNotFound(project_id)
        return project

    async def list_orders(self, project_id: int) -> List[Order]:
        """
        Órdenes del proyecto (para polling).

        Raises:
            ProjectNotFound: Si el proyecto no existe
        """
        if await repo.get_project_by_id(self.db, project_id, with_orders=False) is None:
            raise ProjectNotFound(project_id)
        return await orders_crud.list_for_project(self.db, project_id)


__all__ = ["ProjectsQueryService"]

# Fin del archivo ordertrack/modules/projects/services/queries.py
