# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/facades/project_facade.py

Facade público para operaciones CRUD y de token de proyectos.
Mantiene API estable delegando a módulos internos.

Autor: OrderTrack
Fecha: 2026-03-04
"""

from datetime import date
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ordertrack.shared.storage.blob_store import BlobStore
from ordertrack.modules.projects.models import Project

from .orders.lifecycle import OrderLifecycle
from .projects import crud
from .projects.tokens import AccessTokenManager


class ProjectFacade:
    """
    Facade público para gestión de proyectos.

    Reglas de dominio implementadas:
    1. Título obligatorio; opcionales vacíos → NULL
    2. Token de cliente emitido al crear, rotado o revocado bajo demanda
    3. Baja en cascada: archivos, órdenes y proyecto, en ese orden
    """

    UNSET = crud.UNSET

    def __init__(
        self,
        db: AsyncSession,
        blob_store: BlobStore,
        *,
        issue_bytes: int = 16,
        regenerate_bytes: int = 24,
    ):
        self.db = db
        self.lifecycle = OrderLifecycle(blob_store)
        self.tokens = AccessTokenManager(db, issue_bytes=issue_bytes, regenerate_bytes=regenerate_bytes)

    async def get(self, project_id: int, *, with_orders: bool = False) -> Project:
        return await crud.get(self.db, project_id, with_orders=with_orders)

    async def create(
        self,
        *,
        owner_id: int,
        title: Optional[str],
        description: Optional[str] = None,
        client_name: Optional[str] = None,
        client_email: Optional[str] = None,
        deadline: Optional[date] = None,
    ) -> Project:
        return await crud.create(
            self.db,
            self.tokens,
            owner_id=owner_id,
            title=title,
            description=description,
            client_name=client_name,
            client_email=client_email,
            deadline=deadline,
        )

    async def update(
        self,
        project_id: int,
        *,
        title: Optional[str],
        description: Optional[str] = None,
        client_name: Optional[str] = None,
        deadline: Optional[date] = None,
        client_email=crud.UNSET,
    ) -> Project:
        return await crud.update(
            self.db,
            project_id,
            title=title,
            description=description,
            client_name=client_name,
            deadline=deadline,
            client_email=client_email,
        )

    async def delete(self, project_id: int) -> List[int]:
        """Baja en cascada. Devuelve los IDs de órdenes eliminadas."""
        return await crud.hard_delete(self.db, self.lifecycle, project_id)

    async def regenerate_token(self, project_id: int) -> str:
        return await crud.regenerate_token(self.db, self.tokens, project_id)

    async def revoke_token(self, project_id: int) -> Project:
        return await crud.revoke_token(self.db, self.tokens, project_id)

    async def resolve_token(self, token: str, *, with_orders: bool = False) -> Project:
        return await self.tokens.resolve(token, with_orders=with_orders)


__all__ = ["ProjectFacade"]

# Fin del archivo ordertrack/modules/projects/facades/project_facade.py
