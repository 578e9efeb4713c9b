# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/facades/projects/tokens.py

Gestión del token de acceso de cliente (uno por proyecto).

- issue(): token nuevo al crear el proyecto
- regenerate(): reemplaza el token; el anterior deja de resolver al instante
- revoke(): deja el proyecto sin token (enlace de cliente deshabilitado)
- resolve(): única verificación de acceso de toda la superficie de cliente

Los tokens son hex de `secrets.token_hex`; nunca se loggean.

Autor: OrderTrack
Fecha: 2026-03-04
"""

from __future__ import annotations

import logging
import secrets

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ordertrack.shared.config.settings_base import MIN_ACCESS_TOKEN_BYTES, MIN_REGENERATED_TOKEN_BYTES
from ordertrack.modules.projects.facades.errors import ClientLinkNotFound
from ordertrack.modules.projects.metrics import record_token_lookup
from ordertrack.modules.projects.models import Project

logger = logging.getLogger(__name__)


class AccessTokenManager:
    """
    Emisión, rotación, revocación y resolución de tokens de cliente.

    Args:
        db: Sesión async (sólo la usa resolve)
        issue_bytes: Entropía de tokens emitidos al crear (>= 16)
        regenerate_bytes: Entropía de tokens regenerados (>= 24)
    """

    def __init__(
        self,
        db: AsyncSession,
        *,
        issue_bytes: int = MIN_ACCESS_TOKEN_BYTES,
        regenerate_bytes: int = MIN_REGENERATED_TOKEN_BYTES,
    ):
        self.db = db
        self.issue_bytes = max(issue_bytes, MIN_ACCESS_TOKEN_BYTES)
        self.regenerate_bytes = max(regenerate_bytes, MIN_REGENERATED_TOKEN_BYTES)

    def issue(self) -> str:
        return secrets.token_hex(self.issue_bytes)

    def regenerate(self, project: Project) -> str:
        """
        Asigna un token nuevo al proyecto (sin commit).

        Returns:
            El token nuevo
        """
        token = secrets.token_hex(self.regenerate_bytes)
        project.access_token = token
        logger.info("project_token_regenerated", extra={"project_id": project.id})
        return token

    def revoke(self, project: Project) -> None:
        project.access_token = None
        logger.info("project_token_revoked", extra={"project_id": project.id})

    async def resolve(self, token: str, *, with_orders: bool = False, for_update: bool = False) -> Project:
        """
        Busca el proyecto por coincidencia exacta de token.

        Args:
            token: Token recibido en la URL del cliente
            with_orders: Cargar órdenes (y propietario) en la misma consulta
            for_update: Bloquear la fila del proyecto

        Returns:
            Project

        Raises:
            ClientLinkNotFound: Token vacío, revocado, regenerado o inexistente
        """
        if not token:
            record_token_lookup("miss")
            raise ClientLinkNotFound()

        stmt = select(Project).where(Project.access_token == token)
        if with_orders:
            stmt = stmt.options(
                selectinload(Project.orders),
                selectinload(Project.owner),
            ).execution_options(populate_existing=True)
        if for_update:
            stmt = stmt.with_for_update()

        result = await self.db.execute(stmt)
        project = result.scalars().first()
        if project is None:
            record_token_lookup("miss")
            raise ClientLinkNotFound()

        record_token_lookup("hit")
        return project


__all__ = ["AccessTokenManager"]

# Fin del archivo ordertrack/modules/projects/facades/projects/tokens.py
