# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/repositories/user_repository.py

Repositorio de propietarios (AppUser).

get_or_create_owner existe porque la frontera HTTP no tiene autenticación:
el propietario se resuelve por email configurado. Sustituir por el usuario
autenticado cuando exista login.

Autor: OrderTrack
Fecha: 2026-03-05
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ordertrack.modules.projects.models import AppUser

logger = logging.getLogger(__name__)


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[AppUser]:
    result = await db.execute(select(AppUser).where(AppUser.email == email))
    return result.scalars().first()


async def get_or_create_owner(db: AsyncSession, *, email: str, name: Optional[str] = None) -> AppUser:
    """
    Devuelve el AppUser con `email`, creándolo si no existe.

    Tolera la carrera de dos requests creando el mismo usuario (unique email).
    """
    user = await get_user_by_email(db, email)
    if user:
        return user

    user = AppUser(email=email, name=name)
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        existing = await get_user_by_email(db, email)
        if existing is None:
            raise
        return existing

    logger.info("owner_created", extra={"owner_id": user.id})
    return user


__all__ = ["get_user_by_email", "get_or_create_owner"]

# Fin del archivo ordertrack/modules/projects/repositories/user_repository.py
