# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/facades/base.py

Utilidades base compartidas por todos los facades de proyectos.
Helpers de timestamps, normalización de texto y operaciones transaccionales.

Autor: OrderTrack
Fecha: 2026-03-03
"""

import logging
from typing import Awaitable, Callable, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ordertrack.shared.utils.time_utils import now_utc
from ordertrack.modules.projects.facades.errors import RequiredFieldMissing, StorageFailure

T = TypeVar("T")

logger = logging.getLogger(__name__)


async def commit_or_raise(db: AsyncSession, work: Callable[[], Awaitable[T]]) -> T:
    """
    Ejecuta work() dentro de un contexto transaccional.

    Aplica commit si work() tiene éxito.
    Aplica rollback y re-lanza si work() falla; los errores de SQLAlchemy
    se re-lanzan como StorageFailure.

    Args:
        db: Sesión SQLAlchemy async
        work: Corrutina a ejecutar dentro de la transacción

    Returns:
        Resultado de work()

    Raises:
        StorageFailure: Si la base de datos falla
        Cualquier otra excepción lanzada por work()
    """
    try:
        result = await work()
        await db.commit()
        return result
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("db_transaction_failed: %s", e)
        raise StorageFailure("Error de base de datos") from e
    except Exception:
        await db.rollback()
        raise


def require_text(value: Optional[str], field: str) -> str:
    """
    Devuelve `value` sin espacios extremos.

    Raises:
        RequiredFieldMissing: Si el valor es None o queda vacío
    """
    cleaned = (value or "").strip()
    if not cleaned:
        raise RequiredFieldMissing(field)
    return cleaned


def optional_text(value: Optional[str]) -> Optional[str]:
    """Cadena vacía o sólo espacios → None."""
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


__all__ = [
    "now_utc",
    "commit_or_raise",
    "require_text",
    "optional_text",
]
# Fin del archivo ordertrack/modules/projects/facades/base.py
