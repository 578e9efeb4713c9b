# -*- coding: utf-8 -*-
"""
ordertrack/shared/database/database.py

SQLAlchemy async: asyncpg en producción, aiosqlite en pruebas.

Provee:
- build_engine(url) para construir motores según el dialecto
- engine (create_async_engine) y SessionLocal (async_sessionmaker)
- Dependencia FastAPI: get_db
- context manager: session_scope()
- check_database_health()

Autor: OrderTrack
Fecha: 2026-03-02
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from ordertrack.shared.config import settings
from ordertrack.shared.database.base import Base  # reutilizamos la Base única

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(eng: AsyncEngine) -> None:
    """SQLite no aplica FKs salvo que se active el PRAGMA por conexión."""

    @event.listens_for(eng.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(url: str, *, echo: bool = False) -> AsyncEngine:
    """
    Construye un AsyncEngine adecuado al dialecto de la URL.

    - sqlite: StaticPool (una sola conexión compartida, necesaria para :memory:)
      y foreign keys activadas.
    - postgres: pool con tamaño y overflow desde settings.

    Args:
        url: URL SQLAlchemy (p.ej. postgresql+asyncpg://... o sqlite+aiosqlite://...)
        echo: Loggear SQL emitido

    Returns:
        AsyncEngine configurado
    """
    if url.startswith("sqlite"):
        eng = create_async_engine(
            url,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
        _enable_sqlite_foreign_keys(eng)
        return eng

    return create_async_engine(
        url,
        echo=echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
    )


def build_sessionmaker(eng: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Fábrica de sesiones con los flags comunes del proyecto."""
    return async_sessionmaker(
        bind=eng,
        expire_on_commit=False,
        class_=AsyncSession,
        autoflush=False,
    )


# ── Engine y session factory de la aplicación
engine = build_engine(settings.database_url, echo=settings.db_echo_sql)
SessionLocal = build_sessionmaker(engine)

logger.debug("[DB] engine listo (dialecto=%s)", engine.dialect.name)


# ── Dependencia FastAPI
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        try:
            yield session
        finally:
            if session.in_transaction():
                await session.rollback()


# ── Context manager reutilizable en scripts/tests
@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        try:
            yield session
            # El commit/rollback lo decide quien use el scope
        finally:
            if session.in_transaction():
                await session.rollback()


async def create_all(eng: AsyncEngine = engine) -> None:
    """Crea las tablas registradas en Base.metadata (dev/tests)."""
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# ── Health check
async def check_database_health(timeout_s: float = 3.0, sql: str = "SELECT 1") -> bool:
    """
    Verifica conectividad a la base de datos.

    Args:
        timeout_s: Tiempo máximo de espera en segundos
        sql: Query SQL a ejecutar (default: "SELECT 1")

    Returns:
        True si la conexión es exitosa, False en caso contrario
    """
    try:
        async with asyncio.timeout(timeout_s):
            async with engine.connect() as conn:
                await conn.execute(text(sql))
        return True
    except Exception as e:
        logger.warning("database_health_check_failed: %s", e)
        return False


__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "build_engine",
    "build_sessionmaker",
    "get_db",
    "session_scope",
    "create_all",
    "check_database_health",
]
# Fin del archivo ordertrack/shared/database/database.py
