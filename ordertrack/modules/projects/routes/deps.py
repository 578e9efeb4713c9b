# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/routes/deps.py

Dependencias inyectables para los servicios reales de Projects.
Tests pueden overridear estas dependencias (blob store en memoria,
broker propio, sesión sobre SQLite).

Autor: OrderTrack
Fecha: 2026-03-06
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ordertrack.core.settings import get_settings
from ordertrack.shared.database.database import get_db
from ordertrack.shared.events import OrderEventBroker
from ordertrack.shared.storage import BlobStore, LocalBlobStore
from ordertrack.modules.projects.models import AppUser
from ordertrack.modules.projects.repositories import get_or_create_owner
from ordertrack.modules.projects.services import (
    ClientPortalService,
    ProjectsCommandService,
    ProjectsQueryService,
)


@lru_cache(maxsize=1)
def get_blob_store() -> BlobStore:
    """Blob store local bajo UPLOAD_DIR, servido en UPLOAD_URL_PREFIX."""
    settings = get_settings()
    return LocalBlobStore(settings.upload_dir, url_prefix=settings.upload_url_prefix)


@lru_cache(maxsize=1)
def get_order_event_broker() -> OrderEventBroker:
    """Broker único del proceso (los suscriptores SSE viven en memoria)."""
    return OrderEventBroker(queue_size=get_settings().sse_queue_size)


async def get_current_owner(db: AsyncSession = Depends(get_db)) -> AppUser:
    """
    Propietario de los proyectos creados vía HTTP.

    Sin autenticación, se usa el usuario configurado en DEFAULT_OWNER_EMAIL.
    """
    settings = get_settings()
    return await get_or_create_owner(
        db,
        email=settings.default_owner_email,
        name=settings.default_owner_name,
    )


async def get_projects_command_service(
    db: AsyncSession = Depends(get_db),
    blob_store: BlobStore = Depends(get_blob_store),
    broker: OrderEventBroker = Depends(get_order_event_broker),
) -> ProjectsCommandService:
    """Devuelve el servicio real para comandos de Projects."""
    settings = get_settings()
    return ProjectsCommandService(
        db,
        blob_store,
        broker,
        max_upload_bytes=settings.upload_max_bytes,
        issue_token_bytes=settings.access_token_bytes,
        regenerate_token_bytes=settings.regenerated_token_bytes,
    )


async def get_projects_query_service(
    db: AsyncSession = Depends(get_db),
) -> ProjectsQueryService:
    """Devuelve el servicio real para consultas de Projects."""
    return ProjectsQueryService(db)


async def get_client_portal_service(
    db: AsyncSession = Depends(get_db),
    blob_store: BlobStore = Depends(get_blob_store),
    broker: OrderEventBroker = Depends(get_order_event_broker),
) -> ClientPortalService:
    return ClientPortalService(db, blob_store, broker)


__all__ = [
    "get_blob_store",
    "get_order_event_broker",
    "get_current_owner",
    "get_projects_command_service",
    "get_projects_query_service",
    "get_client_portal_service",
]

# Fin del archivo ordertrack/modules/projects/routes/deps.py
