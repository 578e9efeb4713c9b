# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/routes/__init__.py

Routers del módulo Projects.
Compone subrouters de:
- projects_crud (CRUD)
- tokens (enlace de cliente)
- orders (órdenes y archivos)
- events (SSE)
- client (portal de cliente, prefijo /client)

Autor: OrderTrack
Fecha: 2026-03-06
"""
from fastapi import APIRouter

from .projects_crud import router as projects_crud_router
from .tokens import router as tokens_router
from .orders import router as orders_router
from .events import router as events_router
from .client import router as client_router

PROJECTS_PREFIX = "/projects"
CLIENT_PREFIX = "/client"


def get_projects_router() -> APIRouter:
    """
    Router principal del freelancer con el prefijo /projects.

    El prefijo se pasa en cada include_router: los subrouters usan la ruta
    vacía para la colección y FastAPI exige prefijo en ese caso.

    Orden de ensamblado:
      1. CRUD de proyectos
      2. Token de cliente
      3. Órdenes y archivos
      4. Eventos SSE
    """
    router = APIRouter(
        tags=["projects"],
        responses={404: {"description": "No encontrado"}},
    )
    router.include_router(projects_crud_router, prefix=PROJECTS_PREFIX)
    router.include_router(tokens_router, prefix=PROJECTS_PREFIX)
    router.include_router(orders_router, prefix=PROJECTS_PREFIX)
    router.include_router(events_router, prefix=PROJECTS_PREFIX)
    return router


def get_client_router() -> APIRouter:
    """Router del portal de cliente con el prefijo /client."""
    router = APIRouter(
        responses={404: {"description": "Enlace no encontrado"}},
    )
    router.include_router(client_router, prefix=CLIENT_PREFIX)
    return router


__all__ = ["PROJECTS_PREFIX", "CLIENT_PREFIX", "get_projects_router", "get_client_router"]

# Fin del archivo ordertrack/modules/projects/routes/__init__.py
