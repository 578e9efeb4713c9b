# -*- coding: utf-8 -*-
"""
ordertrack/routes/__init__.py

Ensamblador principal de ruteadores de la API de OrderTrack.

Responsabilidades:
- Incluir el router de health (/health).
- Montar los routers del módulo Projects (/projects y /client).

Autor: OrderTrack
Fecha: 2026-03-06
"""

from fastapi import APIRouter

from ordertrack.modules.projects.routes import get_client_router, get_projects_router

from .health_routes import router as health_router

router = APIRouter()

router.include_router(health_router)
router.include_router(get_projects_router())
router.include_router(get_client_router())

__all__ = ["router"]

# Fin del archivo ordertrack/routes/__init__.py
