# -*- coding: utf-8 -*-
"""
ordertrack/routes/health_routes.py

Endpoint básico de health check del backend de OrderTrack.

Autor: OrderTrack
Fecha: 2026-03-06
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from ordertrack import __version__
from ordertrack.core.settings import get_settings
from ordertrack.core.db import check_database_health

router = APIRouter()


@router.get(
    "/health",
    summary="Health check del backend",
    description="Estado básico del backend, con verificación simple de conectividad a la base de datos.",
)
async def health_check() -> dict:
    settings = get_settings()

    db_ok = await check_database_health(timeout_s=2.0)

    return {
        "status": "ok" if db_ok else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.python_env,
        "database": {
            "reachable": db_ok,
        },
        "service": {
            "name": settings.app_name,
            "version": __version__,
        },
    }

# Fin del archivo ordertrack/routes/health_routes.py
