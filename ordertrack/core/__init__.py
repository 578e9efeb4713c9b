# -*- coding: utf-8 -*-
"""
ordertrack/core/__init__.py

Fachada unificada para componentes centrales del backend:
- Configuración (settings)
- Logging
- Motor de base de datos y sesiones

Autor: OrderTrack
Fecha: 2026-03-02
"""

from .settings import get_settings
from .logging import setup_logging
from .db import (
    engine,
    SessionLocal,
    Base,
    get_db,
    session_scope,
    create_all,
    check_database_health,
)

__all__ = [
    "get_settings",
    "setup_logging",
    "engine",
    "SessionLocal",
    "Base",
    "get_db",
    "session_scope",
    "create_all",
    "check_database_health",
]

# Fin del archivo ordertrack/core/__init__.py
