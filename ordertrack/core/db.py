# -*- coding: utf-8 -*-
"""
ordertrack/core/db.py

Fachada para la capa de acceso a datos basada en SQLAlchemy async.
Envuelve `ordertrack.shared.database.database`:

- engine
- SessionLocal
- Base
- get_db
- session_scope()
- check_database_health()

Autor: OrderTrack
Fecha: 2026-03-02
"""

from ordertrack.shared.database.database import (
    engine,
    SessionLocal,
    Base,
    get_db,
    session_scope,
    create_all,
    check_database_health,
)


__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "get_db",
    "session_scope",
    "create_all",
    "check_database_health",
]

# Fin del archivo ordertrack/core/db.py
