# -*- coding: utf-8 -*-
"""
ordertrack/shared/database/__init__.py

Reexporta la Base declarativa y las primitivas de sesión.
"""

from .base import Base, NAMING_CONVENTION
from .database import (
    engine,
    SessionLocal,
    build_engine,
    build_sessionmaker,
    get_db,
    session_scope,
    create_all,
    check_database_health,
)

__all__ = [
    "Base",
    "NAMING_CONVENTION",
    "engine",
    "SessionLocal",
    "build_engine",
    "build_sessionmaker",
    "get_db",
    "session_scope",
    "create_all",
    "check_database_health",
]
