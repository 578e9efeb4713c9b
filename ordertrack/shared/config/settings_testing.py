# -*- coding: utf-8 -*-
"""
ordertrack/shared/config/settings_testing.py

Overrides para entorno de PRUEBAS (test) usando Pydantic v2.
Busca ser determinista y seguro: logging moderado, base de datos SQLite
en memoria y un directorio temporal para los archivos subidos.

Autor: OrderTrack
Fecha: 2026-03-02
"""

import tempfile
from pathlib import Path
from typing import Optional

from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class EnvTestingSettings(BaseAppSettings):
    # --- Identidad de entorno ---
    python_env: str = "test"

    # --- Logging en test: menos ruido ---
    log_level: str = "WARNING"
    log_format: str = "pretty"

    # --- Base de datos: SQLite en memoria (aiosqlite) ---
    db_url: Optional[str] = "sqlite+aiosqlite:///:memory:"

    # --- Uploads en directorio temporal ---
    upload_dir: str = str(Path(tempfile.gettempdir()) / "ordertrack-test-uploads")

    # --- Heartbeat corto para no bloquear tests de SSE ---
    sse_heartbeat_seconds: float = 0.05

    model_config = SettingsConfigDict(
        env_file=".env.test",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["EnvTestingSettings"]
# Fin del archivo ordertrack/shared/config/settings_testing.py
