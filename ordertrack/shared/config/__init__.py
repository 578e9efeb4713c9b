# -*- coding: utf-8 -*-
"""
ordertrack/shared/config/__init__.py

Punto único de acceso a la configuración:
    from ordertrack.shared.config import settings

`settings` es un proxy perezoso: resuelve get_settings() en cada acceso,
de modo que los tests pueden limpiar la caché (get_settings.cache_clear())
tras modificar variables de entorno.
"""

from __future__ import annotations

from typing import Any

from .config_loader import get_settings
from .settings_base import BaseAppSettings
from .logging_config import setup_logging


class _SettingsProxy:
    """Delegación de atributos hacia la instancia cacheada de settings."""

    def __getattr__(self, name: str) -> Any:
        return getattr(get_settings(), name)

    def __repr__(self) -> str:
        return f"<SettingsProxy {get_settings()!r}>"


settings = _SettingsProxy()

__all__ = ["settings", "get_settings", "BaseAppSettings", "setup_logging"]
