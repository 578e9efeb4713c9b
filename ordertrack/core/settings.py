# -*- coding: utf-8 -*-
"""
ordertrack/core/settings.py

Fachada de configuración para OrderTrack.
Reexpone la carga de settings basada en Pydantic v2 definida en
`ordertrack.shared.config`.

Autor: OrderTrack
Fecha: 2026-03-02
"""

from typing import cast

from ordertrack.shared.config.config_loader import get_settings as _get_settings
from ordertrack.shared.config.settings_base import BaseAppSettings


def get_settings() -> BaseAppSettings:
    """
    Devuelve la configuración global de la aplicación.

    Returns:
        BaseAppSettings: instancia de configuración (según PYTHON_ENV).
    """
    return cast(BaseAppSettings, _get_settings())

# Fin del archivo ordertrack/core/settings.py
