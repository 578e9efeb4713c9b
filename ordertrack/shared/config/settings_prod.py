# -*- coding: utf-8 -*-
"""
ordertrack/shared/config/settings_prod.py

Overrides para entorno de PRODUCCIÓN usando Pydantic v2.
Forza lectura solo desde variables de entorno / secret stores,
activa logging estable (INFO en JSON) y valida defaults inseguros.

Autor: OrderTrack
Fecha: 2026-03-02
"""

from typing import Literal

from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class ProdSettings(BaseAppSettings):
    # --- Identidad de entorno ---
    python_env: Literal["development", "test", "production"] = "production"

    # --- Logging en prod: nivel estable y formato estructurado ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "pretty", "plain"] = "json"

    model_config = SettingsConfigDict(
        env_file=None,  # No leemos .env en producción
        extra="ignore",
    )

    def _security_checks(self) -> None:
        """
        Valida que producción no arranque con valores de desarrollo.

        Raises:
            ValueError: Si la contraseña de BD es la de fábrica o CORS es comodín.
        """
        if not self.db_url and self.db_password.get_secret_value() == "postgres":
            raise ValueError("DB_PASSWORD por defecto no permitido en producción")
        if "*" in self.get_cors_origins():
            raise ValueError("CORS_ORIGINS='*' no permitido en producción")


__all__ = ["ProdSettings"]
# Fin del archivo ordertrack/shared/config/settings_prod.py
