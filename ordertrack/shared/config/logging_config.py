# -*- coding: utf-8 -*-
"""
ordertrack/shared/config/logging_config.py

Configuración centralizada de logging para OrderTrack.
Soporta formato plain (desarrollo) y json (producción).

Autor: OrderTrack
Fecha: 2026-03-02
"""

import logging.config
from typing import Any, Dict, Literal


def build_logging_config(
    level: str = "INFO",
    fmt: str = "plain",
) -> Dict[str, Any]:
    """
    Construye el diccionario para logging.config.dictConfig.

    Args:
        level: Nivel de logging raíz
        fmt: Formato de salida (plain, pretty, json)

    Returns:
        Diccionario de configuración (versión 1)
    """
    # pretty == plain para efectos prácticos
    use_json = fmt == "json"

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json" if use_json else "default",
            "stream": "ext://sys.stdout",
        }
    }

    formatters = {
        "default": {
            "format": "%(levelname)s [%(name)s]: %(message)s"
        },
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
        },
    }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "handlers": handlers,
        "root": {
            "handlers": ["console"],
            "level": level.upper(),
        },
    }


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
    fmt: Literal["plain", "pretty", "json"] = "plain"
) -> None:
    """
    Configura el sistema de logging de la aplicación.

    Args:
        level: Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: Formato de salida (plain, pretty, json)

    Ejemplos:
        >>> setup_logging("INFO", "plain")
        >>> setup_logging("WARNING", "json")
    """
    logging.config.dictConfig(build_logging_config(level, fmt))


__all__ = ["build_logging_config", "setup_logging"]
# Fin del archivo ordertrack/shared/config/logging_config.py
