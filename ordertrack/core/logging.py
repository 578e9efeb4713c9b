# -*- coding: utf-8 -*-
"""
ordertrack/core/logging.py

Fachada del módulo `ordertrack.shared.config.logging_config` para
mantener un punto de entrada único bajo `ordertrack.core`.

Autor: OrderTrack
Fecha: 2026-03-02
"""

from typing import Literal

from ordertrack.shared.config.logging_config import setup_logging as _setup_logging


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
    fmt: Literal["plain", "pretty", "json"] = "plain",
) -> None:
    """
    Configura el sistema de logging de la aplicación.

    Args:
        level: Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        fmt: Formato de salida (plain, pretty, json).
    """
    _setup_logging(level=level, fmt=fmt)

# Fin del archivo ordertrack/core/logging.py
