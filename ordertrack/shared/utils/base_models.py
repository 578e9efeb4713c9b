# -*- coding: utf-8 -*-
"""
ordertrack/shared/utils/base_models.py

Modelo base personalizado para Pydantic en el backend de OrderTrack.

Incluye:
- Modo de atributos activado para compatibilidad con ORM (`from_attributes = True`)
- populate_by_name para aliases
- Eliminación automática de espacios en campos de texto

Este modelo debe usarse como base para todos los esquemas Pydantic de la API.

Autor: OrderTrack
Fecha: 2026-03-02
"""

from pydantic import BaseModel, ConfigDict


class UTF8SafeModel(BaseModel):
    """Modelo base con configuración común para requests y responses JSON."""
    model_config = ConfigDict(
        from_attributes=True,             # reemplaza a orm_mode=True
        populate_by_name=True,            # para que funcionen los aliases
        str_strip_whitespace=True,        # elimina espacios de strings
    )

__all__ = ["UTF8SafeModel"]
# Fin del archivo ordertrack/shared/utils/base_models.py
