# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/schemas/client_schemas.py

Schemas de la vista de cliente (enlace con token).
Nunca exponen el access_token ni el owner_id.

Autor: OrderTrack
Fecha: 2026-03-05
"""

from datetime import date
from typing import List, Optional

from pydantic import Field

from ordertrack.shared.utils.base_models import UTF8SafeModel
from ordertrack.modules.projects.schemas.order_schemas import OrderRead


class ClientCommentIn(UTF8SafeModel):
    comment: Optional[str] = Field(None, description="Comentario o solicitud de revisión")


class ClientProjectView(UTF8SafeModel):
    """Proyecto tal como lo ve el cliente."""
    id: int
    title: str
    description: Optional[str] = None
    client_name: Optional[str] = None
    deadline: Optional[date] = None
    owner_name: Optional[str] = None
    orders: List[OrderRead] = Field(default_factory=list)


__all__ = ["ClientCommentIn", "ClientProjectView"]

# Fin del archivo ordertrack/modules/projects/schemas/client_schemas.py
