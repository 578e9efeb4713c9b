# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/schemas/order_schemas.py

Schemas Pydantic de órdenes (entregables).

Los campos de texto se validan en los facades (RequiredFieldMissing → 400),
no aquí, para que un título vacío no se convierta en 422.

Autor: OrderTrack
Fecha: 2026-03-05
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from ordertrack.shared.utils.base_models import UTF8SafeModel
from ordertrack.modules.projects.enums import OrderStatus


# ========== REQUEST SCHEMAS ==========

class OrderCreateIn(UTF8SafeModel):
    """Request para agregar una orden a un proyecto."""
    title: Optional[str] = Field(None, max_length=255, description="Título del entregable")
    notes: Optional[str] = Field(None, description="Notas opcionales")


class OrderUpdateIn(OrderCreateIn):
    """Request para editar título y notas de una orden."""


class OrderStatusIn(UTF8SafeModel):
    """
    Request para fijar el estado de una orden.

    Se recibe como str para responder InvalidOrderStatus (400) ante
    valores desconocidos.
    """
    status: str = Field(..., description="PENDING | IN_PROGRESS | COMPLETED | APPROVED")


# ========== RESPONSE SCHEMAS ==========

class OrderRead(UTF8SafeModel):
    """Representación completa de una orden."""
    id: int
    project_id: int
    title: str
    notes: Optional[str] = None
    status: OrderStatus
    file_path: Optional[str] = None
    client_comment: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class OrderSnapshot(UTF8SafeModel):
    """Estado mínimo de una orden para polling."""
    id: int
    status: OrderStatus
    file_path: Optional[str] = None
    client_comment: Optional[str] = None


class OrderResponse(UTF8SafeModel):
    """Respuesta estándar de operaciones sobre una orden."""
    success: bool = True
    message: Optional[str] = None
    order: OrderRead


class OrderSnapshotList(UTF8SafeModel):
    orders: List[OrderSnapshot]


__all__ = [
    "OrderCreateIn",
    "OrderUpdateIn",
    "OrderStatusIn",
    "OrderRead",
    "OrderSnapshot",
    "OrderResponse",
    "OrderSnapshotList",
]

# Fin del archivo ordertrack/modules/projects/schemas/order_schemas.py
