# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/enums/order_status_transitions.py

Mapa de transiciones válidas para OrderStatus.

Regla vigente: el freelancer puede fijar cualquier estado desde cualquier
otro (incluido volver de APPROVED a IN_PROGRESS para retrabajo). El mapa
existe para que una política más estricta sea un cambio de datos y no de
código.

Autor: OrderTrack
Fecha: 2026-03-03
"""

from typing import Dict, FrozenSet

from .order_status_enum import OrderStatus


_ALL = frozenset(OrderStatus)

# Mapa: estado_origen → {estados_destino_permitidos}
VALID_STATUS_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.PENDING: _ALL,
    OrderStatus.IN_PROGRESS: _ALL,
    OrderStatus.COMPLETED: _ALL,
    OrderStatus.APPROVED: _ALL,
}


def is_valid_status_transition(from_status: OrderStatus, to_status: OrderStatus) -> bool:
    """
    Valida si una transición de estado es permitida.

    Args:
        from_status: Estado actual.
        to_status: Estado destino.

    Returns:
        True si la transición es válida, False en caso contrario.
    """
    return to_status in VALID_STATUS_TRANSITIONS.get(from_status, frozenset())


__all__ = ["VALID_STATUS_TRANSITIONS", "is_valid_status_transition"]
# Fin del archivo ordertrack/modules/projects/enums/order_status_transitions.py
