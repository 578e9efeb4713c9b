# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/enums/__init__.py

Enums del módulo de proyectos/órdenes.
"""

from .order_status_enum import OrderStatus, OrderStatusType, COMMENT_LOCKED_STATUSES, as_pg_enum
from .order_status_transitions import VALID_STATUS_TRANSITIONS, is_valid_status_transition

__all__ = [
    "OrderStatus",
    "OrderStatusType",
    "COMMENT_LOCKED_STATUSES",
    "as_pg_enum",
    "VALID_STATUS_TRANSITIONS",
    "is_valid_status_transition",
]
