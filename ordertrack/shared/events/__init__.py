# -*- coding: utf-8 -*-
"""
ordertrack/shared/events/__init__.py

Canal de notificaciones en tiempo real (pub/sub por proyecto).
"""

from .order_events import OrderEventBroker, OrderEvent

__all__ = ["OrderEventBroker", "OrderEvent"]
