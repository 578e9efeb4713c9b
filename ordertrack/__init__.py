# -*- coding: utf-8 -*-
"""
ordertrack/__init__.py

Backend de seguimiento de órdenes para freelancers (OrderTrack).

Autor: OrderTrack
Fecha: 2026-03-02
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
