# -*- coding: utf-8 -*-
"""
ordertrack/modules/__init__.py

Módulos de dominio de OrderTrack.
"""
