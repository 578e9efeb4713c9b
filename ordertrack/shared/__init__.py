# -*- coding: utf-8 -*-
"""
ordertrack/shared/__init__.py

Componentes compartidos: configuración, base de datos, almacenamiento,
eventos, middleware y utilidades.
"""
