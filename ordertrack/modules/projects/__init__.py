# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/__init__.py

Módulo de proyectos y órdenes de OrderTrack.

Este módulo gestiona:
- Proyectos del freelancer y su token de cliente
- Órdenes (entregables) con estado y archivo adjunto
- Comentario y aprobación del cliente vía enlace
- Baja en cascada y notificaciones por proyecto

Autor: OrderTrack
Fecha: 2026-03-02
"""

# Paquete liviano: no importes modelos aquí (para no disparar mapeos al importar enums).

__all__ = []
# Fin del archivo
