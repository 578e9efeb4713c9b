# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/facades/orders/__init__.py

Operaciones internas de órdenes:
- lifecycle.py: OrderLifecycle (estado, política de comentarios, archivo adjunto)
- crud.py: alta, edición, estado, upload, comentario, aprobación, baja
"""
