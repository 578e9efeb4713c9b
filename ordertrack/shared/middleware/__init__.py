# -*- coding: utf-8 -*-
"""
ordertrack/shared/middleware/__init__.py

Middlewares ASGI compartidos.
"""

from .exception_handler import JSONExceptionMiddleware, get_request_id

__all__ = ["JSONExceptionMiddleware", "get_request_id"]
