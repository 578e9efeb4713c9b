# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/facades/__init__.py

Re-exporta facades del módulo projects para facilitar imports.
Mantiene API pública estable mientras organiza código interno por responsabilidad.

Autor: OrderTrack
Fecha: 2026-03-04
"""

from .errors import (
    NotFound,
    ProjectNotFound,
    OrderNotFound,
    ClientLinkNotFound,
    InvalidInput,
    RequiredFieldMissing,
    MissingUpload,
    UploadTooLarge,
    InvalidOrderStatus,
    CommentNotAllowed,
    StorageFailure,
)
from .orders.lifecycle import OrderLifecycle, can_accept_comment
from .projects.tokens import AccessTokenManager
from .project_facade import ProjectFacade
from .order_facade import OrderFacade

__all__ = [
    # Errors
    "NotFound",
    "ProjectNotFound",
    "OrderNotFound",
    "ClientLinkNotFound",
    "InvalidInput",
    "RequiredFieldMissing",
    "MissingUpload",
    "UploadTooLarge",
    "InvalidOrderStatus",
    "CommentNotAllowed",
    "StorageFailure",

    # Motor y tokens
    "OrderLifecycle",
    "can_accept_comment",
    "AccessTokenManager",

    # Facades
    "ProjectFacade",
    "OrderFacade",
]

# Fin del archivo ordertrack/modules/projects/facades/__init__.py
