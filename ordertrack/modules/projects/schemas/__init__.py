# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/schemas/__init__.py

Schemas Pydantic del módulo de proyectos.
"""

from .order_schemas import (
    OrderCreateIn,
    OrderUpdateIn,
    OrderStatusIn,
    OrderRead,
    OrderSnapshot,
    OrderResponse,
    OrderSnapshotList,
)
from .project_schemas import (
    ProjectCreateIn,
    ProjectUpdateIn,
    ProjectRead,
    ProjectDetail,
    ProjectResponse,
    ProjectListResponse,
    TokenResponse,
    DeleteResponse,
)
from .client_schemas import ClientCommentIn, ClientProjectView

__all__ = [
    "OrderCreateIn",
    "OrderUpdateIn",
    "OrderStatusIn",
    "OrderRead",
    "OrderSnapshot",
    "OrderResponse",
    "OrderSnapshotList",
    "ProjectCreateIn",
    "ProjectUpdateIn",
    "ProjectRead",
    "ProjectDetail",
    "ProjectResponse",
    "ProjectListResponse",
    "TokenResponse",
    "DeleteResponse",
    "ClientCommentIn",
    "ClientProjectView",
]
