# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/services/__init__.py

Servicios de aplicación del módulo Projects (orquestador).
"""

from .commands import ProjectsCommandService
from .queries import ProjectsQueryService
from .client import ClientPortalService

__all__ = ["ProjectsCommandService", "ProjectsQueryService", "ClientPortalService"]
