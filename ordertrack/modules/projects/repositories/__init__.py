# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/repositories/__init__.py

Repositorios de lectura del módulo de proyectos.
"""

from .project_repository import get_project_by_id, list_projects, count_projects
from .user_repository import get_user_by_email, get_or_create_owner

__all__ = [
    "get_project_by_id",
    "list_projects",
    "count_projects",
    "get_user_by_email",
    "get_or_create_owner",
]
