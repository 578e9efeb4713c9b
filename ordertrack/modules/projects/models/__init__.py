# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/models/__init__.py

Modelos ORM del módulo: AppUser, Project, Order.
Importarlos aquí registra las tablas en Base.metadata.
"""

from .user_models import AppUser
from .project_models import Project
from .order_models import Order

__all__ = ["AppUser", "Project", "Order"]
