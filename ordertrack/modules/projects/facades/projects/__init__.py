# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/facades/projects/__init__.py

Operaciones internas de proyectos:
- crud.py: create, update, hard_delete, regenerate/revoke token
- tokens.py: AccessTokenManager
"""
