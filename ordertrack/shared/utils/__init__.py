# -*- coding: utf-8 -*-
"""
ordertrack/shared/utils/__init__.py

Utilidades compartidas (modelos base Pydantic, nombres de archivo, errores de storage).
"""

from .base_models import UTF8SafeModel
from .filename_sanitization import sanitize_filename_for_storage, DEFAULT_FILENAME
from .storage_errors import BlobStorageError
from .time_utils import now_utc

__all__ = [
    "UTF8SafeModel",
    "sanitize_filename_for_storage",
    "DEFAULT_FILENAME",
    "BlobStorageError",
    "now_utc",
]
