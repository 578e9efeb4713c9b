# -*- coding: utf-8 -*-
"""
ordertrack/shared/storage/__init__.py

Blob store de archivos subidos.
"""

from .blob_store import BlobStore, LocalBlobStore, generate_blob_name

__all__ = ["BlobStore", "LocalBlobStore", "generate_blob_name"]
