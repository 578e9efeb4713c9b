# -*- coding: utf-8 -*-
"""
ordertrack/shared/utils/storage_errors.py

Excepciones semánticas para operaciones del blob store.

Autor: OrderTrack
Fecha: 2026-03-02
"""

from __future__ import annotations

from typing import Optional


class BlobStorageError(Exception):
    """
    Error de I/O en el blob store (permisos, disco lleno, ruta inválida).

    NO usar para blobs inexistentes en delete(): eso devuelve False.

    Attributes:
        operation: Operación que falló (save, delete, exists)
        path: Ruta pública o nombre del blob afectado
    """

    def __init__(self, operation: str, path: str, message: Optional[str] = None) -> None:
        self.operation = operation
        self.path = path
        super().__init__(message or f"Storage {operation} failed: {path}")

    def to_dict(self) -> dict:
        """Serializa el error para logs estructurados."""
        return {
            "error": "storage_error",
            "operation": self.operation,
            "path": self.path,
            "message": str(self),
        }


__all__ = ["BlobStorageError"]

# Fin del archivo ordertrack/shared/utils/storage_errors.py
