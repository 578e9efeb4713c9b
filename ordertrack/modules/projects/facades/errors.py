# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/facades/errors.py

Excepciones de dominio para el módulo de proyectos y órdenes.
Cada excepción expone un `error_code` estable para la UI; el mapeo a
códigos HTTP vive en main.py.

Taxonomía:
- NotFound: proyecto, orden o enlace de cliente inexistente
- InvalidInput: campo requerido vacío, archivo ausente o demasiado grande
- InvalidOrderStatus: estado fuera del enum
- CommentNotAllowed: comentario sobre orden COMPLETED/APPROVED
- StorageFailure: error de I/O en base de datos o blob store

Autor: OrderTrack
Fecha: 2026-03-03
"""


class NotFound(Exception):
    """Base para recursos que no resuelven."""
    error_code = "NOT_FOUND"


class ProjectNotFound(NotFound):
    """Se lanza cuando no se encuentra un proyecto por ID."""
    error_code = "PROJECT_NOT_FOUND"

    def __init__(self, project_id):
        self.project_id = project_id
        super().__init__(f"Proyecto no encontrado: {project_id}")


class OrderNotFound(NotFound):
    """Se lanza cuando la orden no existe o no pertenece al proyecto indicado."""
    error_code = "ORDER_NOT_FOUND"

    def __init__(self, order_id):
        self.order_id = order_id
        super().__init__(f"Orden no encontrada: {order_id}")


class ClientLinkNotFound(NotFound):
    """
    Se lanza cuando un token de cliente no resuelve.

    El mensaje es idéntico para token erróneo, revocado o inexistente;
    nunca incluye el token recibido.
    """
    error_code = "CLIENT_LINK_NOT_FOUND"

    def __init__(self):
        super().__init__("Proyecto no encontrado")


class InvalidInput(Exception):
    """Base de errores de validación de entrada."""
    error_code = "VALIDATION_ERROR"


class RequiredFieldMissing(InvalidInput):
    """Se lanza cuando un campo obligatorio llega vacío."""
    error_code = "REQUIRED_FIELD_MISSING"

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"El campo '{field}' es obligatorio")


class MissingUpload(InvalidInput):
    """Se lanza cuando una subida no trae archivo."""
    error_code = "FILE_REQUIRED"

    def __init__(self):
        super().__init__("No se recibió ningún archivo")


class UploadTooLarge(InvalidInput):
    """Se lanza cuando el archivo excede el límite configurado."""
    error_code = "FILE_TOO_LARGE"

    def __init__(self, size_bytes: int, max_bytes: int):
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes
        super().__init__(f"Archivo de {size_bytes} bytes excede el máximo de {max_bytes}")


class InvalidOrderStatus(Exception):
    """Se lanza cuando el estado solicitado no es uno de los reconocidos."""
    error_code = "INVALID_STATUS"

    def __init__(self, value, message=None):
        self.value = value
        super().__init__(message or f"Estado de orden inválido: {value}")


class CommentNotAllowed(Exception):
    """Se lanza al comentar una orden COMPLETED o APPROVED."""
    error_code = "COMMENT_NOT_ALLOWED"

    def __init__(self, order_id, status):
        self.order_id = order_id
        self.status = status
        super().__init__("No se permiten comentarios en órdenes completadas o aprobadas")


class StorageFailure(Exception):
    """Se lanza ante errores de I/O de base de datos o blob store."""
    error_code = "STORAGE_FAILURE"

    def __init__(self, message: str = "Error de almacenamiento"):
        super().__init__(message)


__all__ = [
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
]

# Fin del archivo ordertrack/modules/projects/facades/errors.py
