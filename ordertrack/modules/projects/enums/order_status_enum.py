# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/enums/order_status_enum.py

Enum de estado de una orden (entregable) dentro de un proyecto.
Usado como tipo ENUM en PostgreSQL (order_status_enum).

Valores:
- PENDING: creada, sin trabajo iniciado
- IN_PROGRESS: el freelancer trabaja en ella
- COMPLETED: entregada por el freelancer
- APPROVED: aprobada por el cliente

Autor: OrderTrack
Fecha: 2026-03-03
"""

from enum import StrEnum
from typing import Any, Optional

from sqlalchemy import String, TypeDecorator
from sqlalchemy.dialects.postgresql import ENUM as PG_ENUM


class OrderStatus(StrEnum):
    """Estados de una orden. El valor persistido coincide con el nombre."""
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    APPROVED = "APPROVED"

    @classmethod
    def parse(cls, value: Any) -> Optional["OrderStatus"]:
        """
        Convierte un valor externo a OrderStatus.

        Acepta instancias del enum o cadenas exactas ("PENDING", ...).

        Returns:
            OrderStatus o None si el valor no es reconocido
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                return None
        return None


# Estados en los que el cliente ya no puede comentar
COMMENT_LOCKED_STATUSES = frozenset({OrderStatus.COMPLETED, OrderStatus.APPROVED})


class OrderStatusType(TypeDecorator):
    """
    TypeDecorator para mapear OrderStatus ↔ PostgreSQL order_status_enum.

    En dialectos distintos de PostgreSQL (SQLite en tests) se almacena como VARCHAR.
    """
    impl = String(32)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(
                PG_ENUM(*[s.value for s in OrderStatus], name="order_status_enum", create_type=False)
            )
        return dialect.type_descriptor(String(32))

    def process_bind_param(self, value, dialect):
        """Convierte Python enum a string para INSERT/UPDATE."""
        if value is None:
            return None
        if isinstance(value, OrderStatus):
            return value.value
        return str(value)

    def process_result_value(self, value, dialect):
        """Convierte string de DB a Python enum para SELECT."""
        if value is None:
            return None
        return OrderStatus(value)


def as_pg_enum() -> OrderStatusType:
    """Devuelve el tipo SQLAlchemy para columnas de estado de orden."""
    return OrderStatusType()


def create_pg_enum_type(target, connection, **kw) -> None:
    """
    Listener before_create: crea order_status_enum si falta (sólo PostgreSQL).
    En producción el tipo lo crea schema.sql.
    """
    if connection.dialect.name != "postgresql":
        return
    PG_ENUM(*[s.value for s in OrderStatus], name="order_status_enum").create(connection, checkfirst=True)


__all__ = [
    "OrderStatus",
    "OrderStatusType",
    "COMMENT_LOCKED_STATUSES",
    "as_pg_enum",
    "create_pg_enum_type",
]
# Fin del archivo ordertrack/modules/projects/enums/order_status_enum.py
