# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/models/order_models.py

Modelo SQLAlchemy de orden (entregable) de un proyecto.

- status: OrderStatus (ENUM order_status_enum en PostgreSQL)
- file_path: ruta pública del único archivo adjunto vigente (/uploads/...)
- client_comment: último comentario del cliente (un solo slot, se sobrescribe)

Autor: OrderTrack
Fecha: 2026-03-03
"""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text, event
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ordertrack.shared.database.base import Base
from ordertrack.modules.projects.enums.order_status_enum import OrderStatus, as_pg_enum, create_pg_enum_type
from ordertrack.shared.utils.time_utils import now_utc


class Order(Base):
    """Entregable dentro de un proyecto."""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)

    project_id = Column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title = Column(String(255), nullable=False)
    notes = Column(Text, nullable=True)

    status = Column(
        as_pg_enum(),
        nullable=False,
        default=OrderStatus.PENDING,
        server_default=OrderStatus.PENDING.value,
    )

    file_path = Column(String(512), nullable=True, unique=True)
    client_comment = Column(Text, nullable=True)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=now_utc,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=now_utc,
        onupdate=now_utc,
        server_default=func.now(),
    )

    project = relationship("Project", back_populates="orders")

    __table_args__ = (
        Index("idx_orders_project_status", project_id, status),
    )

    def __repr__(self) -> str:
        return f"<Order(id={self.id}, project_id={self.project_id}, status={self.status})>"


event.listen(Order.__table__, "before_create", create_pg_enum_type)


__all__ = ["Order"]
# Fin del archivo ordertrack/modules/projects/models/order_models.py
