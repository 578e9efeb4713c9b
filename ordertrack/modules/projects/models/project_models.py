# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/models/project_models.py

Modelo SQLAlchemy de proyecto: encargo de un freelancer para un cliente.

- access_token: credencial opaca del enlace de cliente; única cuando existe,
  NULL cuando fue revocada.
- Las órdenes se eliminan explícitamente antes que el proyecto; el
  ON DELETE CASCADE de la FK es sólo respaldo.

Autor: OrderTrack
Fecha: 2026-03-03
"""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ordertrack.shared.database.base import Base
from ordertrack.shared.utils.time_utils import now_utc


class Project(Base):
    """Proyecto con cero o más órdenes y un token de acceso opcional."""

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    client_name = Column(String(255), nullable=True)
    client_email = Column(String(255), nullable=True)
    deadline = Column(Date, nullable=True)

    access_token = Column(String(128), nullable=True, unique=True)

    owner_id = Column(
        Integer,
        ForeignKey("app_users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=now_utc,
        server_default=func.now(),
        index=True,
    )

    owner = relationship("AppUser", back_populates="projects")
    orders = relationship(
        "Order",
        back_populates="project",
        order_by="Order.id",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Project(id={self.id}, title='{self.title}')>"


__all__ = ["Project"]
# Fin del archivo ordertrack/modules/projects/models/project_models.py
