# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/models/user_models.py

Modelo SQLAlchemy del freelancer propietario de proyectos.

Autor: OrderTrack
Fecha: 2026-03-03
"""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ordertrack.shared.database.base import Base
from ordertrack.shared.utils.time_utils import now_utc


class AppUser(Base):
    """Usuario propietario (freelancer). Los clientes no tienen cuenta."""

    __tablename__ = "app_users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    name = Column(String(255), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=now_utc,
        server_default=func.now(),
    )

    projects = relationship("Project", back_populates="owner", passive_deletes=True)

    def __repr__(self) -> str:
        return f"<AppUser(id={self.id}, email='{self.email}')>"


__all__ = ["AppUser"]
# Fin del archivo ordertrack/modules/projects/models/user_models.py
