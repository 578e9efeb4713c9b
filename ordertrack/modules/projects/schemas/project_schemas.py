# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/schemas/project_schemas.py

Schemas Pydantic para creación, edición y respuesta de proyectos
(vista del freelancer: incluye el token de acceso).

Autor: OrderTrack
Fecha: 2026-03-05
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import ConfigDict, EmailStr, Field, field_validator

from ordertrack.shared.utils.base_models import UTF8SafeModel
from ordertrack.modules.projects.schemas.order_schemas import OrderRead


def _blank_to_none(v):
    """Los formularios envían "" para campos opcionales no llenados."""
    if isinstance(v, str) and not v.strip():
        return None
    return v


# ========== REQUEST SCHEMAS ==========

class ProjectCreateIn(UTF8SafeModel):
    """
    Request para crear un nuevo proyecto.

    Requiere título; el resto es opcional. El token de cliente se genera
    en el servidor.
    """
    title: Optional[str] = Field(None, max_length=255, description="Título del proyecto")
    description: Optional[str] = Field(None, description="Descripción opcional")
    client_name: Optional[str] = Field(None, max_length=255)
    client_email: Optional[EmailStr] = None
    deadline: Optional[date] = None

    @field_validator("client_email", "deadline", mode="before")
    @classmethod
    def empty_as_none(cls, v):
        return _blank_to_none(v)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Identidad visual Café Aurora",
                "description": "Logo, paleta y tarjetas",
                "client_name": "Aurora Ríos",
                "client_email": "aurora@example.com",
                "deadline": "2026-05-30",
            }
        }
    )


class ProjectUpdateIn(UTF8SafeModel):
    """
    Request para editar un proyecto.

    description, client_name y deadline se reemplazan (ausente = limpiar);
    client_email sólo cambia si viene en el payload.
    """
    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    client_name: Optional[str] = Field(None, max_length=255)
    client_email: Optional[EmailStr] = None
    deadline: Optional[date] = None

    @field_validator("client_email", "deadline", mode="before")
    @classmethod
    def empty_as_none(cls, v):
        return _blank_to_none(v)


# ========== RESPONSE SCHEMAS ==========

class ProjectRead(UTF8SafeModel):
    """Proyecto sin órdenes."""
    id: int
    title: str
    description: Optional[str] = None
    client_name: Optional[str] = None
    client_email: Optional[str] = None
    deadline: Optional[date] = None
    access_token: Optional[str] = None
    owner_id: int
    created_at: Optional[datetime] = None


class ProjectDetail(ProjectRead):
    """Proyecto con sus órdenes."""
    orders: List[OrderRead] = Field(default_factory=list)


class ProjectResponse(UTF8SafeModel):
    """Respuesta estándar de create/update."""
    success: bool = True
    message: Optional[str] = None
    project: ProjectRead


class ProjectListResponse(UTF8SafeModel):
    projects: List[ProjectDetail]
    total: int


class TokenResponse(UTF8SafeModel):
    """Respuesta de regenerar/revocar token."""
    success: bool = True
    access_token: Optional[str] = None


class DeleteResponse(UTF8SafeModel):
    success: bool = True
    message: Optional[str] = None


__all__ = [
    "ProjectCreateIn",
    "ProjectUpdateIn",
    "ProjectRead",
    "ProjectDetail",
    "ProjectResponse",
    "ProjectListResponse",
    "TokenResponse",
    "DeleteResponse",
]

# Fin del archivo ordertrack/modules/projects/schemas/project_schemas.py
