# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/routes/projects_crud.py

Rutas CRUD de Proyectos (vista del freelancer):
- Listar / crear
- Obtener por ID (con órdenes)
- Editar
- Eliminar (hard delete en cascada)

Los errores de dominio (ProjectNotFound, RequiredFieldMissing, ...) se
traducen a HTTP en los exception handlers de la app.

Autor: OrderTrack
Fecha: 2026-03-06
"""

from fastapi import APIRouter, Depends, Query, status

from ordertrack.modules.projects.models import AppUser
from ordertrack.modules.projects.services import ProjectsCommandService, ProjectsQueryService
from ordertrack.modules.projects.routes.deps import (
    get_current_owner,
    get_projects_command_service,
    get_projects_query_service,
)
from ordertrack.modules.projects.schemas import (
    DeleteResponse,
    ProjectCreateIn,
    ProjectDetail,
    ProjectListResponse,
    ProjectRead,
    ProjectResponse,
    ProjectUpdateIn,
)

router = APIRouter(tags=["projects:crud"])


@router.get(
    "",
    response_model=ProjectListResponse,
    summary="Listar proyectos del propietario",
)
async def list_projects(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    owner: AppUser = Depends(get_current_owner),
    q: ProjectsQueryService = Depends(get_projects_query_service),
):
    projects = await q.list_projects(owner_id=owner.id, limit=limit, offset=offset)
    total = await q.count_projects(owner_id=owner.id)
    return ProjectListResponse(
        projects=[ProjectDetail.model_validate(p) for p in projects],
        total=total,
    )


@router.post(
    "",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Crear proyecto",
)
async def create_project(
    payload: ProjectCreateIn,
    owner: AppUser = Depends(get_current_owner),
    svc: ProjectsCommandService = Depends(get_projects_command_service),
):
    """
    Crea un proyecto nuevo con su token de cliente.
    """
    project = await svc.create_project(
        owner_id=owner.id,
        title=payload.title,
        description=payload.description,
        client_name=payload.client_name,
        client_email=payload.client_email,
        deadline=payload.deadline,
    )
    return ProjectResponse(success=True, message="Proyecto creado", project=ProjectRead.model_validate(project))


@router.get(
    "/{project_id}",
    response_model=ProjectDetail,
    summary="Obtener proyecto por ID",
)
async def get_project(
    project_id: int,
    q: ProjectsQueryService = Depends(get_projects_query_service),
):
    project = await q.get_project(project_id)
    return ProjectDetail.model_validate(project)


@router.put(
    "/{project_id}",
    response_model=ProjectResponse,
    summary="Editar proyecto",
)
async def update_project(
    project_id: int,
    payload: ProjectUpdateIn,
    svc: ProjectsCommandService = Depends(get_projects_command_service),
):
    """
    Reemplaza los campos editables. client_email sólo se toca si viene
    en el payload.
    """
    extra = {}
    if "client_email" in payload.model_fields_set:
        extra["client_email"] = payload.client_email

    project = await svc.update_project(
        project_id,
        title=payload.title,
        description=payload.description,
        client_name=payload.client_name,
        deadline=payload.deadline,
        **extra,
    )
    return ProjectResponse(success=True, message="Proyecto actualizado", project=ProjectRead.model_validate(project))


@router.delete(
    "/{project_id}",
    response_model=DeleteResponse,
    summary="Eliminar proyecto (hard delete)",
)
async def delete_project(
    project_id: int,
    svc: ProjectsCommandService = Depends(get_projects_command_service),
):
    """
    Elimina el proyecto, sus órdenes y los archivos asociados.
    """
    order_ids = await svc.delete_project(project_id)
    return DeleteResponse(success=True, message=f"Proyecto eliminado ({len(order_ids)} órdenes)")


# Fin del archivo ordertrack/modules/projects/routes/projects_crud.py
