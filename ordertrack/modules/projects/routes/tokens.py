# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/routes/tokens.py

Rutas del enlace de cliente: regenerar y revocar el token de acceso.

Autor: OrderTrack
Fecha: 2026-03-06
"""

from fastapi import APIRouter, Depends

from ordertrack.modules.projects.services import ProjectsCommandService
from ordertrack.modules.projects.routes.deps import get_projects_command_service
from ordertrack.modules.projects.schemas import TokenResponse

router = APIRouter(tags=["projects:token"])


@router.post(
    "/{project_id}/token/regenerate",
    response_model=TokenResponse,
    summary="Regenerar token de cliente",
)
async def regenerate_token(
    project_id: int,
    svc: ProjectsCommandService = Depends(get_projects_command_service),
):
    """
    Emite un token nuevo; el enlace anterior deja de funcionar.
    """
    token = await svc.regenerate_token(project_id)
    return TokenResponse(success=True, access_token=token)


@router.post(
    "/{project_id}/token/revoke",
    response_model=TokenResponse,
    summary="Revocar token de cliente",
)
async def revoke_token(
    project_id: int,
    svc: ProjectsCommandService = Depends(get_projects_command_service),
):
    await svc.revoke_token(project_id)
    return TokenResponse(success=True, access_token=None)


# Fin del archivo ordertrack/modules/projects/routes/tokens.py
