# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/routes/client.py

Portal de cliente: acceso por enlace con token, sin cuenta.

- GET  /client/{token}                              Vista del proyecto
- POST /client/{token}/orders/{order_id}/comment    Comentario / revisión
- POST /client/{token}/orders/{order_id}/approve    Aprobación

Un token inválido, revocado o regenerado responde 404 genérico.

Autor: OrderTrack
Fecha: 2026-03-06
"""

from fastapi import APIRouter, Depends

from ordertrack.modules.projects.services import ClientPortalService
from ordertrack.modules.projects.routes.deps import get_client_portal_service
from ordertrack.modules.projects.schemas import (
    ClientCommentIn,
    ClientProjectView,
    OrderRead,
    OrderResponse,
)

router = APIRouter(tags=["client"])


@router.get(
    "/{token}",
    response_model=ClientProjectView,
    summary="Vista del proyecto para el cliente",
)
async def client_view(
    token: str,
    svc: ClientPortalService = Depends(get_client_portal_service),
):
    return await svc.view_project(token)


@router.post(
    "/{token}/orders/{order_id}/comment",
    response_model=OrderResponse,
    summary="Comentar o pedir revisión de una orden",
)
async def client_comment(
    token: str,
    order_id: int,
    payload: ClientCommentIn,
    svc: ClientPortalService = Depends(get_client_portal_service),
):
    order = await svc.submit_comment(token, order_id, payload.comment)
    return OrderResponse(success=True, message="Comentario enviado", order=OrderRead.model_validate(order))


@router.post(
    "/{token}/orders/{order_id}/approve",
    response_model=OrderResponse,
    summary="Aprobar una orden",
)
async def client_approve(
    token: str,
    order_id: int,
    svc: ClientPortalService = Depends(get_client_portal_service),
):
    order = await svc.approve_order(token, order_id)
    return OrderResponse(success=True, message="Orden aprobada", order=OrderRead.model_validate(order))


# Fin del archivo ordertrack/modules/projects/routes/client.py
