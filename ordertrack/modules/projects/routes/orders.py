# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/routes/orders.py

Rutas de órdenes de un proyecto (vista del freelancer):
- Listar (snapshot para polling)
- Agregar / editar
- Cambiar estado
- Subir o reemplazar archivo (multipart, campo `file`)
- Eliminar

Autor: OrderTrack
Fecha: 2026-03-06
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile, status

from ordertrack.modules.projects.services import ProjectsCommandService, ProjectsQueryService
from ordertrack.modules.projects.routes.deps import (
    get_projects_command_service,
    get_projects_query_service,
)
from ordertrack.modules.projects.schemas import (
    DeleteResponse,
    OrderCreateIn,
    OrderRead,
    OrderResponse,
    OrderSnapshot,
    OrderSnapshotList,
    OrderStatusIn,
    OrderUpdateIn,
)

router = APIRouter(tags=["projects:orders"])


@router.get(
    "/{project_id}/orders",
    response_model=OrderSnapshotList,
    summary="Snapshot de órdenes (polling)",
)
async def list_orders(
    project_id: int,
    q: ProjectsQueryService = Depends(get_projects_query_service),
):
    orders = await q.list_orders(project_id)
    return OrderSnapshotList(orders=[OrderSnapshot.model_validate(o) for o in orders])


@router.post(
    "/{project_id}/orders",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Agregar orden",
)
async def create_order(
    project_id: int,
    payload: OrderCreateIn,
    svc: ProjectsCommandService = Depends(get_projects_command_service),
):
    order = await svc.add_order(project_id, title=payload.title, notes=payload.notes)
    return OrderResponse(success=True, message="Orden creada", order=OrderRead.model_validate(order))


@router.put(
    "/{project_id}/orders/{order_id}",
    response_model=OrderResponse,
    summary="Editar orden",
)
async def update_order(
    project_id: int,
    order_id: int,
    payload: OrderUpdateIn,
    svc: ProjectsCommandService = Depends(get_projects_command_service),
):
    order = await svc.edit_order(order_id, title=payload.title, notes=payload.notes, project_id=project_id)
    return OrderResponse(success=True, message="Orden actualizada", order=OrderRead.model_validate(order))


@router.post(
    "/{project_id}/orders/{order_id}/status",
    response_model=OrderResponse,
    summary="Cambiar estado de la orden",
)
async def set_order_status(
    project_id: int,
    order_id: int,
    payload: OrderStatusIn,
    svc: ProjectsCommandService = Depends(get_projects_command_service),
):
    order = await svc.set_order_status(order_id, payload.status, project_id=project_id)
    return OrderResponse(success=True, message="Estado actualizado", order=OrderRead.model_validate(order))


@router.post(
    "/{project_id}/orders/{order_id}/upload",
    response_model=OrderResponse,
    summary="Subir o reemplazar el archivo de la orden",
)
async def upload_order_file(
    project_id: int,
    order_id: int,
    file: Optional[UploadFile] = File(None),
    svc: ProjectsCommandService = Depends(get_projects_command_service),
):
    """
    Adjunta el archivo a la orden. Si ya tenía uno, el anterior se borra
    del almacenamiento (best-effort).
    """
    filename: Optional[str] = None
    data: Optional[bytes] = None
    if file is not None:
        filename = file.filename
        # Un byte más que el límite basta para detectar el exceso
        data = await file.read(svc.orders.max_upload_bytes + 1)
        await file.close()

    order = await svc.upload_file(order_id, filename=filename, data=data, project_id=project_id)
    return OrderResponse(success=True, message="Archivo subido", order=OrderRead.model_validate(order))


@router.delete(
    "/{project_id}/orders/{order_id}",
    response_model=DeleteResponse,
    summary="Eliminar orden",
)
async def delete_order(
    project_id: int,
    order_id: int,
    svc: ProjectsCommandService = Depends(get_projects_command_service),
):
    await svc.delete_order(order_id, project_id=project_id)
    return DeleteResponse(success=True, message="Orden eliminada")


# Fin del archivo ordertrack/modules/projects/routes/orders.py
