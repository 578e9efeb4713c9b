# -*- coding: utf-8 -*-
"""
tests/modules/projects/services/test_client_portal_service.py

Portal de cliente: vista sin token, política de comentarios y
aprobación idempotente.

Autor: OrderTrack
Fecha: 2026-03-07
"""

import pytest

from ordertrack.modules.projects.enums import OrderStatus
from ordertrack.modules.projects.facades.errors import (
    CommentNotAllowed,
    OrderNotFound,
    RequiredFieldMissing,
)


@pytest.mark.asyncio
async def test_view_project_lists_orders_and_hides_token(portal, project, order):
    view = await portal.view_project(project.access_token)

    assert view.title == project.title
    assert view.owner_name == "Ana Freelance"
    assert [o.id for o in view.orders] == [order.id]
    assert "access_token" not in view.model_dump()


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [OrderStatus.PENDING, OrderStatus.IN_PROGRESS])
async def test_comment_overwrites_previous_on_open_orders(commands, portal, project, order, status):
    await commands.set_order_status(order.id, status, project_id=project.id)

    await portal.submit_comment(project.access_token, order.id, "Más contraste")
    updated = await portal.submit_comment(project.access_token, order.id, "Mejor en azul")

    assert updated.client_comment == "Mejor en azul"


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [OrderStatus.COMPLETED, OrderStatus.APPROVED])
async def test_comment_rejected_on_locked_orders_keeps_previous(commands, portal, project, order, status):
    token, order_id = project.access_token, order.id
    await portal.submit_comment(token, order_id, "Primera revisión")
    await commands.set_order_status(order_id, status, project_id=project.id)

    with pytest.raises(CommentNotAllowed):
        await portal.submit_comment(token, order_id, "Otra revisión")

    view = await portal.view_project(token)
    assert view.orders[0].client_comment == "Primera revisión"


@pytest.mark.asyncio
async def test_blank_comment_is_rejected_and_keeps_previous(portal, project, order):
    token, order_id = project.access_token, order.id
    await portal.submit_comment(token, order_id, "Revisar tipografía")

    for blank in ("", "   ", None):
        with pytest.raises(RequiredFieldMissing):
            await portal.submit_comment(token, order_id, blank)

    view = await portal.view_project(token)
    assert view.orders[0].client_comment == "Revisar tipografía"


@pytest.mark.asyncio
async def test_approve_is_idempotent(portal, project, order):
    first = await portal.approve_order(project.access_token, order.id)
    second = await portal.approve_order(project.access_token, order.id)

    assert first.status == OrderStatus.APPROVED
    assert second.status == OrderStatus.APPROVED


@pytest.mark.asyncio
async def test_order_from_another_project_is_not_found(commands, portal, owner, project):
    token = project.access_token
    other = await commands.create_project(owner_id=owner.id, title="Otro proyecto")
    foreign = await commands.add_order(other.id, title="Ajena")
    foreign_id = foreign.id

    with pytest.raises(OrderNotFound):
        await portal.approve_order(token, foreign_id)
    with pytest.raises(OrderNotFound):
        await portal.submit_comment(token, foreign_id, "hola")


@pytest.mark.asyncio
async def test_client_actions_publish_events(portal, broker, project, order):
    async with broker.subscription(project.id) as queue:
        await portal.submit_comment(project.access_token, order.id, "Revisar tipografía")
        await portal.approve_order(project.access_token, order.id)

        commented = queue.get_nowait()
        approved = queue.get_nowait()

    assert commented["type"] == "order.commented"
    assert commented["order"]["client_comment"] == "Revisar tipografía"
    assert approved["type"] == "order.approved"
    assert approved["order"]["status"] == "APPROVED"

# Fin del archivo tests/modules/projects/services/test_client_portal_service.py
