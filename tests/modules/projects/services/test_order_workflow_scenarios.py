# -*- coding: utf-8 -*-
"""
tests/modules/projects/services/test_order_workflow_scenarios.py

Flujos completos freelancer → cliente sobre los servicios reales:
alta, subida de archivo, aprobación, bloqueo de comentarios y rotación
de token.

Autor: OrderTrack
Fecha: 2026-03-07
"""

import pytest

from ordertrack.modules.projects.enums import OrderStatus
from ordertrack.modules.projects.facades.errors import ClientLinkNotFound, CommentNotAllowed, NotFound


@pytest.mark.asyncio
async def test_full_order_workflow_until_comment_is_blocked(commands, portal, project, blob_store):
    order = await commands.add_order(project.id, title="Logo v1")
    assert order.status == OrderStatus.PENDING
    assert order.file_path is None

    order = await commands.upload_file(order.id, filename="logo.png", data=b"PNG...", project_id=project.id)
    assert order.file_path.startswith("/uploads/")
    assert order.file_path.endswith("-logo.png")
    assert await blob_store.exists(order.file_path)

    approved = await portal.approve_order(project.access_token, order.id)
    assert approved.status == OrderStatus.APPROVED

    with pytest.raises(CommentNotAllowed):
        await portal.submit_comment(project.access_token, order.id, "Un cambio más")


@pytest.mark.asyncio
async def test_regenerated_token_invalidates_previous_link(commands, portal, project):
    t1 = project.access_token
    t2 = await commands.regenerate_token(project.id)

    assert t2 != t1

    with pytest.raises(NotFound):
        await portal.view_project(t1)

    view = await portal.view_project(t2)
    assert view.id == project.id


@pytest.mark.asyncio
async def test_created_project_has_issued_token_of_min_entropy(project):
    # 16 bytes → 32 caracteres hex
    assert project.access_token is not None
    assert len(project.access_token) >= 32
    int(project.access_token, 16)


@pytest.mark.asyncio
async def test_regenerated_token_has_min_entropy(commands, project):
    token = await commands.regenerate_token(project.id)
    # 24 bytes → 48 caracteres hex
    assert len(token) >= 48


@pytest.mark.asyncio
async def test_revoked_token_is_indistinguishable_from_unknown(commands, portal, project, order):
    token = project.access_token
    await commands.revoke_token(project.id)

    with pytest.raises(ClientLinkNotFound) as revoked:
        await portal.view_project(token)
    with pytest.raises(ClientLinkNotFound) as unknown:
        await portal.view_project("f" * 32)

    assert str(revoked.value) == str(unknown.value)
    assert revoked.value.error_code == unknown.value.error_code

    with pytest.raises(ClientLinkNotFound):
        await portal.approve_order(token, order.id)
    with pytest.raises(ClientLinkNotFound):
        await portal.submit_comment(token, order.id, "hola")


@pytest.mark.asyncio
async def test_revoke_is_idempotent(commands, project):
    await commands.revoke_token(project.id)
    revoked = await commands.revoke_token(project.id)
    assert revoked.access_token is None


@pytest.mark.asyncio
async def test_empty_token_never_matches_revoked_projects(commands, portal, project):
    await commands.revoke_token(project.id)
    with pytest.raises(ClientLinkNotFound):
        await portal.view_project("")

# Fin del archivo tests/modules/projects/services/test_order_workflow_scenarios.py
