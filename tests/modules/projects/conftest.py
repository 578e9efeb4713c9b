# -*- coding: utf-8 -*-
"""
tests/modules/projects/conftest.py

Fixtures del módulo Projects: servicios reales sobre SQLite en memoria,
blob store en memoria y broker propio del test.

Autor: OrderTrack
Fecha: 2026-03-07
"""

import pytest

from ordertrack.modules.projects.services import (
    ClientPortalService,
    ProjectsCommandService,
    ProjectsQueryService,
)

MAX_UPLOAD_BYTES = 1024


@pytest.fixture
def commands(db_session, blob_store, broker):
    return ProjectsCommandService(db_session, blob_store, broker, max_upload_bytes=MAX_UPLOAD_BYTES)


@pytest.fixture
def queries(db_session):
    return ProjectsQueryService(db_session)


@pytest.fixture
def portal(db_session, blob_store, broker):
    return ClientPortalService(db_session, blob_store, broker)


@pytest.fixture
async def project(commands, owner):
    return await commands.create_project(
        owner_id=owner.id,
        title="Identidad visual Café Aurora",
        client_name="Aurora Ríos",
        client_email="aurora@example.com",
    )


@pytest.fixture
async def order(commands, project):
    return await commands.add_order(project.id, title="Logo v1", notes="Versión inicial")

# Fin del archivo tests/modules/projects/conftest.py
