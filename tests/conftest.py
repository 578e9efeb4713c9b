# -*- coding: utf-8 -*-
"""
tests/conftest.py

Config global de tests para OrderTrack.

- PYTHON_ENV=test antes de cualquier import de la app (settings cacheados)
- Engine SQLite en memoria (aiosqlite + StaticPool) por test, con el
  esquema completo creado vía Base.metadata
- Blob store en memoria con fallos inyectables
- App FastAPI con dependencias overrideadas y cliente httpx async

Autor: OrderTrack
Fecha: 2026-03-07
"""

import os

os.environ["PYTHON_ENV"] = "test"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from typing import Dict, List

import pytest
from httpx import ASGITransport, AsyncClient

from ordertrack.shared.config import get_settings
from ordertrack.shared.database import build_engine, build_sessionmaker, create_all, get_db
from ordertrack.shared.events import OrderEventBroker
from ordertrack.shared.storage import generate_blob_name
from ordertrack.shared.utils.storage_errors import BlobStorageError
from ordertrack.modules.projects.models import AppUser

get_settings.cache_clear()

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


class InMemoryBlobStore:
    """
    Blob store en memoria para tests.

    Attributes:
        blobs: ruta pública → contenido
        deleted: rutas para las que se pidió delete() (en orden)
        fail_deletes: si True, delete() lanza BlobStorageError
        fail_saves: si True, save() lanza BlobStorageError
    """

    url_prefix = "/uploads"

    def __init__(self):
        self.blobs: Dict[str, bytes] = {}
        self.deleted: List[str] = []
        self.fail_deletes = False
        self.fail_saves = False

    async def save(self, filename: str, data: bytes) -> str:
        if self.fail_saves:
            raise BlobStorageError("save", filename, "disco lleno (simulado)")
        path = f"{self.url_prefix}/{generate_blob_name(filename)}"
        self.blobs[path] = data
        return path

    async def delete(self, path: str) -> bool:
        self.deleted.append(path)
        if self.fail_deletes:
            raise BlobStorageError("delete", path, "permiso denegado (simulado)")
        return self.blobs.pop(path, None) is not None

    async def exists(self, path: str) -> bool:
        return path in self.blobs


@pytest.fixture
async def engine():
    eng = build_engine(TEST_DB_URL)
    await create_all(eng)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return build_sessionmaker(engine)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def blob_store():
    return InMemoryBlobStore()


@pytest.fixture
def broker():
    return OrderEventBroker(queue_size=10)


@pytest.fixture
async def owner(session_factory) -> AppUser:
    async with session_factory() as session:
        user = AppUser(email="ana@example.com", name="Ana Freelance")
        session.add(user)
        await session.commit()
        return user


@pytest.fixture
def app(session_factory, blob_store, broker):
    """
    App FastAPI con get_db, blob store y broker overrideados.
    """
    from ordertrack.main import create_app
    from ordertrack.modules.projects.routes import deps

    application = create_app()

    async def _override_get_db():
        async with session_factory() as session:
            yield session

    application.dependency_overrides[get_db] = _override_get_db
    application.dependency_overrides[deps.get_blob_store] = lambda: blob_store
    application.dependency_overrides[deps.get_order_event_broker] = lambda: broker
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def async_client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

# Fin del archivo tests/conftest.py
