# -*- coding: utf-8 -*-
"""
ordertrack/main.py

Punto de entrada principal del backend OrderTrack.

Ajustes clave:
- Uso de ordertrack.core.settings como fachada de configuración.
- Montaje de observabilidad Prometheus (/metrics) vía ordertrack.observability.prom
- Archivos subidos servidos como estáticos bajo UPLOAD_URL_PREFIX
- Errores de dominio traducidos a JSON {"detail": {"error_code", "message"}}
- Health principal /health en ordertrack.routes.health_routes

Autor: OrderTrack
Fecha: 2026-03-06
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

# ---------------------------------------------------------------------------
# Cargar .env ANTES de cualquier import que lea settings
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_override_env = os.getenv("PYTHON_ENV", "development").strip().lower() != "production"
load_dotenv(dotenv_path=_ENV_PATH, override=_override_env)

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
import uvicorn

from ordertrack import __version__
from ordertrack.core.settings import get_settings
from ordertrack.core.logging import setup_logging
from ordertrack.core.db import create_all
from ordertrack.observability.prom import setup_observability
from ordertrack.shared.middleware import JSONExceptionMiddleware
from ordertrack.modules.projects.facades.errors import (
    CommentNotAllowed,
    InvalidInput,
    InvalidOrderStatus,
    NotFound,
    StorageFailure,
    UploadTooLarge,
)

logger = logging.getLogger(__name__)

# Error de dominio → status HTTP (se resuelve por MRO: UploadTooLarge antes que InvalidInput)
DOMAIN_ERROR_STATUS = {
    NotFound: 404,
    InvalidInput: 400,
    UploadTooLarge: 413,
    InvalidOrderStatus: 400,
    CommentNotAllowed: 400,
    StorageFailure: 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    if not settings.is_production:
        # En producción el esquema lo aplica database/schema.sql
        await create_all()
        logger.info("🗄️ Tablas verificadas (create_all)")

    logger.info("🟢 Backend de OrderTrack iniciado (env=%s)", settings.python_env)
    try:
        yield
    finally:
        logger.info("🔴 Backend de OrderTrack apagado.")


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Traduce excepciones de dominio a JSON con error_code estable."""
    status_code = 500
    for cls in type(exc).__mro__:
        if cls in DOMAIN_ERROR_STATUS:
            status_code = DOMAIN_ERROR_STATUS[cls]
            break

    detail = {
        "error_code": getattr(exc, "error_code", "ERROR"),
        "message": str(exc),
    }
    if status_code >= 500:
        # request_id lo fija JSONExceptionMiddleware
        request_id = getattr(request.state, "request_id", None)
        if request_id:
            detail["request_id"] = request_id
        logger.error("domain_error path=%s request_id=%s error=%r", request.url.path, request_id, exc)

    return JSONResponse(status_code=status_code, content={"detail": detail})


def _configure_cors(app_instance: FastAPI) -> None:
    origins = get_settings().get_cors_origins()
    wildcard = origins == ["*"]
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # "*" con allow_credentials=True es inválido en navegadores
        allow_credentials=not wildcard,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        max_age=600,
    )
    logger.debug("CORS origins=%s", origins)


def create_app() -> FastAPI:
    """Construye la aplicación FastAPI con routers, middlewares y handlers."""
    settings = get_settings()

    app = FastAPI(
        title="OrderTrack API",
        description="Seguimiento de órdenes para freelancers con enlace de cliente",
        version=__version__,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "projects", "description": "Proyectos, órdenes y archivos (freelancer)"},
            {"name": "client", "description": "Portal de cliente por token"},
        ],
    )

    # El orden real de ejecución de middlewares es inverso al registro:
    # CORS queda outermost, luego el middleware JSON de errores.
    setup_observability(app)
    app.add_middleware(JSONExceptionMiddleware)
    _configure_cors(app)

    for exc_class in DOMAIN_ERROR_STATUS:
        app.add_exception_handler(exc_class, domain_error_handler)

    from ordertrack.routes import router as main_router
    app.include_router(main_router)

    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount(settings.upload_url_prefix, StaticFiles(directory=str(upload_dir)), name="uploads")

    @app.get("/", include_in_schema=False)
    async def root():
        return {"service": settings.app_name, "status": "active"}

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "ordertrack.main:app",
        host=settings.app_host,
        port=int(settings.app_port),
        reload=not settings.is_production,
    )

# Fin del archivo ordertrack/main.py
