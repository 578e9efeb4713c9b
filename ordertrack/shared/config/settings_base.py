# -*- coding: utf-8 -*-
"""
ordertrack/shared/config/settings_base.py

Base de configuración (Pydantic v2) para OrderTrack.
- Esta clase NO instancia singletons ni resuelve .env; eso lo hace config_loader.
- Es la base para settings_dev.py, settings_testing.py y settings_prod.py.

Autor: OrderTrack
Fecha: 2026-03-02
"""

from typing import List, Literal, Optional
from pydantic import Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Tipos de entorno soportados
EnvName = Literal["development", "test", "production"]

# Entropía mínima de los tokens de acceso de cliente (bytes)
MIN_ACCESS_TOKEN_BYTES = 16
MIN_REGENERATED_TOKEN_BYTES = 24


class BaseAppSettings(BaseSettings):
    # =========================
    # Núcleo de la aplicación
    # =========================
    python_env: EnvName = Field(default="development", validation_alias="PYTHON_ENV")
    app_name: str = Field(default="OrderTrack", validation_alias="APP_NAME")
    app_version: str = Field(default="0.1.0", validation_alias="APP_VERSION")
    app_host: str = Field(default="0.0.0.0", validation_alias="APP_HOST")
    app_port: int = Field(default=8000, validation_alias="APP_PORT")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    # =========================
    # Logging
    # =========================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", validation_alias="LOG_LEVEL"
    )
    log_format: Literal["plain", "pretty", "json"] = Field(default="plain", validation_alias="LOG_FORMAT")

    # =========================
    # Base de datos (PostgreSQL)
    # =========================
    db_user: str = Field(default="postgres", validation_alias="DB_USER")
    db_password: SecretStr = Field(default=SecretStr("postgres"), validation_alias="DB_PASSWORD")
    db_host: str = Field(default="localhost", validation_alias="DB_HOST")
    db_port: int = Field(default=5432, validation_alias="DB_PORT")
    db_name: str = Field(default="ordertrack", validation_alias="DB_NAME")
    db_pool_size: int = Field(default=5, validation_alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=5, validation_alias="DB_MAX_OVERFLOW")
    db_pool_pre_ping: bool = Field(default=True, validation_alias="DB_POOL_PRE_PING")
    db_echo_sql: bool = Field(default=False, validation_alias="DB_ECHO_SQL")
    db_url: Optional[str] = Field(default=None, validation_alias="DB_URL")

    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        """
        Genera la URL de conexión completa para SQLAlchemy.
        Prioriza DB_URL si existe (normalizando el driver de Postgres a asyncpg),
        sino construye desde componentes individuales.
        """
        from urllib.parse import quote_plus

        if self.db_url:
            url = self.db_url
            if url.startswith("postgres://"):
                url = "postgresql+asyncpg://" + url[len("postgres://"):]
            elif url.startswith("postgresql://"):
                url = "postgresql+asyncpg://" + url[len("postgresql://"):]
            return url

        # Construye desde componentes (con password escapado)
        pw = quote_plus(self.db_password.get_secret_value())
        return (
            f"postgresql+asyncpg://{self.db_user}:{pw}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    # =========================
    # Almacenamiento de archivos (blob store local)
    # =========================
    upload_dir: str = Field(default="public/uploads", validation_alias="UPLOAD_DIR")
    upload_url_prefix: str = Field(default="/uploads", validation_alias="UPLOAD_URL_PREFIX")
    upload_max_bytes: int = Field(default=5 * 1024 * 1024, validation_alias="UPLOAD_MAX_BYTES")

    # =========================
    # CORS / Frontend
    # =========================
    allowed_origins: str = Field(default="*", validation_alias="CORS_ORIGINS")

    # =========================
    # Notificaciones en tiempo real (SSE)
    # =========================
    sse_heartbeat_seconds: float = Field(default=30.0, validation_alias="SSE_HEARTBEAT_SECONDS")
    sse_queue_size: int = Field(default=100, validation_alias="SSE_QUEUE_SIZE")

    # =========================
    # Tokens de acceso de cliente
    # =========================
    access_token_bytes: int = Field(default=MIN_ACCESS_TOKEN_BYTES, validation_alias="ACCESS_TOKEN_BYTES")
    regenerated_token_bytes: int = Field(
        default=MIN_REGENERATED_TOKEN_BYTES, validation_alias="REGENERATED_TOKEN_BYTES"
    )

    # =========================
    # Propietario por defecto (sin autenticación en la frontera HTTP)
    # =========================
    default_owner_email: str = Field(default="freelancer@example.com", validation_alias="DEFAULT_OWNER_EMAIL")
    default_owner_name: str = Field(default="Freelancer", validation_alias="DEFAULT_OWNER_NAME")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("access_token_bytes")
    @classmethod
    def _min_access_token_bytes(cls, v: int) -> int:
        if v < MIN_ACCESS_TOKEN_BYTES:
            raise ValueError(f"ACCESS_TOKEN_BYTES debe ser >= {MIN_ACCESS_TOKEN_BYTES}")
        return v

    @field_validator("regenerated_token_bytes")
    @classmethod
    def _min_regenerated_token_bytes(cls, v: int) -> int:
        if v < MIN_REGENERATED_TOKEN_BYTES:
            raise ValueError(f"REGENERATED_TOKEN_BYTES debe ser >= {MIN_REGENERATED_TOKEN_BYTES}")
        return v

    @field_validator("upload_url_prefix")
    @classmethod
    def _normalize_prefix(cls, v: str) -> str:
        return "/" + v.strip().strip("/")

    def get_cors_origins(self) -> List[str]:
        """Lista de orígenes CORS a partir de la cadena separada por comas."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @property
    def is_production(self) -> bool:
        return self.python_env == "production"


__all__ = [
    "BaseAppSettings",
    "EnvName",
    "MIN_ACCESS_TOKEN_BYTES",
    "MIN_REGENERATED_TOKEN_BYTES",
]

# Fin del archivo ordertrack/shared/config/settings_base.py
