# -*- coding: utf-8 -*-
"""
ordertrack/shared/storage/blob_store.py

Adaptador de almacenamiento de archivos (blob store) direccionable por ruta.

- BlobStore: protocolo que consumen los facades (save/delete/exists).
- LocalBlobStore: implementación sobre el filesystem local, servida
  como estáticos bajo `url_prefix` (por defecto /uploads).

Nombres generados: "<epoch-ms>-<8 hex>-<nombre saneado>", de modo que
dos subidas del mismo archivo nunca comparten ruta.

Autor: OrderTrack
Fecha: 2026-03-02
"""

from __future__ import annotations

import logging
import secrets
import time
from pathlib import Path
from typing import Protocol, Union, runtime_checkable

import anyio

from ordertrack.shared.utils.filename_sanitization import sanitize_filename_for_storage
from ordertrack.shared.utils.storage_errors import BlobStorageError

logger = logging.getLogger(__name__)


@runtime_checkable
class BlobStore(Protocol):
    """Contrato mínimo del blob store usado por el ciclo de vida de órdenes."""

    async def save(self, filename: str, data: bytes) -> str:
        """Guarda `data` bajo un nombre generado y devuelve su ruta pública."""
        ...

    async def delete(self, path: str) -> bool:
        """Elimina el blob; False si no existía."""
        ...

    async def exists(self, path: str) -> bool:
        ...


def generate_blob_name(filename: str) -> str:
    """
    Genera un nombre libre de colisiones para un archivo subido.

    Args:
        filename: Nombre original enviado por el cliente

    Returns:
        "<epoch-ms>-<8 hex>-<nombre saneado>"
    """
    millis = int(time.time() * 1000)
    return f"{millis}-{secrets.token_hex(4)}-{sanitize_filename_for_storage(filename)}"


class LocalBlobStore:
    """
    Blob store sobre un directorio local.

    Args:
        root: Directorio donde se escriben los archivos
        url_prefix: Prefijo público con el que se sirven (p.ej. "/uploads")
    """

    def __init__(self, root: Union[str, Path], url_prefix: str = "/uploads"):
        self.root = Path(root).resolve()
        self.url_prefix = "/" + url_prefix.strip("/")

    def _resolve(self, path: str) -> Path:
        """
        Traduce una ruta pública a la ruta en disco.

        Raises:
            BlobStorageError: Si la ruta no pertenece al prefijo o escapa del root
        """
        prefix = self.url_prefix + "/"
        if not path.startswith(prefix):
            raise BlobStorageError("resolve", path, f"Ruta fuera de {self.url_prefix}: {path}")
        name = path[len(prefix):]
        target = (self.root / name).resolve()
        if target.parent != self.root:
            raise BlobStorageError("resolve", path, f"Ruta inválida: {path}")
        return target

    async def save(self, filename: str, data: bytes) -> str:
        name = generate_blob_name(filename)
        target = anyio.Path(self.root / name)
        try:
            await anyio.Path(self.root).mkdir(parents=True, exist_ok=True)
            await target.write_bytes(data)
        except OSError as e:
            raise BlobStorageError("save", name, f"No se pudo guardar {name}: {e}") from e

        public_path = f"{self.url_prefix}/{name}"
        logger.info("blob_saved", extra={"path": public_path, "size_bytes": len(data)})
        return public_path

    async def delete(self, path: str) -> bool:
        target = anyio.Path(self._resolve(path))
        try:
            await target.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise BlobStorageError("delete", path, f"No se pudo eliminar {path}: {e}") from e

        logger.info("blob_deleted", extra={"path": path})
        return True

    async def exists(self, path: str) -> bool:
        try:
            target = self._resolve(path)
        except BlobStorageError:
            return False
        return await anyio.Path(target).is_file()


__all__ = ["BlobStore", "LocalBlobStore", "generate_blob_name"]

# Fin del archivo ordertrack/shared/storage/blob_store.py
