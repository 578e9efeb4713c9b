# -*- coding: utf-8 -*-
"""
ordertrack/shared/utils/filename_sanitization.py

Sanitización de nombres de archivo para el blob store local.
Funciones puras, sin dependencias de otros módulos de utils.

Regla: todo carácter fuera de [A-Za-z0-9._-] se reemplaza por '-'.
Los separadores de ruta se descartan antes (sólo se usa el nombre base).

Autor: OrderTrack
Fecha: 2026-03-02
"""

import re
import unicodedata

DEFAULT_FILENAME = "file"
MAX_FILENAME_LENGTH = 120

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._\-]")


def sanitize_filename_for_storage(filename: str) -> str:
    """
    Sanitiza el nombre del archivo para almacenamiento seguro.

    Args:
        filename: Nombre original del archivo (puede incluir ruta del cliente)

    Returns:
        Nombre seguro, nunca vacío ni compuesto sólo de puntos

    Ejemplos:
        >>> sanitize_filename_for_storage("Logo final (v2).png")
        'Logo-final--v2-.png'
        >>> sanitize_filename_for_storage("../../etc/passwd")
        'passwd'
    """
    if not filename:
        return DEFAULT_FILENAME

    # Navegadores antiguos envían la ruta completa (C:\...\archivo)
    base = filename.replace("\\", "/").rsplit("/", 1)[-1]
    # Acentos a ASCII antes de reemplazar (á -> a)
    base = unicodedata.normalize("NFKD", base).encode("ascii", "ignore").decode("ascii")
    safe = _UNSAFE_CHARS.sub("-", base.strip())

    if not safe.strip("."):
        return DEFAULT_FILENAME

    if len(safe) > MAX_FILENAME_LENGTH:
        stem, dot, ext = safe.rpartition(".")
        if dot and len(ext) < 16:
            safe = stem[: MAX_FILENAME_LENGTH - len(ext) - 1] + "." + ext
        else:
            safe = safe[:MAX_FILENAME_LENGTH]
    return safe


__all__ = ["sanitize_filename_for_storage", "DEFAULT_FILENAME", "MAX_FILENAME_LENGTH"]
# Fin del archivo ordertrack/shared/utils/filename_sanitization.py
