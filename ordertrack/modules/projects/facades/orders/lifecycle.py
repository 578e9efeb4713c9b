# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/facades/orders/lifecycle.py

Motor de ciclo de vida de órdenes.

Responsabilidades:
- Validar estados (OrderStatus) y aplicarlos sobre la orden
- Política de comentarios del cliente (bloqueados en COMPLETED/APPROVED)
- Protocolo de reemplazo de archivo adjunto: se borra el blob anterior
  antes de fijar la nueva referencia; un fallo de borrado se registra y
  no bloquea el reemplazo

No guarda estado propio: opera sobre la instancia Order que le pasa el
orquestador y no hace commit.

Autor: OrderTrack
Fecha: 2026-03-04
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ordertrack.shared.storage.blob_store import BlobStore
from ordertrack.shared.utils.storage_errors import BlobStorageError
from ordertrack.modules.projects.enums import (
    COMMENT_LOCKED_STATUSES,
    OrderStatus,
    is_valid_status_transition,
)
from ordertrack.modules.projects.facades.errors import InvalidOrderStatus
from ordertrack.modules.projects.metrics import record_blob_cleanup_failure, record_status_change
from ordertrack.modules.projects.models import Order

logger = logging.getLogger(__name__)


def can_accept_comment(order: Order) -> bool:
    """
    Indica si la orden admite un comentario del cliente.

    Returns:
        False si la orden está COMPLETED o APPROVED, True en otro caso
    """
    return order.status not in COMMENT_LOCKED_STATUSES


def parse_status(value: Any) -> OrderStatus:
    """
    Convierte un valor externo en OrderStatus.

    Raises:
        InvalidOrderStatus: Si el valor no es uno de los cuatro estados
    """
    status = OrderStatus.parse(value)
    if status is None:
        raise InvalidOrderStatus(value)
    return status


class OrderLifecycle:
    """
    Reglas de estado y de archivo adjunto de una orden.

    Args:
        blob_store: Almacenamiento donde viven los archivos adjuntos
    """

    def __init__(self, blob_store: BlobStore):
        self.blob_store = blob_store

    def set_status(self, order: Order, new_status: Any) -> Order:
        """
        Fija el estado de la orden.

        Cualquier estado puede fijarse desde cualquier otro; sólo se
        rechazan valores fuera del enum.

        Raises:
            InvalidOrderStatus: Si new_status no es reconocido
        """
        status = parse_status(new_status)
        previous = order.status
        if previous is not None and not is_valid_status_transition(previous, status):
            raise InvalidOrderStatus(status, f"Transición inválida: {previous} → {status}")

        order.status = status
        if previous != status:
            record_status_change(status)
            logger.info(
                "order_status_changed",
                extra={"order_id": order.id, "from_status": str(previous), "to_status": str(status)},
            )
        return order

    def approve(self, order: Order) -> Order:
        """Aprobación del cliente; idempotente."""
        return self.set_status(order, OrderStatus.APPROVED)

    async def discard_blob(self, path: Optional[str]) -> bool:
        """
        Elimina un blob sin propagar errores.

        Returns:
            True si el blob se eliminó, False si no existía o falló
        """
        if not path:
            return False
        try:
            removed = await self.blob_store.delete(path)
        except BlobStorageError as e:
            record_blob_cleanup_failure()
            logger.warning("blob_cleanup_failed", extra={"path": path, "error": str(e)})
            return False
        if not removed:
            logger.warning("blob_cleanup_missing", extra={"path": path})
        return removed

    async def replace_file(self, order: Order, new_path: str) -> Order:
        """
        Reemplaza el archivo adjunto de la orden.

        Borra el blob anterior (best-effort) y fija la nueva ruta.
        """
        previous = order.file_path
        if previous and previous != new_path:
            await self.discard_blob(previous)
        order.file_path = new_path
        logger.info(
            "order_file_replaced",
            extra={"order_id": order.id, "previous_path": previous, "new_path": new_path},
        )
        return order

    async def detach_and_delete_file(self, order: Order) -> Order:
        """Borra el blob actual (best-effort) y limpia file_path."""
        if order.file_path:
            await self.discard_blob(order.file_path)
            order.file_path = None
        return order


__all__ = ["OrderLifecycle", "can_accept_comment", "parse_status"]

# Fin del archivo ordertrack/modules/projects/facades/orders/lifecycle.py
