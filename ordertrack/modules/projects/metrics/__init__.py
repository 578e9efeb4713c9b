# -*- coding: utf-8 -*-
"""
ordertrack/modules/projects/metrics/__init__.py

Métricas Prometheus del módulo de proyectos.
"""

from .collectors import (
    record_status_change,
    record_blob_cleanup_failure,
    record_token_lookup,
    record_event_published,
    instrument_op,
)

__all__ = [
    "record_status_change",
    "record_blob_cleanup_failure",
    "record_token_lookup",
    "record_event_published",
    "instrument_op",
]
