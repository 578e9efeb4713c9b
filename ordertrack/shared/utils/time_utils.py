# -*- coding: utf-8 -*-
"""
ordertrack/shared/utils/time_utils.py

Helpers de fecha/hora.
"""

import datetime as dt


def now_utc() -> dt.datetime:
    """
    Retorna timestamp actual UTC.

    Centralizado para facilitar testing con mocks.
    """
    return dt.datetime.now(dt.timezone.utc)


__all__ = ["now_utc"]

# Fin del archivo ordertrack/shared/utils/time_utils.py
