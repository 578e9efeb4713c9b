# -*- coding: utf-8 -*-
"""
tests/shared/test_logging_config.py

Autor: OrderTrack
Fecha: 2026-03-07
"""

import logging

from ordertrack.shared.config.logging_config import build_logging_config, setup_logging


def test_plain_format_uses_default_formatter():
    cfg = build_logging_config("debug", "plain")
    assert cfg["handlers"]["console"]["formatter"] == "default"
    assert cfg["root"]["level"] == "DEBUG"
    assert cfg["disable_existing_loggers"] is False


def test_json_format_uses_python_json_logger():
    cfg = build_logging_config("INFO", "json")
    assert cfg["handlers"]["console"]["formatter"] == "json"
    assert cfg["formatters"]["json"]["()"] == "pythonjsonlogger.json.JsonFormatter"


def test_setup_logging_applies_level():
    setup_logging("ERROR", "json")
    try:
        assert logging.getLogger().level == logging.ERROR
    finally:
        setup_logging("WARNING", "plain")

# Fin del archivo tests/shared/test_logging_config.py
