"""Monitoring package exports and helpers."""

from __future__ import annotations

import uuid
from typing import Optional

from ..config.settings import AppConfig, get_app_config
from .logger import configure_logging, correlation_scope, get_logger


def bootstrap_observability(*, config: Optional[AppConfig] = None) -> str:
    """Configure logging and return a fresh invocation id."""

    app_config = config or get_app_config()
    configure_logging(app_config.monitoring, force=True)
    return uuid.uuid4().hex[:12]


__all__ = ["bootstrap_observability", "configure_logging", "correlation_scope", "get_logger"]
