"""App-wide configuration loaded by the application factory."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]
DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


class Config:
    SERVICE_NAME = "finplan"
    CORS_ORIGINS = list(DEFAULT_CORS_ORIGINS)
    LOG_LEVEL = DEFAULT_LOG_LEVEL
    TESTING = False


class TestingConfig(Config):
    TESTING = True
    LOG_LEVEL = "DEBUG"


def resolve_log_level(level: Any) -> str:
    """Upper-cased level name, or the default when logging does not know it."""
    name = str(level).strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    logger.warning("unknown log level %r, using %s", level, DEFAULT_LOG_LEVEL)
    return DEFAULT_LOG_LEVEL


def env_overrides() -> Dict[str, Any]:
    """
    Settings taken from the environment when the app is created.

    Only variables that are actually set show up in the result, so an unset
    variable leaves the config object's value alone.
    """
    overrides: Dict[str, Any] = {}

    raw_origins = os.environ.get("FINPLAN_CORS_ORIGINS", "")
    origins: List[str] = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]
    if origins:
        overrides["CORS_ORIGINS"] = origins

    raw_level = os.environ.get("FINPLAN_LOG_LEVEL")
    if raw_level:
        overrides["LOG_LEVEL"] = raw_level
    return overrides
