"""Root logger setup shared by the desktop and web entry points.

``TASKLISTS_LOG_LEVEL`` (level name or number) wins over ``TASKLISTS_DEBUG``
(truthy -> DEBUG). Server-side loggers pulled in by the NiceGUI runtime are
held at WARNING unless the app itself runs at DEBUG.
"""
from __future__ import annotations

import logging
import os
from typing import Iterable, Mapping, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LEVEL_ENV = "TASKLISTS_LOG_LEVEL"
DEBUG_ENV = "TASKLISTS_DEBUG"

# per-request and file-watch lines from the web stack
NOISY_LOGGERS = ("uvicorn.access", "uvicorn.error", "watchfiles.main", "engineio.server", "socketio.server")


def resolve_level(
    environ: Optional[Mapping[str, str]] = None, default: int = logging.INFO
) -> int:
    """Return the level requested by the environment, or ``default``."""
    env = os.environ if environ is None else environ
    raw = (env.get(LEVEL_ENV) or "").strip()
    if raw:
        level = int(raw) if raw.isdigit() else logging.getLevelName(raw.upper())
        return level if isinstance(level, int) else default
    if (env.get(DEBUG_ENV) or "").strip().lower() in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return default


def configure_root(
    default_level: int = logging.INFO,
    *,
    quiet: Iterable[str] = NOISY_LOGGERS,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """Install a compact root handler once and apply the effective level.

    Returns:
        The level set on the root logger.
    """
    level = resolve_level(environ, default_level)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(level)

    quiet_level = level if level <= logging.DEBUG else max(level, logging.WARNING)
    for name in quiet:
        logging.getLogger(name).setLevel(quiet_level)
    return level


__all__ = ["NOISY_LOGGERS", "configure_root", "resolve_level"]
