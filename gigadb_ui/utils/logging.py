"""Root logger setup for the GigaDB browser.

Every module logs through ``logging.getLogger(__name__)``; only the entrypoint
calls :func:`configure_root`.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

LEVEL_ENV = "GIGADB_LOG_LEVEL"
DEBUG_ENV = "GIGADB_DEBUG"
HTTP_DEBUG_ENV = "GIGADB_DEBUG_HTTP"

# Third-party loggers that flood DEBUG output (HTTP pool, NiceGUI's ASGI server).
NOISY_LOGGERS = ("urllib3", "uvicorn.access")

_TRUTHY = {"1", "true", "yes", "on"}


def parse_level(value: Optional[str], fallback: int) -> int:
    """Turn ``"debug"``/``"WARNING"``/``"10"`` into a logging level."""
    text = (value or "").strip()
    if not text:
        return fallback
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else fallback


def _truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in _TRUTHY


def env_level(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Level forced by the environment, or ``None`` when nothing is set."""
    env = os.environ if environ is None else environ
    explicit = env.get(LEVEL_ENV)
    if explicit and explicit.strip():
        return parse_level(explicit, logging.INFO)
    if _truthy(env.get(DEBUG_ENV)):
        return logging.DEBUG
    return None


def configure_root(
    default_level: int | str = logging.INFO,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """
    Configure the root logger with a compact format and return the level used.

    Environment overrides:
      - GIGADB_LOG_LEVEL: explicit log level
      - GIGADB_DEBUG: truthy -> DEBUG
      - GIGADB_DEBUG_HTTP: truthy -> keep urllib3/uvicorn DEBUG output
    """
    env = os.environ if environ is None else environ
    if isinstance(default_level, str):
        fallback = parse_level(default_level, logging.INFO)
    else:
        fallback = int(default_level)
    effective = env_level(env) or fallback

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(effective)

    if not _truthy(env.get(HTTP_DEBUG_ENV)):
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(max(effective, logging.INFO))
    return effective


def level_name(level: int) -> str:
    """Return logging level name for diagnostics."""
    return logging.getLevelName(level)


__all__ = ["configure_root", "env_level", "level_name", "parse_level"]
