"""Root logger setup shared by the Tk and NiceGUI entrypoints.

Environment overrides win over CLI defaults and the persisted preference:
  - POSTBOARD_LOG_LEVEL: level name or number
  - POSTBOARD_DEBUG: truthy -> DEBUG
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

LEVEL_ENV = "POSTBOARD_LOG_LEVEL"
DEBUG_ENV = "POSTBOARD_DEBUG"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"
# Connection-pool chatter from requests; only shown at DEBUG.
_NOISY_LOGGERS = ("urllib3",)


def parse_level(value: Union[int, str, None], fallback: int = logging.INFO) -> int:
    if isinstance(value, int):
        return value
    text = (value or "").strip()
    if not text:
        return fallback
    if text.isdigit():
        return int(text)
    candidate = logging.getLevelName(text.upper())
    return candidate if isinstance(candidate, int) else fallback


def env_level() -> Optional[int]:
    """Level forced by the environment, or ``None``."""
    raw = os.getenv(LEVEL_ENV)
    if raw and raw.strip():
        return parse_level(raw)
    if (os.getenv(DEBUG_ENV) or "").strip().lower() in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return None


def _set_level(level: int) -> None:
    logging.getLogger().setLevel(level)
    noisy_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)


def configure_root(default_level: Union[int, str] = logging.INFO) -> int:
    """Install the console handler once and return the effective level."""
    level = env_level()
    if level is None:
        level = parse_level(default_level)
    if not logging.getLogger().handlers:
        logging.basicConfig(format=_FORMAT, datefmt=_DATEFMT)
    _set_level(level)
    return level


def apply_preferences(debug_enabled: bool) -> int:
    """Apply the stored ``debug_logging`` flag unless the environment overrides it."""
    level = env_level()
    if level is None:
        level = logging.DEBUG if debug_enabled else logging.INFO
    _set_level(level)
    return level


def env_requests_debug() -> bool:
    level = env_level()
    return level is not None and level <= logging.DEBUG
