"""Runtime configuration helpers for environment-driven settings."""
from __future__ import annotations

import logging
import os
from typing import Final, Optional

logger = logging.getLogger(__name__)


def env_flag(name: str, *, default: bool = False) -> bool:
    """Return a boolean flag from environment variables.

    The helper treats common truthy values (``1``, ``true``, ``yes``, ``on``)
    as ``True`` and common falsy ones (``0``, ``false``, ``no``, ``off``) as
    ``False``.  If the variable is unset or contains an unrecognised value, the
    provided ``default`` is used.
    """
    value = os.getenv(name)
    if value is None:
        return default

    normalised = value.strip().lower()
    if normalised in {"1", "true", "yes", "on"}:
        return True
    if normalised in {"0", "false", "no", "off"}:
        return False
    logger.warning("Unrecognised value %r for %s, using %s", value, name, default)
    return default


def env_float(name: str, *, default: float) -> float:
    """Return a non-negative float from the environment or ``default``."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        number = float(value)
    except ValueError:
        logger.warning("Invalid number %r for %s, using %s", value, name, default)
        return default
    if number < 0:
        logger.warning("Negative value %r for %s, using %s", value, name, default)
        return default
    return number


def env_int(name: str, *, default: Optional[int] = None) -> Optional[int]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Invalid integer %r for %s, using %s", value, name, default)
        return default


TURN_DELAY: Final[float] = env_float("SHIP_HUNTERS_TURN_DELAY", default=1.5)
SETUP_DELAY: Final[float] = env_float("SHIP_HUNTERS_SETUP_DELAY", default=2.5)
SEED: Final[Optional[int]] = env_int("SHIP_HUNTERS_SEED")
CLEAR_SCREEN: Final[bool] = env_flag("SHIP_HUNTERS_CLEAR_SCREEN", default=True)
LOG_LEVEL: Final[str] = (os.getenv("LOG_LEVEL") or "WARNING").strip().upper()

__all__ = [
    "CLEAR_SCREEN",
    "LOG_LEVEL",
    "SEED",
    "SETUP_DELAY",
    "TURN_DELAY",
    "env_flag",
    "env_float",
    "env_int",
]
