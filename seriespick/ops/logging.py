"""Logging setup."""

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_log_level(level: Optional[str] = None) -> int:
    """Numeric level from an explicit name, else SERIESPICK_LOG_LEVEL, else INFO."""
    name = (level or os.environ.get("SERIESPICK_LOG_LEVEL") or "INFO").strip().upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for CLI runs."""
    logging.basicConfig(level=resolve_log_level(level), format=LOG_FORMAT, force=True)
