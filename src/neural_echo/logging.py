"""Logging setup shared by the pipeline stages and the CLI."""

from __future__ import annotations

import logging
from typing import Optional, Union

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_PACKAGE_LOGGER = "neural_echo"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        msg = f"Unknown log level: {level!r}"
        raise ValueError(msg)
    return resolved


def configure_logging(level: Union[int, str] = logging.INFO, handler: Optional[logging.Handler] = None) -> None:
    """Configure root logging with the package format.

    ``level`` may be a ``logging`` constant or its name (``"debug"``).
    """
    logging.basicConfig(level=_resolve_level(level), format=_DEFAULT_FORMAT, handlers=[handler] if handler else None)
    logging.getLogger(_PACKAGE_LOGGER).setLevel(_resolve_level(level))


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, nested under the package logger."""
    if name != _PACKAGE_LOGGER and not name.startswith(f"{_PACKAGE_LOGGER}."):
        name = f"{_PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
