"""
LoggerManager - fan-out over the configured logger backends.

Key behaviors:
- Every backend's ``init()`` runs once, at construction
- ``log()`` normalizes the message once, then broadcasts in configured order
- A failing backend never prevents the others from receiving the message
"""

from __future__ import annotations

import logging
import traceback
from collections.abc import Mapping
from enum import Enum

from frontline.core.ports.logger import LoggerPort

logger = logging.getLogger(__name__)


def normalize_message(message: object) -> str:
    """
    Convert a log payload to text.

    Exceptions render as their message followed by the formatted traceback,
    including chained causes.
    """
    if isinstance(message, BaseException):
        text = str(message) or type(message).__name__
        trace = "".join(
            traceback.format_exception(type(message), message, message.__traceback__)
        )
        return f"{text}\n{trace}".rstrip("\n")
    if isinstance(message, str):
        return message
    return str(message)


class LoggerManager:
    """Broadcasts log messages to every configured backend."""

    def __init__(self, loggers: Mapping[str, LoggerPort] | None = None) -> None:
        self._loggers: dict[str, LoggerPort] = dict(loggers or {})
        for backend in self._loggers.values():
            backend.init()

    @property
    def names(self) -> list[str]:
        return list(self._loggers)

    def get_logger_by_name(self, name: str) -> LoggerPort | None:
        return self._loggers.get(name)

    def log(self, message: object, category: str | Enum = "info") -> None:
        text = normalize_message(message)
        if isinstance(category, Enum):
            category = category.value
        for name, backend in self._loggers.items():
            try:
                backend.log(text, category)
            except Exception:
                logger.exception(f"Logger backend {name!r} failed; continuing with the rest")

    def __len__(self) -> int:
        return len(self._loggers)
