"""
Logger backend port.

Backends receive already-normalized strings; the logger manager converts
exceptions and other objects before dispatch.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class LogCategory(str, Enum):
    """Standard categories. Applications may use their own strings as well."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    DEBUG = "debug"


class LoggerPort(Protocol):
    """Logger backend interface."""

    def init(self) -> None:
        """Prepare the backend. Called once before the first ``log``."""
        ...

    def log(self, message: str, category: str) -> None:
        ...
