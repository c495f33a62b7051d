"""
Logger backend that forwards to the stdlib ``logging`` module.

Categories map onto levels; unknown categories log at INFO with the
category kept in the message.
"""

from __future__ import annotations

import logging

_LEVELS = {
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


class PythonLoggingBackend:
    """Implements LoggerPort on top of a named stdlib logger."""

    def __init__(self, logger_name: str = "frontline.app") -> None:
        self.logger_name = logger_name
        self._logger: logging.Logger | None = None

    def init(self) -> None:
        self._logger = logging.getLogger(self.logger_name)

    def log(self, message: str, category: str) -> None:
        if self._logger is None:
            self.init()
        assert self._logger is not None

        level = _LEVELS.get(category.lower())
        if level is None:
            self._logger.info(f"[{category}] {message}")
            return
        self._logger.log(level, message)
