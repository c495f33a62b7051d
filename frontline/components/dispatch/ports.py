"""
Dispatch component port definitions.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from frontline.core.ports.cache import RequestCachePort
from frontline.core.ports.logger import LoggerPort

from .models import Request


class RequestConfigPort(Protocol):
    """Configuration collaborator that turns a request name into a Request."""

    def get_request(self, request_name: str) -> Request:
        """
        Build the Request for ``request_name``.

        Raises:
            RequestNotFoundError: If the name is unknown or illegal.
            ConfigurationError: If a declaration in the request is malformed.
        """
        ...


class FacilityConfigPort(RequestConfigPort, Protocol):
    """Configuration collaborator that also provides logger and cache backends."""

    def get_loggers(self) -> Mapping[str, LoggerPort]:
        """Ordered name -> logger backend mapping."""
        ...

    def get_caches(self) -> Mapping[str, RequestCachePort]:
        """Ordered name -> cache backend mapping."""
        ...

    def get_context_defaults(self) -> Mapping[str, object]:
        """Values every fresh context is seeded with."""
        ...
