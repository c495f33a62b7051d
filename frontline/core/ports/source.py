"""
Parameter source port.

One source per kind (query string, form, cookies, environment...). Sources
must return ``MISSING`` for absent keys and never conflate absence with an
empty string.
"""

from __future__ import annotations

from typing import Any, Protocol


class ParameterSourcePort(Protocol):
    """Uniform lookup over one kind of external input."""

    def lookup(self, key: str) -> Any:
        """Return the value for ``key`` or ``MISSING``."""
        ...
