"""
Parameter source adapters.

Every source distinguishes an absent key (``MISSING``) from a present empty
value.
"""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from typing import Any

from frontline.core.context import MISSING
from frontline.core.errors import ConfigurationError


class MappingSource:
    """Source over any mapping: query params, form fields, cookies, session."""

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values = values if values is not None else {}

    def lookup(self, key: str) -> Any:
        if key in self._values:
            return self._values[key]
        return MISSING


class EnvironSource:
    """Process environment. Reads ``os.environ`` at lookup time by default."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def lookup(self, key: str) -> Any:
        environ = self._environ if self._environ is not None else os.environ
        if key in environ:
            return environ[key]
        return MISSING


class ArgvSource:
    """Positional command-line arguments, addressed by integer index."""

    def __init__(self, argv: Sequence[str]) -> None:
        self._argv = list(argv)

    def lookup(self, key: str) -> Any:
        try:
            index = int(key)
        except ValueError:
            raise ConfigurationError(
                f"argv parameter source needs an integer index, got {key!r}"
            ) from None

        if 0 <= index < len(self._argv):
            return self._argv[index]
        return MISSING
