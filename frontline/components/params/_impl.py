"""
ParameterResolver - per-command argument resolution with ordered fallback.

Key behaviors:
- Locators are tried in declared order; the first present value wins
- Present-but-empty values win; only MISSING falls through
- Unknown source kinds fail at resolution time, not at load time
- A known kind with no injected source behaves as an empty source
- A parameter with no hit and no declared default is left out of the mapping
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from frontline.core.context import MISSING, ExecutionContext
from frontline.core.errors import ConfigurationError
from frontline.core.ports.source import ParameterSourcePort

from .models import ParamSpec, SourceLocator

logger = logging.getLogger(__name__)

# Canonical kind for every accepted spelling.
SOURCE_KINDS: dict[str, str] = {
    "get": "get",
    "g": "get",
    "post": "post",
    "p": "post",
    "cookie": "cookie",
    "cookies": "cookie",
    "c": "cookie",
    "session": "session",
    "s": "session",
    "context": "context",
    "cmd": "context",
    "cxt": "context",
    "x": "context",
    "env": "env",
    "environment": "env",
    "e": "env",
    "server": "server",
    "request": "request",
    "r": "request",
    "argv": "argv",
    "arg": "argv",
    "a": "argv",
}


def parse_locator(locator: str) -> SourceLocator:
    """
    Split a ``kind:key`` locator.

    Raises:
        ConfigurationError: If the locator is malformed, the kind unknown, or an
            argv index not an integer.
    """
    kind, sep, key = locator.partition(":")
    kind = kind.strip().lower()
    if not sep or not kind:
        raise ConfigurationError(f"Malformed parameter source {locator!r}; expected kind:key")

    canonical = SOURCE_KINDS.get(kind)
    if canonical is None:
        raise ConfigurationError(f"Unknown parameter source kind {kind!r} in {locator!r}")

    if canonical == "argv":
        try:
            int(key)
        except ValueError:
            raise ConfigurationError(
                f"argv parameter source needs an integer index, got {key!r}"
            ) from None

    return SourceLocator(kind=canonical, key=key)


class ContextSource:
    """Reads values stored in the execution context by earlier commands."""

    def __init__(self, context: ExecutionContext) -> None:
        self._context = context

    def lookup(self, key: str) -> Any:
        return self._context.lookup(key)


class ChainedSource:
    """Tries several sources in order."""

    def __init__(self, sources: Iterable[ParameterSourcePort]) -> None:
        self._sources = list(sources)

    def lookup(self, key: str) -> Any:
        for source in self._sources:
            value = source.lookup(key)
            if value is not MISSING:
                return value
        return MISSING


@dataclass(frozen=True)
class ParameterSources:
    """
    External inputs available to one dispatch, one source per kind.

    The ``context`` kind is not listed here; it always reads the context the
    command runs against.
    """

    get: ParameterSourcePort | None = None
    post: ParameterSourcePort | None = None
    cookie: ParameterSourcePort | None = None
    session: ParameterSourcePort | None = None
    env: ParameterSourcePort | None = None
    server: ParameterSourcePort | None = None
    request: ParameterSourcePort | None = None
    argv: ParameterSourcePort | None = None

    def for_kind(self, kind: str) -> ParameterSourcePort | None:
        if kind == "request" and self.request is None:
            # POST overrides GET; cookies are the last resort
            chained = [s for s in (self.post, self.get, self.cookie) if s is not None]
            return ChainedSource(chained) if chained else None
        return getattr(self, kind, None)


class ParameterResolver:
    """Produces the ``{name: value}`` mapping handed to ``Command.execute``."""

    def __init__(self, sources: ParameterSources | None = None) -> None:
        self.sources = sources if sources is not None else ParameterSources()

    def resolve(
        self,
        param_specs: Mapping[str, ParamSpec],
        context: ExecutionContext,
    ) -> dict[str, Any]:
        params: dict[str, Any] = {}
        for name, spec in param_specs.items():
            value = self._first_present(spec.sources, context)
            if value is MISSING:
                value = spec.default
            if value is not MISSING:
                params[name] = value
        return params

    def fetch(self, locator: str, context: ExecutionContext) -> Any:
        """Look up a single locator. Returns MISSING when absent."""
        parsed = parse_locator(locator)
        if parsed.kind == "context":
            return ContextSource(context).lookup(parsed.key)

        source = self.sources.for_kind(parsed.kind)
        if source is None:
            logger.debug(f"No {parsed.kind!r} source available for {locator!r}")
            return MISSING
        return source.lookup(parsed.key)

    def _first_present(self, locators: Iterable[str], context: ExecutionContext) -> Any:
        for locator in locators:
            value = self.fetch(locator, context)
            if value is not MISSING:
                return value
        return MISSING
