"""
Per-dispatch scope.

Logger and cache backends are shared by the whole process. Backends that
collect state for the current dispatch keep it in the active DispatchScope,
so consecutive or concurrent dispatches never see each other's entries.

A scope spans one top-level dispatch, forwards included. It lives in a
context variable, so threadpool workers serving different requests each see
their own.
"""

from __future__ import annotations

import contextvars
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any


class DispatchScope:
    """State bag for one top-level dispatch."""

    def __init__(self) -> None:
        self.data: dict[str, Any] = {}


_current_scope: contextvars.ContextVar[DispatchScope | None] = contextvars.ContextVar(
    "frontline_dispatch_scope", default=None
)


def current_scope() -> DispatchScope | None:
    return _current_scope.get()


@contextmanager
def dispatch_scope() -> Iterator[DispatchScope]:
    """Open a fresh scope for the duration of the block."""
    scope = DispatchScope()
    token = _current_scope.set(scope)
    try:
        yield scope
    finally:
        _current_scope.reset(token)
