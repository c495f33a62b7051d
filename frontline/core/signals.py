"""
Control-flow signals produced by running one command.

The executor turns whatever a command did (return, raise) into exactly one of
these; the dispatcher interprets them. Nothing else in the chain decides
whether to continue.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from frontline.core.context import ExecutionContext


@dataclass(frozen=True)
class Continue:
    """Command completed normally."""


@dataclass(frozen=True)
class Recoverable:
    """Command failed; log and run the next command."""

    cause: BaseException


@dataclass(frozen=True)
class FatalAbort:
    """Stop the chain and log the cause. Nothing is cached."""

    cause: BaseException


@dataclass(frozen=True)
class SilentAbort:
    """Stop the chain without logging. Nothing is cached."""


@dataclass(frozen=True)
class Forward:
    """Stop the chain and dispatch ``destination``, optionally with ``context``."""

    destination: str
    context: ExecutionContext | None = None


Signal = Continue | Recoverable | FatalAbort | SilentAbort | Forward

CONTINUE = Continue()
SILENT_ABORT = SilentAbort()
