"""
Frontline error taxonomy.

Two families live here:

- Failures (``FrontlineError`` and subclasses). ``CommandError`` is the only
  recoverable one: the dispatcher logs it and moves on to the next command.
  ``ConfigurationError`` and ``RequestNotFoundError`` surface to the caller.
- Control-flow interrupts raised by commands to stop or reroute the chain.
  They are deliberately not ``FrontlineError`` subclasses so that a handler
  catching failures never swallows an interrupt.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from frontline.core.context import ExecutionContext


class FrontlineError(Exception):
    """Base class for frontline failures."""


class CommandError(FrontlineError):
    """Raised by a command when it failed but the chain should continue."""


class ConfigurationError(FrontlineError):
    """Raised when a command, parameter or facility declaration is malformed."""


class RequestNotFoundError(FrontlineError):
    """Raised when a request name is unknown or illegal."""

    def __init__(self, request_name: str, message: str | None = None) -> None:
        self.request_name = request_name
        super().__init__(message or f"Request {request_name} not found")


# --- Control flow ---


class Interrupt(Exception):
    """
    Stop the chain without logging.

    The raising command is responsible for having produced whatever the
    client should see (a redirect, an auth challenge).
    """


class AbortRequest(Exception):
    """Stop the chain because of an unrecoverable condition. Always logged."""


class ForwardRequest(Interrupt):
    """
    Stop the chain and dispatch a different request.

    When ``context`` is given the next request continues with it; otherwise
    the next request starts from a fresh context.
    """

    def __init__(self, destination: str, context: ExecutionContext | None = None) -> None:
        self.destination = destination
        self.context = context
        super().__init__(f"Request forward to {destination}")
