"""
Command port.

One implementation per unit of work. ``execute`` either returns (the value is
stored in the context under the command's name), raises ``CommandError``
(recoverable) or raises one of the control-flow interrupts.
"""

from __future__ import annotations

from typing import Any, Protocol

from frontline.core.context import ExecutionContext


class CommandPort(Protocol):
    """Capability interface for a command."""

    name: str

    def execute(self, params: dict[str, Any], context: ExecutionContext) -> Any:
        """Run the command with resolved parameters."""
        ...

    def is_cacheable(self) -> bool:
        """Whether this command's context contributions are safe to cache."""
        ...
