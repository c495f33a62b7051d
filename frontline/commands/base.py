"""
BaseCommand - convenience base class for commands.

Subclasses declare the parameters they expect and implement ``do_command()``.
The return value of ``do_command()`` is what the executor stores in the
context under the command's name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from frontline.core.context import ExecutionContext
from frontline.core.errors import CommandError

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off", ""}


@dataclass(frozen=True)
class Expectation:
    """
    Declaration of one expected parameter.

    ``validate`` receives ``(name, value)`` and returns the value to use; it
    should raise ``CommandError`` (or an interrupt) when validation fails.
    """

    description: str = ""
    required: bool = True
    type: type | None = None
    validate: Callable[[str, Any], Any] | None = None


class BaseCommand(ABC):
    """Validates declared parameters, then runs ``do_command()``."""

    def __init__(self, name: str, caching: bool = False) -> None:
        self.name = name
        self.caching = caching
        self.params: dict[str, Any] = {}
        self.context: ExecutionContext | None = None

    def is_cacheable(self) -> bool:
        return True

    @abstractmethod
    def expects(self) -> dict[str, Expectation]:
        """Parameters this command expects, by name."""

    @abstractmethod
    def do_command(self) -> Any:
        """Do the work. The return value goes into the context."""

    def execute(self, params: dict[str, Any], context: ExecutionContext) -> Any:
        self.params = dict(params)
        for name, expectation in self.expects().items():
            if name not in params:
                if expectation.required:
                    raise CommandError(f"Expected param {name} in command {self.name}")
                self.params[name] = None
                continue

            value = params[name]
            if value is None:
                # Present but null: passed through untouched
                continue

            if expectation.type is not None:
                value = self._coerce(name, value, expectation.type)
            if expectation.validate is not None:
                value = expectation.validate(name, value)
            self.params[name] = value

        self.context = context
        return self.do_command()

    def explain(self) -> str:
        """Human-readable listing of the expected parameters."""
        lines = []
        for name, expectation in self.expects().items():
            type_name = expectation.type.__name__ if expectation.type else "any"
            flag = "" if expectation.required else ", optional"
            lines.append(f"{name} ({type_name}{flag}): {expectation.description}")
        return "\n".join(lines)

    def _coerce(self, name: str, value: Any, expected: type) -> Any:
        if isinstance(value, expected):
            return value

        if expected is bool and isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_VALUES:
                return True
            if lowered in _FALSE_VALUES:
                return False
        elif expected in (int, float, str):
            try:
                return expected(value)
            except (TypeError, ValueError):
                pass

        raise CommandError(
            f"Expected {expected.__name__} for param {name} in command {self.name}, "
            f"got {type(value).__name__}"
        )
