"""
Dispatch component input/output models.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from frontline.components.params.models import ParamSpec
from frontline.core.ports.command import CommandPort

if TYPE_CHECKING:
    from frontline.components.params import ParameterSources
    from frontline.core.context import ExecutionContext

# --- Request Model ---


@dataclass(frozen=True)
class CommandDescriptor:
    """One step of a request: the command instance plus its parameter declarations."""

    name: str
    command: CommandPort
    params: Mapping[str, ParamSpec] = field(default_factory=dict)
    cacheable: bool = False
    invoke: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))


@dataclass(frozen=True)
class Request:
    """Ordered command chain plus the caching-eligibility flag."""

    name: str
    commands: tuple[CommandDescriptor, ...] = ()
    caching: bool = False

    def __iter__(self) -> Iterator[CommandDescriptor]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)


# --- Input Models ---


@dataclass(frozen=True)
class HandleRequestInput:
    """Input for dispatching one named request."""

    request_name: str
    initial_context: ExecutionContext | None = None
    sources: ParameterSources | None = None


# --- Output Models ---


class DispatchStatus(str, Enum):
    """Caller-visible outcome of a dispatch."""

    OK = "ok"
    NOT_FOUND = "not_found"
    CONFIG_ERROR = "config_error"


@dataclass(frozen=True)
class DispatchOutput:
    """Output of a dispatch: the rendered body and the final context."""

    request_name: str
    body: str
    status: DispatchStatus = DispatchStatus.OK
    context: ExecutionContext | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.status is DispatchStatus.OK

    def context_dict(self) -> dict[str, Any]:
        return self.context.to_dict() if self.context is not None else {}
