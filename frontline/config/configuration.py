"""
Configuration - the collaborator the dispatcher asks for requests and facilities.

Key behaviors:
- Requests are looked up lazily, one name at a time
- Every ``get_request()`` call builds fresh command instances
- Unknown command/facility names fail when that request/facility is built,
  so a broken request never blocks the others
- ``group:`` entries splice the named group's commands into the chain
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from frontline.components.dispatch import CommandDescriptor, Request, is_legal_request_name
from frontline.components.params import ParamSpec
from frontline.core.context import MISSING
from frontline.core.errors import ConfigurationError, RequestNotFoundError
from frontline.core.ports.cache import RequestCachePort
from frontline.core.ports.logger import LoggerPort

from .loader import load_config
from .models import CommandConfig, CommandsConfig, FacilityConfig
from .registry import (
    CacheFactory,
    CommandRegistry,
    FacilityRegistry,
    LoggerFactory,
    default_cache_registry,
    default_command_registry,
    default_logger_registry,
)

logger = logging.getLogger(__name__)


class Configuration:
    """Builds Requests and facility backends from a validated CommandsConfig."""

    def __init__(
        self,
        config: CommandsConfig,
        *,
        commands: CommandRegistry | None = None,
        loggers: FacilityRegistry[LoggerFactory] | None = None,
        caches: FacilityRegistry[CacheFactory] | None = None,
    ) -> None:
        self.config = config
        self.commands = commands or default_command_registry()
        self.logger_factories = loggers or default_logger_registry()
        self.cache_factories = caches or default_cache_registry()
        self._requests = {r.name: r for r in config.requests}
        self._groups = {g.name: g for g in config.groups}

    @classmethod
    def from_path(cls, path: Path, **kwargs: Any) -> Configuration:
        return cls(load_config(path), **kwargs)

    @staticmethod
    def is_legal_request_name(request_name: object) -> bool:
        return is_legal_request_name(request_name)

    def has_request(self, request_name: str) -> bool:
        if not is_legal_request_name(request_name):
            raise RequestNotFoundError(str(request_name), "Illegal request name.")
        return request_name in self._requests

    def get_request(self, request_name: str) -> Request:
        """
        Build the command chain for ``request_name``.

        Raises:
            RequestNotFoundError: Unknown or illegal name. Treat as a 404.
            ConfigurationError: A command or group declaration is malformed.
        """
        if not is_legal_request_name(request_name):
            raise RequestNotFoundError(str(request_name), "Illegal request name.")

        request_config = self._requests.get(request_name)
        if request_config is None:
            raise RequestNotFoundError(request_name)

        descriptors: list[CommandDescriptor] = []
        for entry in request_config.commands:
            if entry.group is not None:
                descriptors.extend(self._import_group(entry.group))
            else:
                descriptors.append(self._create_descriptor(entry))

        return Request(
            name=request_name,
            commands=tuple(descriptors),
            caching=request_config.cache,
        )

    def get_loggers(self) -> dict[str, LoggerPort]:
        return {
            f.name: self._create_facility(self.logger_factories, f) for f in self.config.loggers
        }

    def get_caches(self) -> dict[str, RequestCachePort]:
        return {
            f.name: self._create_facility(self.cache_factories, f) for f in self.config.caches
        }

    def get_context_defaults(self) -> dict[str, Any]:
        return dict(self.config.context)

    def explain(self, request_name: str) -> str:
        """Describe a request's command chain and each command's parameters."""
        request = self.get_request(request_name)
        lines = [f"{request.name} (cache={'yes' if request.caching else 'no'})"]
        for d in request:
            lines.append(f"  {d.name} -> {d.invoke}")
            for spec in d.params.values():
                sources = " ".join(spec.sources) or "-"
                default = "no default" if spec.default is MISSING else f"default {spec.default!r}"
                lines.append(f"    {spec.name}: from {sources}, {default}")
        return "\n".join(lines)

    def _import_group(self, group_name: str) -> list[CommandDescriptor]:
        if not is_legal_request_name(group_name):
            raise ConfigurationError(f"Illegal group name: {group_name!r}")

        group = self._groups.get(group_name)
        if group is None:
            raise ConfigurationError(f"No group found with name {group_name}")

        descriptors = []
        for entry in group.commands:
            if entry.group is not None:
                raise ConfigurationError(
                    f"Group {group_name} references group {entry.group}; groups do not nest"
                )
            descriptors.append(self._create_descriptor(entry))
        return descriptors

    def _create_descriptor(self, entry: CommandConfig) -> CommandDescriptor:
        if not entry.invoke:
            raise ConfigurationError('Command is missing its "invoke" attribute.')

        name = entry.name or entry.invoke
        params = {}
        for pname, pconfig in entry.params.items():
            # Locators are parsed by the resolver when the command runs.
            # An explicit `value: null` is a default; an omitted value is not.
            params[pname] = ParamSpec(
                name=pname,
                sources=tuple(pconfig.sources),
                default=pconfig.value if "value" in pconfig.model_fields_set else MISSING,
            )

        command = self.commands.create(entry.invoke, name, entry.cache)
        return CommandDescriptor(
            name=name,
            command=command,
            params=params,
            cacheable=entry.cache,
            invoke=entry.invoke,
        )

    def _create_facility(self, registry: FacilityRegistry[Any], facility: FacilityConfig) -> Any:
        logger.debug(f"Creating {registry.kind} {facility.name} ({facility.invoke})")
        return registry.create(facility.invoke, facility.params)
