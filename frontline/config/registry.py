"""
Factory registries.

Explicit maps of invocation name -> factory, used instead of constructing
classes by name from configuration. Populated at startup; no dynamic imports.

Factory signatures:
    command:  factory(name: str, caching: bool) -> CommandPort
    logger:   factory(params: dict) -> LoggerPort
    cache:    factory(params: dict) -> RequestCachePort
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from frontline.adapters.fs_cache import FileSystemCache
from frontline.adapters.log_bridge import PythonLoggingBackend
from frontline.adapters.memory_cache import InMemoryCache
from frontline.adapters.output_injection import OutputInjectionLogger
from frontline.commands import (
    Abort,
    AddToContext,
    DumpContext,
    Echo,
    ForwardTo,
    Halt,
    PrintLogMessages,
)
from frontline.core.errors import ConfigurationError
from frontline.core.ports.cache import RequestCachePort
from frontline.core.ports.command import CommandPort
from frontline.core.ports.logger import LoggerPort

F = TypeVar("F", bound=Callable[..., Any])

CommandFactory = Callable[[str, bool], CommandPort]
LoggerFactory = Callable[[dict[str, Any]], LoggerPort]
CacheFactory = Callable[[dict[str, Any]], RequestCachePort]


class Registry(Generic[F]):
    """Name -> factory map for one kind of configurable object."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._factories: dict[str, F] = {}

    def register(self, name: str, factory: F, *, replace: bool = False) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"{self.kind} name must be a non-empty string")
        if name in self._factories and not replace:
            raise ValueError(f"{self.kind} already registered: {name}")
        self._factories[name] = factory

    def register_as(self, name: str) -> Callable[[F], F]:
        """Decorator form of ``register``."""

        def decorator(factory: F) -> F:
            self.register(name, factory)
            return factory

        return decorator

    def get(self, name: str) -> F:
        try:
            return self._factories[name]
        except KeyError:
            raise ConfigurationError(f"Unknown {self.kind} {name!r}") from None

    def has(self, name: str) -> bool:
        return name in self._factories

    def names(self) -> list[str]:
        return sorted(self._factories)


class CommandRegistry(Registry[CommandFactory]):
    def __init__(self) -> None:
        super().__init__("command")

    def create(self, invoke: str, name: str, caching: bool = False) -> CommandPort:
        return self.get(invoke)(name, caching)


class FacilityRegistry(Registry[F]):
    def create(self, invoke: str, params: dict[str, Any]) -> Any:
        try:
            return self.get(invoke)(dict(params))
        except TypeError as e:
            raise ConfigurationError(f"Bad params for {self.kind} {invoke!r}: {e}") from e


def default_command_registry() -> CommandRegistry:
    registry = CommandRegistry()
    registry.register("echo", Echo)
    registry.register("add_to_context", AddToContext)
    registry.register("forward", ForwardTo)
    registry.register("halt", Halt)
    registry.register("abort", Abort)
    registry.register("dump_context", DumpContext)
    registry.register("print_log_messages", PrintLogMessages)
    return registry


def default_logger_registry() -> FacilityRegistry[LoggerFactory]:
    registry: FacilityRegistry[LoggerFactory] = FacilityRegistry("logger")
    registry.register("python_logging", lambda params: PythonLoggingBackend(**params))
    registry.register("output_injection", lambda params: OutputInjectionLogger())
    return registry


def default_cache_registry() -> FacilityRegistry[CacheFactory]:
    registry: FacilityRegistry[CacheFactory] = FacilityRegistry("cache")
    registry.register("memory", lambda params: InMemoryCache())
    registry.register("filesystem", lambda params: FileSystemCache(params.get("path", ".cache")))
    return registry
