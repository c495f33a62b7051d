"""
Tests for the factory registries.
"""

from __future__ import annotations

import pytest

from frontline.adapters.fs_cache import FileSystemCache
from frontline.adapters.log_bridge import PythonLoggingBackend
from frontline.adapters.memory_cache import InMemoryCache
from frontline.commands import Echo
from frontline.config import (
    CommandRegistry,
    Registry,
    default_cache_registry,
    default_command_registry,
    default_logger_registry,
)
from frontline.core.errors import ConfigurationError


class TestRegistry:
    def test_register_and_get(self) -> None:
        registry: Registry = Registry("widget")
        factory = object
        registry.register("w", factory)

        assert registry.get("w") is factory
        assert registry.has("w") is True
        assert registry.names() == ["w"]

    def test_duplicate_registration_raises(self) -> None:
        registry: Registry = Registry("widget")
        registry.register("w", object)

        with pytest.raises(ValueError, match="already registered"):
            registry.register("w", dict)

    def test_replace_allows_override(self) -> None:
        registry: Registry = Registry("widget")
        registry.register("w", object)
        registry.register("w", dict, replace=True)

        assert registry.get("w") is dict

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            Registry("widget").register("  ", object)

    def test_unknown_name_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown widget 'nope'"):
            Registry("widget").get("nope")

    def test_register_as_decorator(self) -> None:
        registry = CommandRegistry()

        @registry.register_as("shout")
        class Shout(Echo):
            pass

        command = registry.create("shout", "loud", False)

        assert isinstance(command, Shout)
        assert command.name == "loud"


class TestDefaultRegistries:
    def test_stock_commands_registered(self) -> None:
        names = default_command_registry().names()

        assert names == [
            "abort",
            "add_to_context",
            "dump_context",
            "echo",
            "forward",
            "halt",
            "print_log_messages",
        ]

    def test_command_create_passes_name_and_caching(self) -> None:
        command = default_command_registry().create("echo", "say", True)

        assert isinstance(command, Echo)
        assert command.name == "say"
        assert command.caching is True

    def test_logger_factories(self) -> None:
        backend = default_logger_registry().create("python_logging", {"logger_name": "x.y"})

        assert isinstance(backend, PythonLoggingBackend)
        assert backend.logger_name == "x.y"

    def test_bad_facility_params_are_configuration_errors(self) -> None:
        with pytest.raises(ConfigurationError, match="Bad params"):
            default_logger_registry().create("python_logging", {"bogus": 1})

    def test_cache_factories(self, tmp_path) -> None:
        registry = default_cache_registry()

        assert isinstance(registry.create("memory", {}), InMemoryCache)
        fs = registry.create("filesystem", {"path": str(tmp_path / "c")})
        assert isinstance(fs, FileSystemCache)
