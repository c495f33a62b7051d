"""
Tests for Configuration: building Requests and facilities from a commands file.
"""

from __future__ import annotations

import pytest

from frontline.adapters.log_bridge import PythonLoggingBackend
from frontline.adapters.memory_cache import InMemoryCache
from frontline.commands import Echo
from frontline.config import Configuration, load_config_text
from frontline.core.context import MISSING
from frontline.core.errors import ConfigurationError, RequestNotFoundError

SAMPLE = """
context:
  site: Example
loggers:
  - name: app
    invoke: python_logging
    params:
      logger_name: frontline.test
caches:
  - name: fast
    invoke: memory
groups:
  - name: header
    commands:
      - name: title
        invoke: echo
        params:
          text: "<h1>"
  - name: nested
    commands:
      - group: header
requests:
  - name: home
    cache: true
    commands:
      - group: header
      - name: body
        invoke: echo
        cache: true
        params:
          text:
            from: get:text
            value: fallback
  - name: plain
    commands:
      - invoke: echo
  - name: broken_group
    commands:
      - group: missing
  - name: nested_group
    commands:
      - group: nested
  - name: unknown_command
    commands:
      - invoke: nope
  - name: no_invoke
    commands:
      - name: orphan
  - name: bad_locator
    commands:
      - invoke: echo
        params:
          text:
            from: bogus:text
"""


@pytest.fixture
def configuration() -> Configuration:
    return Configuration(load_config_text(SAMPLE))


class TestGetRequest:
    def test_builds_chain_with_group_expanded(self, configuration) -> None:
        request = configuration.get_request("home")

        assert request.name == "home"
        assert request.caching is True
        assert [d.name for d in request] == ["title", "body"]
        assert all(isinstance(d.command, Echo) for d in request)

    def test_param_specs(self, configuration) -> None:
        body = configuration.get_request("home").commands[1]
        spec = body.params["text"]

        assert spec.sources == ("get:text",)
        assert spec.default == "fallback"
        assert body.cacheable is True
        assert body.invoke == "echo"

    def test_param_without_value_has_no_default(self, configuration) -> None:
        spec = configuration.get_request("bad_locator").commands[0].params["text"]

        assert spec.default is MISSING

    def test_explicit_null_value_is_a_default(self) -> None:
        configuration = Configuration(
            load_config_text(
                "requests:\n  - name: r\n    commands:\n      - invoke: echo\n"
                "        params:\n          text: null\n"
            )
        )

        assert configuration.get_request("r").commands[0].params["text"].default is None

    def test_name_defaults_to_invoke(self, configuration) -> None:
        request = configuration.get_request("plain")

        assert request.commands[0].name == "echo"
        assert request.caching is False

    def test_fresh_instances_per_call(self, configuration) -> None:
        first = configuration.get_request("home").commands[0].command
        second = configuration.get_request("home").commands[0].command

        assert first is not second

    def test_unknown_request(self, configuration) -> None:
        with pytest.raises(RequestNotFoundError):
            configuration.get_request("nowhere")

    def test_illegal_request_name(self, configuration) -> None:
        with pytest.raises(RequestNotFoundError, match="Illegal"):
            configuration.get_request("../home")

    def test_missing_group(self, configuration) -> None:
        with pytest.raises(ConfigurationError, match="No group found"):
            configuration.get_request("broken_group")

    def test_groups_do_not_nest(self, configuration) -> None:
        with pytest.raises(ConfigurationError, match="do not nest"):
            configuration.get_request("nested_group")

    def test_unknown_command(self, configuration) -> None:
        with pytest.raises(ConfigurationError, match="Unknown command"):
            configuration.get_request("unknown_command")

    def test_missing_invoke(self, configuration) -> None:
        with pytest.raises(ConfigurationError, match="invoke"):
            configuration.get_request("no_invoke")

    def test_bad_locator_loads_fine(self, configuration) -> None:
        request = configuration.get_request("bad_locator")

        assert request.commands[0].params["text"].sources == ("bogus:text",)

    def test_broken_request_does_not_block_others(self, configuration) -> None:
        with pytest.raises(ConfigurationError):
            configuration.get_request("unknown_command")

        assert len(configuration.get_request("home")) == 2

    def test_has_request(self, configuration) -> None:
        assert configuration.has_request("home") is True
        assert configuration.has_request("nowhere") is False


class TestFacilities:
    def test_loggers(self, configuration) -> None:
        loggers = configuration.get_loggers()

        assert list(loggers) == ["app"]
        assert isinstance(loggers["app"], PythonLoggingBackend)

    def test_caches(self, configuration) -> None:
        caches = configuration.get_caches()

        assert list(caches) == ["fast"]
        assert isinstance(caches["fast"], InMemoryCache)

    def test_context_defaults_are_a_copy(self, configuration) -> None:
        defaults = configuration.get_context_defaults()
        defaults["site"] = "changed"

        assert configuration.get_context_defaults() == {"site": "Example"}

    def test_unknown_facility(self) -> None:
        configuration = Configuration(
            load_config_text("caches:\n  - name: c\n    invoke: redis\n")
        )

        with pytest.raises(ConfigurationError, match="Unknown cache"):
            configuration.get_caches()


class TestExplain:
    def test_describes_chain(self, configuration) -> None:
        text = configuration.explain("home")

        assert text.splitlines()[0] == "home (cache=yes)"
        assert "  body -> echo" in text
        assert "text: from get:text, default 'fallback'" in text

    def test_marks_params_without_default(self, configuration) -> None:
        assert "text: from bogus:text, no default" in configuration.explain("bad_locator")
