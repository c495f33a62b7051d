"""
Tests for CommandExecutor: one command in, one signal out.
"""

from __future__ import annotations

import pytest
from conftest import FnCommand

from frontline.adapters.sources import MappingSource
from frontline.components.dispatch import CommandDescriptor, CommandExecutor
from frontline.components.params import ParameterResolver, ParameterSources, ParamSpec
from frontline.core.context import ExecutionContext
from frontline.core.errors import (
    AbortRequest,
    CommandError,
    ConfigurationError,
    ForwardRequest,
    Interrupt,
)
from frontline.core.signals import (
    CONTINUE,
    SILENT_ABORT,
    FatalAbort,
    Forward,
    Recoverable,
)


def raising(exc: BaseException):
    def fn(params, context):
        raise exc

    return fn


@pytest.fixture
def executor() -> CommandExecutor:
    return CommandExecutor(ParameterResolver())


@pytest.fixture
def ctx() -> ExecutionContext:
    return ExecutionContext()


class TestNormalReturn:
    def test_result_stored_under_command_name(self, executor, ctx) -> None:
        descriptor = CommandDescriptor("answer", FnCommand("answer", lambda p, c: 42))

        assert executor.run(descriptor, ctx) is CONTINUE
        assert ctx["answer"] == 42

    def test_none_result_is_stored(self, executor, ctx) -> None:
        descriptor = CommandDescriptor("nothing", FnCommand("nothing", lambda p, c: None))

        executor.run(descriptor, ctx)

        assert ctx.has("nothing") is True
        assert ctx["nothing"] is None

    def test_params_are_resolved_before_execute(self, ctx) -> None:
        command = FnCommand("cmd", lambda p, c: p["q"])
        descriptor = CommandDescriptor(
            "cmd", command, params={"q": ParamSpec("q", ("get:q",), "d")}
        )
        executor = CommandExecutor(
            ParameterResolver(ParameterSources(get=MappingSource({"q": "v"})))
        )

        executor.run(descriptor, ctx)

        assert command.seen_params == [{"q": "v"}]
        assert ctx["cmd"] == "v"


class TestSignals:
    def test_command_error_is_recoverable(self, executor, ctx) -> None:
        error = CommandError("soft")
        descriptor = CommandDescriptor("c", FnCommand("c", raising(error)))

        signal = executor.run(descriptor, ctx)

        assert signal == Recoverable(error)
        assert ctx.has("c") is False

    def test_abort_is_fatal(self, executor, ctx) -> None:
        error = AbortRequest("hard")
        descriptor = CommandDescriptor("c", FnCommand("c", raising(error)))

        assert executor.run(descriptor, ctx) == FatalAbort(error)

    def test_interrupt_is_silent(self, executor, ctx) -> None:
        descriptor = CommandDescriptor("c", FnCommand("c", raising(Interrupt("stop"))))

        assert executor.run(descriptor, ctx) is SILENT_ABORT

    def test_forward_carries_destination_and_context(self, executor, ctx) -> None:
        carried = ExecutionContext({"k": "v"})
        descriptor = CommandDescriptor(
            "c", FnCommand("c", raising(ForwardRequest("next", carried)))
        )

        signal = executor.run(descriptor, ctx)

        assert isinstance(signal, Forward)
        assert signal.destination == "next"
        assert signal.context is carried


class TestPropagation:
    def test_unexpected_exception_propagates(self, executor, ctx) -> None:
        descriptor = CommandDescriptor("c", FnCommand("c", raising(KeyError("bug"))))

        with pytest.raises(KeyError):
            executor.run(descriptor, ctx)

    def test_bad_locator_propagates(self, executor, ctx) -> None:
        command = FnCommand("c", lambda p, c: None)
        descriptor = CommandDescriptor(
            "c", command, params={"q": ParamSpec("q", ("nope:q",))}
        )

        with pytest.raises(ConfigurationError):
            executor.run(descriptor, ctx)
        assert command.calls == 0
