"""
Stock commands available to every configuration.
"""

from __future__ import annotations

from typing import Any

from frontline.core.errors import AbortRequest, CommandError, ForwardRequest, Interrupt

from .base import BaseCommand, Expectation


class Echo(BaseCommand):
    """Write ``text`` to the output. A null ``text`` writes nothing."""

    def expects(self) -> dict[str, Expectation]:
        return {"text": Expectation("The text to write.", type=str)}

    def do_command(self) -> Any:
        text = self.params["text"]
        assert self.context is not None
        if text is not None:
            self.context.write(text)
        return text


class AddToContext(BaseCommand):
    """Add every parameter to the context under its own name."""

    def expects(self) -> dict[str, Expectation]:
        return {}

    def do_command(self) -> Any:
        assert self.context is not None
        self.context.add_all(self.params)
        return None


class ForwardTo(BaseCommand):
    """Forward to another request, by default carrying the current context."""

    def is_cacheable(self) -> bool:
        return False

    def expects(self) -> dict[str, Expectation]:
        return {
            "request": Expectation("Name of the request to forward to.", type=str),
            "carry_context": Expectation(
                "Continue with the current context.", required=False, type=bool
            ),
        }

    def do_command(self) -> Any:
        carry = self.params["carry_context"]
        context = self.context if carry is None or carry else None
        raise ForwardRequest(self.params["request"], context)


class Halt(BaseCommand):
    """Write optional ``text`` and stop the chain without logging."""

    def is_cacheable(self) -> bool:
        return False

    def expects(self) -> dict[str, Expectation]:
        return {"text": Expectation("Text to write before stopping.", required=False, type=str)}

    def do_command(self) -> Any:
        assert self.context is not None
        if self.params["text"]:
            self.context.write(self.params["text"])
        raise Interrupt(f"Halted by {self.name}")


class Abort(BaseCommand):
    """Stop the chain with a logged fatal error."""

    def is_cacheable(self) -> bool:
        return False

    def expects(self) -> dict[str, Expectation]:
        return {"message": Expectation("Error message to log.", required=False, type=str)}

    def do_command(self) -> Any:
        raise AbortRequest(self.params["message"] or f"Request aborted by {self.name}")


class DumpContext(BaseCommand):
    """Write every context entry as ``name: value`` lines."""

    def expects(self) -> dict[str, Expectation]:
        return {}

    def do_command(self) -> Any:
        assert self.context is not None
        for name, value in self.context.items():
            self.context.write(f"{name}: {value!r}\n")
        return None


class PrintLogMessages(BaseCommand):
    """Write the entries collected by a named logger backend, then clear them."""

    def is_cacheable(self) -> bool:
        return False

    def expects(self) -> dict[str, Expectation]:
        return {"logger": Expectation("Name of the collecting logger backend.", type=str)}

    def do_command(self) -> Any:
        assert self.context is not None
        name = self.params["logger"]
        manager = self.context.logger_manager
        backend = manager.get_logger_by_name(name) if manager is not None else None
        if backend is None or not hasattr(backend, "print_messages"):
            raise CommandError(f"No collecting logger named {name} for command {self.name}")

        count = len(backend.get_messages())
        backend.print_messages(self.context)
        backend.clear()
        return count
