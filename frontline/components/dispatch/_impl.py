"""
Dispatcher and CommandExecutor - the request execution engine.

Key behaviors:
- Request names are validated before any configuration or cache lookup
- A cache hit short-circuits the chain: no command runs
- A cache miss buffers the chain's output; the buffer is flushed on every
  exit path, and written to the cache only when every command ran
- Recoverable failures are logged and the chain continues; aborts and
  forwards stop it
- Each top-level dispatch runs in its own DispatchScope; forwards share it

Invariants:
- Commands run in declared order, each at most once per dispatch
- A command's return value is stored in the context under its name
- Aborted or forwarded chains never populate the cache at their own level
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from frontline.components.cache import CacheManager
from frontline.components.loggers import LoggerManager
from frontline.components.params import ParameterResolver, ParameterSources
from frontline.core.context import ExecutionContext
from frontline.core.errors import (
    AbortRequest,
    CommandError,
    ConfigurationError,
    ForwardRequest,
    Interrupt,
    RequestNotFoundError,
)
from frontline.core.output import OutputPort, StreamOutput, capture
from frontline.core.ports.logger import LogCategory
from frontline.core.scope import dispatch_scope
from frontline.core.signals import (
    CONTINUE,
    SILENT_ABORT,
    Continue,
    FatalAbort,
    Forward,
    Recoverable,
    Signal,
    SilentAbort,
)

from .models import CommandDescriptor, Request
from .ports import FacilityConfigPort, RequestConfigPort

logger = logging.getLogger(__name__)

REQUEST_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
CACHE_KEY_PREFIX = "request-"
DEFAULT_MAX_FORWARD_DEPTH = 16


def is_legal_request_name(request_name: object) -> bool:
    """Request names are one or more letters, digits, dashes or underscores."""
    return isinstance(request_name, str) and REQUEST_NAME_PATTERN.match(request_name) is not None


def gen_cache_key(request_name: str) -> str:
    return f"{CACHE_KEY_PREFIX}{request_name}"


class CommandExecutor:
    """Runs exactly one command and reports what happened as a Signal."""

    def __init__(self, resolver: ParameterResolver) -> None:
        self.resolver = resolver

    def run(self, descriptor: CommandDescriptor, context: ExecutionContext) -> Signal:
        """
        Resolve parameters, execute the command, store its result.

        Raises:
            ConfigurationError: If a parameter declaration cannot be resolved.
        """
        params = self.resolver.resolve(descriptor.params, context)

        try:
            result = descriptor.command.execute(params, context)
        except CommandError as e:
            return Recoverable(e)
        except AbortRequest as e:
            return FatalAbort(e)
        except ForwardRequest as e:
            return Forward(e.destination, e.context)
        except Interrupt:
            return SILENT_ABORT

        context.add(descriptor.name, result)
        return CONTINUE


@dataclass(frozen=True)
class _ChainOutcome:
    completed: bool
    context: ExecutionContext


class Dispatcher:
    """
    Front controller.

    Holds the process-wide collaborators (configuration, loggers, caches);
    everything that belongs to a single dispatch (context, sources, output
    writer) is passed down the call chain.
    """

    def __init__(
        self,
        config: RequestConfigPort,
        *,
        logger_manager: LoggerManager | None = None,
        cache_manager: CacheManager | None = None,
        initial_config: Mapping[str, Any] | None = None,
        sources: ParameterSources | None = None,
        output: OutputPort | None = None,
        max_forward_depth: int = DEFAULT_MAX_FORWARD_DEPTH,
    ) -> None:
        self.config = config
        self.logger_manager = logger_manager if logger_manager is not None else LoggerManager()
        self.cache_manager = cache_manager if cache_manager is not None else CacheManager()
        self.initial_config = dict(initial_config or {})
        self.sources = sources if sources is not None else ParameterSources()
        self.output = output if output is not None else StreamOutput()
        self.max_forward_depth = max_forward_depth

    @classmethod
    def from_config(
        cls,
        config: FacilityConfigPort,
        *,
        initial_config: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Dispatcher:
        """Build a dispatcher whose loggers and caches come from ``config``."""
        seed = dict(config.get_context_defaults())
        seed.update(initial_config or {})
        return cls(
            config,
            logger_manager=LoggerManager(config.get_loggers()),
            cache_manager=CacheManager(config.get_caches()),
            initial_config=seed,
            **kwargs,
        )

    def gen_cache_key(self, request_name: str) -> str:
        return gen_cache_key(request_name)

    def new_context(self) -> ExecutionContext:
        """Fresh context seeded with process-level config and bound to the loggers."""
        return ExecutionContext(self.initial_config, self.logger_manager)

    def handle_request(
        self,
        request_name: str,
        initial_context: ExecutionContext | None = None,
        *,
        sources: ParameterSources | None = None,
        out: OutputPort | None = None,
    ) -> ExecutionContext:
        """
        Execute one named request end to end.

        Args:
            request_name: Name of the request to run.
            initial_context: Context to run against instead of a fresh one.
            sources: External parameter sources for this dispatch.
            out: Writer receiving the request's output.

        Returns:
            The context the chain finished with. After a forward this is the
            forwarded dispatch's context.

        Raises:
            RequestNotFoundError: Unknown or illegal request name.
            ConfigurationError: Malformed declaration, or forward depth exceeded.
        """
        with dispatch_scope():
            return self._dispatch(
                request_name,
                initial_context,
                sources if sources is not None else self.sources,
                out if out is not None else self.output,
                depth=0,
            )

    def _dispatch(
        self,
        request_name: str,
        initial_context: ExecutionContext | None,
        sources: ParameterSources,
        out: OutputPort,
        depth: int,
    ) -> ExecutionContext:
        if depth > self.max_forward_depth:
            raise ConfigurationError(
                f"Forward depth exceeded {self.max_forward_depth} at request {request_name}"
            )
        if not is_legal_request_name(request_name):
            raise RequestNotFoundError(str(request_name), "Illegal request name.")

        request = self.config.get_request(request_name)
        executor = CommandExecutor(ParameterResolver(sources))

        if not request.caching:
            context = initial_context if initial_context is not None else self.new_context()
            return self._run_chain(request, context, executor, sources, out, depth).context

        cache_key = self.gen_cache_key(request_name)
        cached = self.cache_manager.get(cache_key)
        if cached is not None:
            logger.debug(f"Serving {request_name} from cache")
            out.write(cached)
            return initial_context if initial_context is not None else self.new_context()

        context = initial_context if initial_context is not None else self.new_context()
        with capture(out) as buffer:
            outcome = self._run_chain(request, context, executor, sources, buffer, depth)
            if outcome.completed:
                self.cache_manager.set(cache_key, buffer.getvalue())
                logger.debug(f"Cached output of {request_name} under {cache_key}")
        return outcome.context

    def _run_chain(
        self,
        request: Request,
        context: ExecutionContext,
        executor: CommandExecutor,
        sources: ParameterSources,
        out: OutputPort,
        depth: int,
    ) -> _ChainOutcome:
        previous_output = context.output
        context.output = out
        try:
            for descriptor in request:
                signal = executor.run(descriptor, context)

                if isinstance(signal, Continue):
                    continue

                if isinstance(signal, Recoverable):
                    self.logger_manager.log(signal.cause, LogCategory.WARNING)
                    continue

                if isinstance(signal, FatalAbort):
                    logger.info(f"Request {request.name} aborted at {descriptor.name}")
                    self.logger_manager.log(signal.cause, LogCategory.ERROR)
                    return _ChainOutcome(completed=False, context=context)

                if isinstance(signal, SilentAbort):
                    return _ChainOutcome(completed=False, context=context)

                if isinstance(signal, Forward):
                    logger.info(f"Request {request.name} forwarded to {signal.destination}")
                    forwarded = self._dispatch(
                        signal.destination, signal.context, sources, out, depth + 1
                    )
                    return _ChainOutcome(completed=False, context=forwarded)

                raise TypeError(f"Unexpected signal {signal!r} from {descriptor.name}")
        finally:
            context.output = previous_output

        return _ChainOutcome(completed=True, context=context)
