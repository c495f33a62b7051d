from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

import pytest

from frontline.adapters.memory_cache import InMemoryCache
from frontline.components.cache import CacheManager
from frontline.components.dispatch import CommandDescriptor, Dispatcher, Request
from frontline.components.loggers import LoggerManager
from frontline.components.params import ParamSpec
from frontline.core.context import ExecutionContext
from frontline.core.errors import RequestNotFoundError
from frontline.core.output import StringOutput

# --- Fakes ---


class RecordingLogger:
    """LoggerPort that keeps every (message, category) it receives."""

    def __init__(self) -> None:
        self.init_calls = 0
        self.records: list[tuple[str, str]] = []

    def init(self) -> None:
        self.init_calls += 1

    def log(self, message: str, category: str) -> None:
        self.records.append((message, category))

    def categories(self) -> list[str]:
        return [c for _, c in self.records]


class CountingCache(InMemoryCache):
    """InMemoryCache that counts reads and writes."""

    def __init__(self) -> None:
        super().__init__()
        self.gets = 0
        self.sets = 0

    def get(self, key: str) -> str | None:
        self.gets += 1
        return super().get(key)

    def set(self, key: str, value: str) -> None:
        self.sets += 1
        super().set(key, value)


class FnCommand:
    """CommandPort around a plain function ``fn(params, context)``."""

    def __init__(
        self,
        name: str,
        fn: Callable[[dict[str, Any], ExecutionContext], Any],
        cacheable: bool = True,
    ) -> None:
        self.name = name
        self.fn = fn
        self.calls = 0
        self.seen_params: list[dict[str, Any]] = []
        self._cacheable = cacheable

    def execute(self, params: dict[str, Any], context: ExecutionContext) -> Any:
        self.calls += 1
        self.seen_params.append(dict(params))
        return self.fn(params, context)

    def is_cacheable(self) -> bool:
        return self._cacheable


class DictRequestConfig:
    """RequestConfigPort over a plain dict of Requests."""

    def __init__(self, requests: Mapping[str, Request]) -> None:
        self.requests = dict(requests)
        self.lookups: list[str] = []

    def get_request(self, request_name: str) -> Request:
        self.lookups.append(request_name)
        try:
            return self.requests[request_name]
        except KeyError:
            raise RequestNotFoundError(request_name) from None


def step(
    name: str,
    fn: Callable[[dict[str, Any], ExecutionContext], Any],
    params: Mapping[str, ParamSpec] | None = None,
) -> CommandDescriptor:
    return CommandDescriptor(name=name, command=FnCommand(name, fn), params=params or {})


def writer(text: str) -> Callable[[dict[str, Any], ExecutionContext], Any]:
    def fn(params: dict[str, Any], context: ExecutionContext) -> Any:
        context.write(text)
        return text

    return fn


# --- Fixtures ---


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def counting_cache() -> CountingCache:
    return CountingCache()


@pytest.fixture
def out() -> StringOutput:
    return StringOutput()


@pytest.fixture
def make_dispatcher(
    recording_logger: RecordingLogger, counting_cache: CountingCache
) -> Callable[..., Dispatcher]:
    """Build a Dispatcher over the given Requests with recording facilities."""

    def _make(*requests: Request, **kwargs: Any) -> Dispatcher:
        config = DictRequestConfig({r.name: r for r in requests})
        return Dispatcher(
            config,
            logger_manager=LoggerManager({"recording": recording_logger}),
            cache_manager=CacheManager({"memory": counting_cache}),
            **kwargs,
        )

    return _make
