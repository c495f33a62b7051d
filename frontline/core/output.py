"""
Output writers.

Output is a writer handed down the call chain rather than global stdout
redirection, so a forwarded dispatch can buffer independently of its caller.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol, TextIO


class OutputPort(Protocol):
    """Anything that accepts text."""

    def write(self, text: str) -> None:
        ...


class StreamOutput:
    """Writes to a text stream. Defaults to the current ``sys.stdout``."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(text)


class StringOutput:
    """Accumulates everything written to it."""

    def __init__(self) -> None:
        self._buffer = io.StringIO()

    def write(self, text: str) -> None:
        self._buffer.write(text)

    def getvalue(self) -> str:
        return self._buffer.getvalue()


class BufferedOutput(StringOutput):
    """Holds output back until ``flush()`` hands it to the parent writer."""

    def __init__(self, parent: OutputPort) -> None:
        super().__init__()
        self.parent = parent

    def flush(self) -> None:
        contents = self.getvalue()
        self._buffer = io.StringIO()
        if contents:
            self.parent.write(contents)


@contextmanager
def capture(parent: OutputPort) -> Iterator[BufferedOutput]:
    """
    Buffer output written inside the block.

    The buffer is flushed to ``parent`` on every exit path, including
    exceptions.
    """
    buffer = BufferedOutput(parent)
    try:
        yield buffer
    finally:
        buffer.flush()
