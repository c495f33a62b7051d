"""
Output injection logger.

Collects log entries as HTML fragments so a page can render them, e.g. a
debug panel at the bottom of a response.

Entries logged during a dispatch belong to that dispatch only: they are kept
in the active DispatchScope and disappear with it. Entries logged outside any
dispatch go to a process-level list.
"""

from __future__ import annotations

import html

from frontline.core.output import OutputPort
from frontline.core.scope import current_scope


class OutputInjectionLogger:
    """Implements LoggerPort by keeping rendered entries in memory."""

    def __init__(self) -> None:
        self._items: list[str] = []
        self._scope_key = f"output_injection:{id(self)}"

    def init(self) -> None:
        self._items = []

    def log(self, message: str, category: str) -> None:
        self._entries().append(
            f'<div class="log-item {html.escape(category)}">{html.escape(message)}</div>'
        )

    def get_messages(self) -> list[str]:
        return list(self._entries())

    def print_messages(self, out: OutputPort) -> None:
        out.write("".join(self._entries()))

    def clear(self) -> None:
        self._entries().clear()

    def _entries(self) -> list[str]:
        scope = current_scope()
        if scope is None:
            return self._items
        return scope.data.setdefault(self._scope_key, [])
