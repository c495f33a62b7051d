"""
Execution context shared by every command of one dispatch.

Invariants:
- Keys are unique; last write wins.
- Iteration follows insertion order.
- A key stored with ``None`` is present. ``has()`` checks membership and
  ``lookup()`` returns ``MISSING`` only for keys that were never stored.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from frontline.components.loggers import LoggerManager
    from frontline.core.output import OutputPort


class _Missing:
    """Type of the ``MISSING`` sentinel."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


class ExecutionContext:
    """
    Ordered key/value store passed from command to command.

    The dispatcher binds ``output`` for the duration of a dispatch; commands
    write client-visible output through ``write()``.
    """

    def __init__(
        self,
        initial: Mapping[str, Any] | ExecutionContext | None = None,
        logger_manager: LoggerManager | None = None,
        output: OutputPort | None = None,
    ) -> None:
        if isinstance(initial, ExecutionContext):
            self._data: dict[str, Any] = initial.to_dict()
        else:
            self._data = dict(initial or {})
        self.logger_manager = logger_manager
        self.output = output

    # --- Logging / output ---

    def log(self, message: object, category: str = "info") -> None:
        """Pass a message to the bound logger manager, if there is one."""
        if self.logger_manager is not None:
            self.logger_manager.log(message, category)

    def write(self, text: str) -> None:
        if self.output is None:
            sys.stdout.write(text)
            return
        self.output.write(text)

    # --- Data access ---

    def has(self, name: str) -> bool:
        return name in self._data

    def size(self) -> int:
        return len(self._data)

    def add(self, name: str, value: Any) -> None:
        """Add or replace a single entry."""
        self._data[name] = value

    def add_all(self, values: Mapping[str, Any]) -> None:
        """Merge ``values`` into the context, replacing entries with the same name."""
        self._data.update(values)

    def get(self, name: str, default: Any = None) -> Any:
        return self._data.get(name, default)

    def lookup(self, name: str) -> Any:
        """Return the stored value, or ``MISSING`` when the key is absent."""
        return self._data.get(name, MISSING)

    def remove(self, name: str) -> None:
        self._data.pop(name, None)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    def from_dict(self, values: Mapping[str, Any]) -> None:
        """Replace the whole context with ``values``."""
        self._data = dict(values)

    def items(self) -> Iterator[tuple[str, Any]]:
        return iter(list(self._data.items()))

    def __contains__(self, name: object) -> bool:
        return name in self._data

    def __getitem__(self, name: str) -> Any:
        return self._data[name]

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ExecutionContext({self._data!r})"
