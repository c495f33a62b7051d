"""
Params component models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from frontline.core.context import MISSING


@dataclass(frozen=True)
class ParamSpec:
    """
    Declared parameter of a command.

    ``sources`` holds ``kind:key`` locators tried in order; ``default`` is used
    when none of them yields a value. A ``MISSING`` default means the
    parameter is not passed at all in that case.
    """

    name: str
    sources: tuple[str, ...] = ()
    default: Any = MISSING


@dataclass(frozen=True)
class SourceLocator:
    """Parsed ``kind:key`` locator."""

    kind: str
    key: str
