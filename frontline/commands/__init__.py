from .base import BaseCommand, Expectation
from .stock import (
    Abort,
    AddToContext,
    DumpContext,
    Echo,
    ForwardTo,
    Halt,
    PrintLogMessages,
)

__all__ = [
    "BaseCommand",
    "Expectation",
    # Stock commands
    "Abort",
    "AddToContext",
    "DumpContext",
    "Echo",
    "ForwardTo",
    "Halt",
    "PrintLogMessages",
]
