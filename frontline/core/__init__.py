from frontline.core.context import MISSING, ExecutionContext
from frontline.core.errors import (
    AbortRequest,
    CommandError,
    ConfigurationError,
    ForwardRequest,
    FrontlineError,
    Interrupt,
    RequestNotFoundError,
)
from frontline.core.output import (
    BufferedOutput,
    OutputPort,
    StreamOutput,
    StringOutput,
    capture,
)
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

__all__ = [
    # Context
    "MISSING",
    "ExecutionContext",
    # Errors
    "AbortRequest",
    "CommandError",
    "ConfigurationError",
    "ForwardRequest",
    "FrontlineError",
    "Interrupt",
    "RequestNotFoundError",
    # Output
    "BufferedOutput",
    "OutputPort",
    "StreamOutput",
    "StringOutput",
    "capture",
    # Signals
    "CONTINUE",
    "SILENT_ABORT",
    "Continue",
    "FatalAbort",
    "Forward",
    "Recoverable",
    "Signal",
    "SilentAbort",
]
