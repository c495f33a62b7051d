"""
Dispatch component - front-controller request execution.
"""

from ._impl import (
    CACHE_KEY_PREFIX,
    DEFAULT_MAX_FORWARD_DEPTH,
    CommandExecutor,
    Dispatcher,
    gen_cache_key,
    is_legal_request_name,
)
from .component import run
from .models import (
    CommandDescriptor,
    DispatchOutput,
    DispatchStatus,
    HandleRequestInput,
    Request,
)
from .ports import FacilityConfigPort, RequestConfigPort

__all__ = [
    # Entry points
    "run",
    # Engine
    "CommandExecutor",
    "Dispatcher",
    "gen_cache_key",
    "is_legal_request_name",
    "CACHE_KEY_PREFIX",
    "DEFAULT_MAX_FORWARD_DEPTH",
    # Models
    "CommandDescriptor",
    "DispatchOutput",
    "DispatchStatus",
    "HandleRequestInput",
    "Request",
    # Ports
    "FacilityConfigPort",
    "RequestConfigPort",
]
