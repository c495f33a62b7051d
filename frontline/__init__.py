"""
Frontline - a front-controller request dispatcher.

Named requests map to ordered command chains declared in a YAML commands
file. Each dispatch resolves command parameters from external sources,
runs the chain, and optionally caches the rendered output.
"""

from frontline.components.dispatch import Dispatcher
from frontline.config import Configuration
from frontline.core.context import MISSING, ExecutionContext

__version__ = "0.1.0"

__all__ = [
    "Configuration",
    "Dispatcher",
    "ExecutionContext",
    "MISSING",
    "__version__",
]
