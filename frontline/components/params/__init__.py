"""
Params component - command parameter resolution.
"""

from ._impl import (
    SOURCE_KINDS,
    ChainedSource,
    ContextSource,
    ParameterResolver,
    ParameterSources,
    parse_locator,
)
from .models import ParamSpec, SourceLocator

__all__ = [
    # Resolver
    "ParameterResolver",
    "ParameterSources",
    "parse_locator",
    "SOURCE_KINDS",
    # Sources
    "ChainedSource",
    "ContextSource",
    # Models
    "ParamSpec",
    "SourceLocator",
]
