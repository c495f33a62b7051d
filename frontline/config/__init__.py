from .configuration import Configuration
from .loader import load_config, load_config_text
from .models import (
    CommandConfig,
    CommandsConfig,
    FacilityConfig,
    GroupConfig,
    ParamConfig,
    RequestConfig,
)
from .registry import (
    CommandRegistry,
    FacilityRegistry,
    Registry,
    default_cache_registry,
    default_command_registry,
    default_logger_registry,
)

__all__ = [
    "Configuration",
    # Loading
    "load_config",
    "load_config_text",
    # Models
    "CommandConfig",
    "CommandsConfig",
    "FacilityConfig",
    "GroupConfig",
    "ParamConfig",
    "RequestConfig",
    # Registries
    "CommandRegistry",
    "FacilityRegistry",
    "Registry",
    "default_cache_registry",
    "default_command_registry",
    "default_logger_registry",
]
