import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from frontline.components.dispatch import Dispatcher
from frontline.config import Configuration


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.config_path = Path(os.environ.get("FRONTLINE_CONFIG", "commands.yaml"))
        if not self.config_path.is_absolute():
            self.config_path = self.base_dir / self.config_path
        self.max_forward_depth = int(os.environ.get("FRONTLINE_MAX_FORWARDS", "16"))


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Configuration ---
@lru_cache
def get_configuration(settings: Settings = Depends(get_settings)) -> Configuration:
    return Configuration.from_path(settings.config_path)


# --- Dispatcher ---
# One dispatcher per process: loggers and caches are process-wide, while
# contexts and parameter sources are built per request.
@lru_cache
def get_dispatcher(settings: Settings = Depends(get_settings)) -> Dispatcher:
    configuration = get_configuration(settings)
    return Dispatcher.from_config(
        configuration,
        initial_config={"base_dir": str(settings.base_dir)},
        max_forward_depth=settings.max_forward_depth,
    )
