# frontline: Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from frontline.core.ports.cache import RequestCachePort
from frontline.core.ports.command import CommandPort
from frontline.core.ports.logger import LogCategory, LoggerPort
from frontline.core.ports.source import ParameterSourcePort

__all__ = [
    "CommandPort",
    "LogCategory",
    "LoggerPort",
    "ParameterSourcePort",
    "RequestCachePort",
]
