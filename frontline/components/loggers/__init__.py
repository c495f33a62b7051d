"""
Loggers component - application log facility.
"""

from ._impl import LoggerManager, normalize_message

__all__ = [
    "LoggerManager",
    "normalize_message",
]
