"""
Cache component - request output caching across ordered backends.
"""

from ._impl import CacheManager

__all__ = [
    "CacheManager",
]
