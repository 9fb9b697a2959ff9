"""
Interface abstractions for recency caches.
"""

from .cache import IRecencyCache, CacheStats

__all__ = [
    "IRecencyCache",
    "CacheStats",
]
