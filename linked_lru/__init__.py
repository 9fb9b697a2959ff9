"""
LRU cache built on a singly linked recency list.
"""

from .caching import Entry, LinkedListLRU
from .interfaces import CacheStats, IRecencyCache
from .models import MatcherSelector, ValueSelector

__version__ = "1.0.0"

__all__ = [
    "Entry",
    "LinkedListLRU",
    "CacheStats",
    "IRecencyCache",
    "MatcherSelector",
    "ValueSelector",
]
