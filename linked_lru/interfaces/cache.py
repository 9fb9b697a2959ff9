"""
Cache interface - contract for recency-ordered caches.

A recency cache stores bare values (no separate key) and keeps them
ordered from most to least recently accessed.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List
from pydantic import BaseModel


class CacheStats(BaseModel):
    """Statistics about cache performance"""
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    size: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate"""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


class IRecencyCache(ABC):
    """
    Interface for caches that order their values by recency.

    Implementations keep the most recently accessed value first and evict
    the least recently accessed value when full.
    """

    @abstractmethod
    def access(self, value: Any) -> None:
        """
        Touch a value, inserting it if absent.

        Args:
            value: Value being accessed
        """
        pass

    @abstractmethod
    def remove(self, value: Any) -> None:
        """
        Remove a value from the cache. Absent values are ignored.

        Args:
            value: Value to remove
        """
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Iterate stored values from most to least recently used."""
        pass

    @abstractmethod
    def get_stats(self) -> CacheStats:
        """
        Get cache performance statistics.

        Returns:
            CacheStats with hits, misses, evictions, and size
        """
        pass

    def to_list(self) -> List[Any]:
        """Snapshot of stored values, most recently used first."""
        return list(self)
