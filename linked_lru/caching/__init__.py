"""
Linked-list caching implementations.

Implementations follow the IRecencyCache interface.
"""

from .linked_list_lru import Entry, LinkedListLRU

__all__ = [
    "Entry",
    "LinkedListLRU",
]
