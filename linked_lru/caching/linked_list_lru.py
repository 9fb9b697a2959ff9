"""
LRU (Least Recently Used) cache backed by a singly linked list.

Keeps an ordered chain of entries: the head is the most recently used
value and the tail the least recently used. Every access walks the chain
from the head, so lookups are O(n). There is deliberately no hash index;
the list is the only structure.

On access:
1. If the value is already cached, its entry is unlinked and the value is
   re-inserted at the head.
2. Otherwise, if the cache is full, the tail entry is evicted first, then
   the value is inserted at the head.
"""

import logging
from typing import Any, Callable, Iterator, Optional

from ..interfaces.cache import IRecencyCache, CacheStats
from ..models.selector import UNSET, Selector, build_selector

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10
DEFAULT_SEPARATOR = " -> "

Formatter = Callable[[Any], str]


class Entry:
    """A stored value and the link to the next (less recent) entry"""

    __slots__ = ("value", "next")

    def __init__(self, value: Any, next: Optional["Entry"] = None):
        self.value = value
        self.next = next

    def render(self, formatter: Optional[Formatter] = None) -> str:
        """Text for this entry, using ``formatter`` when given."""
        return formatter(self.value) if formatter else f"{self.value}"

    def __repr__(self) -> str:
        return f"Entry({self.value!r})"


class LinkedListLRU(IRecencyCache):
    """
    LRU cache over a singly linked list.

    Values are unique within the list; ``access`` removes an existing
    occurrence before re-inserting it. ``head`` and ``tail`` are read-only
    views into the chain, which is only ever edited by this class.

    Not thread-safe. Concurrent callers must hold one lock per instance
    around each ``access`` call.
    """

    def __init__(self, initial_value: Any, capacity: int = DEFAULT_CAPACITY):
        """
        Initialize the cache with a single entry.

        Args:
            initial_value: First cached value (becomes both head and tail)
            capacity: Maximum number of entries, a positive integer (default: 10)

        Raises:
            ValueError: If capacity is not a positive integer
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"Invalid capacity: {capacity!r}. Must be a positive integer.")

        self._head: Optional[Entry] = Entry(initial_value)
        self._tail: Optional[Entry] = self._head
        self._capacity = capacity
        self._length = 1

        # Statistics tracking
        self._stats = CacheStats(size=1)

        logger.debug("Created LinkedListLRU(capacity=%d) seeded with %r", capacity, initial_value)

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def head(self) -> Optional[Entry]:
        """Most recently used entry, or None when empty"""
        return self._head

    @property
    def tail(self) -> Optional[Entry]:
        """Least recently used entry, or None when empty"""
        return self._tail

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_empty(self) -> bool:
        return self._length == 0

    @property
    def is_full(self) -> bool:
        return self._length >= self._capacity

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __contains__(self, value: Any) -> bool:
        return self.find(value) is not None

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def access(self, value: Any) -> None:
        """
        Mark ``value`` as most recently used.

        A hit moves the value to the head. A miss inserts it at the head,
        evicting the tail first if the cache is full.

        Args:
            value: Value being accessed
        """
        if self.find(value) is not None:
            # Cache hit - unlink the old entry, re-insert at head
            self._stats.hits += 1
            self.remove(value)
        else:
            self._stats.misses += 1
            if self._length >= self._capacity:
                self._evict_lru()

        self.prepend(value)

    def _evict_lru(self) -> None:
        """Evict the least recently used entry (the tail)."""
        if self._tail is None:
            return
        evicted = self._tail.value
        # Walk by identity; a value need not equal itself (e.g. NaN)
        predecessor = self._head
        while predecessor is not None and predecessor.next is not self._tail:
            predecessor = predecessor.next
        self._unlink(self._tail, predecessor)
        self._stats.evictions += 1
        logger.debug("Evicted %r (capacity %d reached)", evicted, self._capacity)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def find(
        self,
        value: Any = UNSET,
        *,
        matcher: Optional[Callable[[Any], bool]] = None
    ) -> Optional[Entry]:
        """
        Find the first entry matching ``value`` or ``matcher``.

        Pass ``value`` for value types, ``matcher`` for structured values.
        If both are given the matcher is used; if neither is given nothing
        matches.

        Returns:
            The matching Entry, or None if not found
        """
        selector = build_selector(value, matcher)
        if selector is None:
            return None
        return self.find_by(selector)

    def find_by(self, selector: Selector) -> Optional[Entry]:
        """Linear scan from the head for the first entry ``selector`` matches."""
        current = self._head
        while current is not None:
            if selector.matches(current.value):
                return current
            current = current.next
        return None

    def find_predecessor(
        self,
        value: Any = UNSET,
        *,
        matcher: Optional[Callable[[Any], bool]] = None
    ) -> Optional[Entry]:
        """
        Find the entry just before the first match.

        None is returned both when nothing matches and when the match is
        the head itself (the head has no predecessor). Callers that need
        to tell these apart must check the head directly.

        Returns:
            The predecessor Entry, or None
        """
        selector = build_selector(value, matcher)
        if selector is None:
            return None
        return self.find_predecessor_by(selector)

    def find_predecessor_by(self, selector: Selector) -> Optional[Entry]:
        """Linear scan testing each entry's successor against ``selector``."""
        current = self._head
        while current is not None and current.next is not None:
            if selector.matches(current.next.value):
                return current
            current = current.next
        return None

    # ------------------------------------------------------------------
    # Mutation primitives
    # ------------------------------------------------------------------

    def prepend(self, value: Any) -> None:
        """
        Insert ``value`` at the head.

        This is the only insertion path. It does not check capacity or
        uniqueness; ``access`` does that before calling it.

        Args:
            value: Value to insert
        """
        entry = Entry(value, self._head)
        self._head = entry
        if self._tail is None:
            self._tail = entry
        self._length += 1
        self._stats.size = self._length

    def remove(self, value: Any) -> None:
        """
        Unlink the entry holding ``value``. No-op if it is absent.

        Args:
            value: Value to remove
        """
        entry = self.find(value)
        if entry is None:
            return

        predecessor = self.find_predecessor(value)
        self._unlink(entry, predecessor)

    def _unlink(self, entry: Entry, predecessor: Optional[Entry]) -> None:
        """Detach ``entry``; ``predecessor`` is None when it is the head."""
        if entry is self._head:
            self._head = entry.next

        if entry is self._tail:
            self._tail = predecessor

        # Middle or tail entry: bridge over it
        if predecessor is not None:
            predecessor.next = entry.next

        entry.next = None
        self._length -= 1
        self._stats.size = self._length

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    def get_stats(self) -> CacheStats:
        """
        Get cache performance statistics.

        Returns:
            Snapshot of CacheStats with hits, misses, evictions, size, and hit_rate
        """
        self._stats.size = self._length
        return self._stats.model_copy()

    def render(
        self,
        formatter: Optional[Formatter] = None,
        separator: str = DEFAULT_SEPARATOR
    ) -> str:
        """
        Render the order head to tail, e.g. ``"3 -> 2 -> 1"``.

        Args:
            formatter: Optional function turning a stored value into text
            separator: Joiner placed between entries
        """
        parts = []
        current = self._head
        while current is not None:
            parts.append(current.render(formatter))
            current = current.next
        return separator.join(parts)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"LinkedListLRU([{self.render(repr, ', ')}], capacity={self._capacity})"
