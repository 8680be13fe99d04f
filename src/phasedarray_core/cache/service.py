# src/phasedarray_core/cache/service.py
"""
Memoizes steering and gain-pattern results across animation ticks.
"""
import logging
from collections import OrderedDict
from typing import Any, Dict, Optional, Tuple

logger = logging.getLogger(__name__)


class ArrayModelCache:
    """
    A bounded, content-keyed cache for results that only change when the element
    layout or the target changes.

    The animation driver calls into the core every frame, but the element list and
    target only change on user edits. Keeping results here lets a tick skip the
    O(n * 360) array factor sweep whenever nothing changed. Dragging an element
    produces a new key on every pointer move, so the cache evicts its oldest entries
    once `max_entries` is reached.
    """

    def __init__(self, max_entries: int = 256):
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}.")
        self.max_entries = max_entries
        self._entries: "OrderedDict[Tuple, Any]" = OrderedDict()
        self.clear_stats()
        logger.debug("ArrayModelCache instance created (max_entries=%d).", max_entries)

    def get(self, key: Tuple) -> Optional[Any]:
        """Retrieves an item, or None on a miss."""
        if key in self._entries:
            self._stats['hits'] += 1
            self._entries.move_to_end(key)
            logger.debug(f"Cache HIT for key: {str(key)[:150]}...")
            return self._entries[key]

        self._stats['misses'] += 1
        logger.debug(f"Cache MISS for key: {str(key)[:150]}...")
        return None

    def put(self, key: Tuple, value: Any):
        """Stores an item, evicting the least recently used entry when full."""
        if key in self._entries:
            logger.warning("Cache key collision detected. Overwriting existing value.")
            self._entries.move_to_end(key)
        self._entries[key] = value
        while len(self._entries) > self.max_entries:
            evicted_key, _ = self._entries.popitem(last=False)
            self._stats['evictions'] += 1
            logger.debug(f"Cache EVICT for key: {str(evicted_key)[:150]}...")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Tuple) -> bool:
        return key in self._entries

    def get_stats(self) -> Dict[str, int]:
        """Returns a copy of the hit/miss/eviction statistics."""
        return self._stats.copy()

    def clear_stats(self):
        """Resets the hit/miss/eviction statistics."""
        self._stats = {'hits': 0, 'misses': 0, 'evictions': 0}

    def clear(self):
        """Drops every cached result. Statistics are kept."""
        self._entries.clear()
        logger.info("Cleared the array model cache.")
