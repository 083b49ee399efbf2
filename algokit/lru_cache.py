"""Fixed-size cache that discards the least recently used entry."""

import logging
from collections import OrderedDict

_log = logging.getLogger(__name__)


class LRUCache:
    """Key-value cache of bounded size; reads and writes mark an entry as most recent."""

    def __init__(self, capacity=10):
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._capacity = capacity
        self._data = OrderedDict()

    def get(self, key):
        """Return the value for ``key`` and mark it most recently used."""
        if key not in self._data:
            raise KeyError(key)
        self._data.move_to_end(key)
        return self._data[key]

    def put(self, key, value):
        """Add or update ``key``, mark it most recent, and evict the oldest if over capacity."""
        self._data[key] = value
        self._data.move_to_end(key)
        if len(self._data) > self._capacity:
            evicted, _ = self._data.popitem(last=False)
            _log.debug("cache full, evicted key %r", evicted)

    def items(self):
        """Return ``(key, value)`` pairs from most to least recently used."""
        return list(reversed(self._data.items()))

    def __len__(self):
        return len(self._data)

    def __contains__(self, key):
        return key in self._data