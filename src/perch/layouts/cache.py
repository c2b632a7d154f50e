"""Memoization for layout resolution.

Free-threading safety:
    - The entry map is guarded by a ``threading.Lock``
    - Values are computed outside the lock and stored first-writer-wins,
      so at most one sequence is ever stored per key and every caller
      gets the stored one
    - Stored values are tuples, never mutated after insertion
"""

import threading
from collections.abc import Callable, Hashable


class ResolutionCache:
    """Process-lifetime map from ``(config, descriptor, format)`` to candidates.

    Unbounded: the key space is the set of distinct page shapes a site
    renders, which is small and fixed for a given site.
    """

    __slots__ = ("_entries", "_hits", "_lock", "_misses")

    def __init__(self) -> None:
        self._entries: dict[Hashable, tuple[str, ...]] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get_or_compute(
        self,
        key: Hashable,
        compute: Callable[[], tuple[str, ...]],
    ) -> tuple[str, ...]:
        """Return the cached value for *key*, computing it on first use.

        *compute* must be pure: concurrent first calls for the same key may
        each run it, but only the first result is stored and returned to
        all of them.  Exceptions from *compute* propagate and nothing is
        stored.
        """
        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                self._hits += 1
                return cached

        value = compute()

        with self._lock:
            stored = self._entries.setdefault(key, value)
            if stored is value:
                self._misses += 1
            else:
                self._hits += 1
            return stored

    @property
    def hits(self) -> int:
        return self._hits

    @property
    def misses(self) -> int:
        return self._misses

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
