"""In-memory TTL cache shared by all upstream fetches."""

from __future__ import annotations

import logging
import os
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

# Freshness windows in seconds, keyed by the namespace prefix of a cache key
DEFAULT_TTLS: Dict[str, float] = {
    "sleeper": float(os.environ.get("MFFL_TTL_SLEEPER", 5 * 60)),
    "scoreboard": float(os.environ.get("MFFL_TTL_SCOREBOARD", 5 * 60)),
    "state": float(os.environ.get("MFFL_TTL_STATE", 2 * 60)),
    "players": float(os.environ.get("MFFL_TTL_PLAYERS", 24 * 60 * 60)),
}
FALLBACK_TTL = 5 * 60


@dataclass(frozen=True)
class CacheEntry:
    key: str
    value: Any
    fetched_at: float


def namespace_of(key: str) -> str:
    """Return the namespace prefix of a cache key ("sleeper:/league/1" -> "sleeper")."""
    return key.split(":", 1)[0]


class TTLCache:
    """Key -> (value, fetched_at) store with per-namespace expiry.

    Expired entries behave as absent on read but are left in place until a
    later ``put`` replaces them.
    """

    def __init__(
        self,
        ttls: Optional[Mapping[str, float]] = None,
        clock: Callable[[], float] = time.monotonic,
        default_ttl: float = FALLBACK_TTL,
    ) -> None:
        self._ttls = dict(DEFAULT_TTLS)
        if ttls:
            self._ttls.update(ttls)
        self._clock = clock
        self._default_ttl = default_ttl
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def ttl_for(self, key: str) -> float:
        return self._ttls.get(namespace_of(key), self._default_ttl)

    def _fresh_entry(self, key: str) -> Optional[CacheEntry]:
        with self._lock:
            entry = self._entries.get(key)
        if entry is not None and self._clock() - entry.fetched_at < self.ttl_for(key):
            self._hits += 1
            logger.debug("Cache hit: %s", key)
            return entry

        self._misses += 1
        logger.debug("Cache miss: %s", key)
        return None

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value for ``key`` if it is still fresh."""
        entry = self._fresh_entry(key)
        return entry.value if entry is not None else None

    def put(self, key: str, value: Any) -> None:
        entry = CacheEntry(key=key, value=value, fetched_at=self._clock())
        with self._lock:
            self._entries[key] = entry

    def get_or_fetch(self, key: str, fetch: Callable[[], Any]) -> Any:
        """Return the fresh cached value or call ``fetch`` and store its result.

        A failing ``fetch`` leaves the cache untouched.
        """
        entry = self._fresh_entry(key)
        if entry is not None:
            return entry.value
        value = fetch()
        self.put(key, value)
        return value

    def invalidate(self, prefix: Optional[str] = None) -> int:
        """Drop entries whose key starts with ``prefix`` (all entries if None).

        Returns:
            Number of entries removed
        """
        with self._lock:
            if prefix is None:
                removed = len(self._entries)
                self._entries.clear()
                return removed
            doomed = [key for key in self._entries if key.startswith(prefix)]
            for key in doomed:
                del self._entries[key]
            return len(doomed)

    def stats(self) -> Dict[str, Any]:
        """Summarize cache contents for the CLI and admin endpoint."""
        now = self._clock()
        with self._lock:
            entries = list(self._entries.values())

        by_namespace: Dict[str, Dict[str, int]] = {}
        for entry in entries:
            bucket = by_namespace.setdefault(
                namespace_of(entry.key), {"fresh": 0, "stale": 0}
            )
            if now - entry.fetched_at < self.ttl_for(entry.key):
                bucket["fresh"] += 1
            else:
                bucket["stale"] += 1

        return {
            "entries": len(entries),
            "hits": self._hits,
            "misses": self._misses,
            "namespaces": by_namespace,
        }
