"""In-memory LRU cache with per-entry TTL.

Entries expire ``ttl_seconds`` after they are written. ``max_size`` bounds
the number of live entries; the least recently used entry is evicted first.
"""

import hashlib
import json
import logging
import threading
import time
from collections import OrderedDict
from typing import Any, Callable

logger = logging.getLogger(__name__)


class TTLCache:
    """Thread-safe LRU cache with expiry.

    - get(): value or None (expired entries are dropped on read)
    - set(): insert/refresh, evicting LRU entries beyond max_size
    - clear(): drop everything in this namespace
    """

    def __init__(self, namespace: str, max_size: int, ttl_seconds: float,
                 clock: Callable[[], float] = time.monotonic):
        self._namespace = namespace
        self._max_size = max_size
        self._ttl = ttl_seconds
        self._clock = clock
        self._store: OrderedDict[str, tuple[float, Any]] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            expires_at, value = entry
            if self._clock() >= expires_at:
                del self._store[key]
                logger.debug("Cache entry expired for %s/%s", self._namespace, key[:12])
                return None
            self._store.move_to_end(key)
            return value

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._store[key] = (self._clock() + self._ttl, value)
            self._store.move_to_end(key)
            while len(self._store) > self._max_size:
                self._store.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
        logger.debug("Cache cleared for namespace %s", self._namespace)

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)


def cache_key(*args, **kwargs) -> str:
    """Build a deterministic cache key from positional and keyword arguments."""
    raw = json.dumps({"a": args, "k": kwargs}, sort_keys=True, default=str)
    return hashlib.sha256(raw.encode()).hexdigest()
