"""In-memory implementation of ResultCachePort.

Suitable for a single process and for tests. Entries are plain references;
values are not copied on read or write.
"""
from __future__ import annotations

import time
from typing import Any, Dict, Optional, Tuple

from service_access.core.interfaces.cache import ResultCachePort


class InMemoryResultCache(ResultCachePort):
    def __init__(self, expiry_seconds: Optional[float] = None) -> None:
        self._cache: Dict[str, Tuple[float, Any]] = {}
        self._expiry_seconds = expiry_seconds

    def _is_fresh(self, timestamp: float) -> bool:
        if self._expiry_seconds is None:
            return True
        return time.monotonic() - timestamp < self._expiry_seconds

    def try_get(self, key: str) -> Tuple[bool, Any]:
        entry = self._cache.get(key)
        if entry:
            timestamp, value = entry
            if self._is_fresh(timestamp):
                return True, value
            self._cache.pop(key, None)
        return False, None

    def set(self, key: str, value: Any) -> None:
        self._cache[key] = (time.monotonic(), value)

    def clear(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)
