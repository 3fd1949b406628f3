# service_access/core/interfaces/cache.py
from abc import ABC, abstractmethod
from typing import Any, Tuple

class ResultCachePort(ABC):
    """Key/value store for results of remote calls.

    Expiry and eviction belong to the implementation; callers only read and
    write through these two operations.
    """

    @abstractmethod
    def try_get(self, key: str) -> Tuple[bool, Any]:
        """Look up a key by exact match. Returns (found, value)."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Unconditionally insert or replace the value stored under key."""
        pass
