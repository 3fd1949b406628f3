"""ServiceAccessExecutor: wraps remote calls with fixed-delay retry and result caching.

Sequence per call:
1. Blank cache key -> run the operation through the retry policy, no cache I/O.
2. Cache hit (found and not None) -> return cached value; operation never runs.
3. Cache miss -> run the operation through the retry policy, store a non-None
   result under the key, return it.

Failures of the operation propagate unmodified and are never cached.
Concurrent misses on the same key each run the operation; the last one to
finish wins the cache slot.
"""

from __future__ import annotations

from typing import Awaitable, Callable, Optional, TypeVar

from service_access.core.interfaces.cache import ResultCachePort
from service_access.core.interfaces.retry import RetryPort
from service_access.core.interfaces.service_access import ServiceAccessPort
from service_access.core.settings import logger

T = TypeVar("T")


def _has_key(cache_key: Optional[str]) -> bool:
    return cache_key is not None and bool(cache_key.strip())


class ServiceAccessExecutor(ServiceAccessPort):
    """Runs caller-supplied async operations with retry and optional caching.

    The retry policy is injected once (see factory.create_service_access) and
    shared by every call made through this executor.
    """

    def __init__(
        self,
        cache: ResultCachePort,
        retry_port: RetryPort,
    ) -> None:
        self._cache = cache
        self._retry = retry_port

    @property
    def retry_policy(self) -> RetryPort:
        return self._retry

    async def execute(
        self,
        operation: Callable[[], Awaitable[Optional[T]]],
        cache_key: Optional[str] = None,
    ) -> Optional[T]:
        if not _has_key(cache_key):
            return await self._retry.execute(operation)

        cached = self._get_value_on_cache(cache_key)
        if cached is not None:
            logger.debug("[access] cache hit key=%s", cache_key)
            return cached

        logger.debug("[access] cache miss key=%s", cache_key)
        response = await self._retry.execute(operation)
        return self._set_value_on_cache(cache_key, response)

    def _get_value_on_cache(self, cache_key: str) -> Optional[T]:
        found, value = self._cache.try_get(cache_key)
        if found and value is not None:
            return value
        return None

    def _set_value_on_cache(self, cache_key: str, response: Optional[T]) -> Optional[T]:
        if response is None:
            logger.debug("[access] not caching None result key=%s", cache_key)
            return response
        self._cache.set(cache_key, response)
        logger.debug("[access] cached result key=%s", cache_key)
        return response
