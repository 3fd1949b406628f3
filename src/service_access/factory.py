"""Composition root: wires settings, cache and retry policy into an executor."""

from typing import Optional

from service_access.adapters.cache_inmemory import InMemoryResultCache
from service_access.adapters.retry_tenacity import FixedDelayRetryAdapter
from service_access.core.config import ServiceAccessOptions
from service_access.core.interfaces.cache import ResultCachePort
from service_access.core.logging_config import configure_logging
from service_access.core.managers.service_access_executor import ServiceAccessExecutor
from service_access.core.settings import ServiceAccessSettings, app_settings, logger


def create_service_access(
    settings: Optional[ServiceAccessSettings] = None,
    cache: Optional[ResultCachePort] = None,
    options: Optional[ServiceAccessOptions] = None,
    setup_logging: bool = False,
) -> ServiceAccessExecutor:
    """Build a ServiceAccessExecutor from environment-bound settings.

    An injected cache is used as-is; otherwise an InMemoryResultCache honouring
    SERVICE_ACCESS_CACHE_TTL is created. Explicit options take precedence over
    the retry settings; the retry policy is built here, once per executor.
    Root logging is only configured when setup_logging is set, since embedding
    applications usually own it.
    """
    settings = settings or app_settings
    if setup_logging:
        configure_logging(settings.SERVICE_ACCESS_LOG_LEVEL)
        if settings.SERVICE_ACCESS_LOG_LEVEL == "DEBUG":
            settings.print_settings(logger)

    options = options or ServiceAccessOptions.from_app_settings(settings)
    if cache is None:
        cache = InMemoryResultCache(expiry_seconds=settings.SERVICE_ACCESS_CACHE_TTL)

    logger.info(
        "Service access executor created retry=%s delay=%ss cache=%s",
        options.retry,
        options.delay,
        type(cache).__name__,
    )
    return ServiceAccessExecutor(
        cache=cache,
        retry_port=FixedDelayRetryAdapter.from_options(options),
    )
