import asyncio
from typing import Any, Awaitable, Callable, Optional, Sequence, Type

import aiohttp
from tenacity import AsyncRetrying, RetryCallState, stop_after_attempt, wait_fixed, retry_if_exception

from service_access.core.config import ServiceAccessOptions
from service_access.core.settings import logger

# HTTP request failures (aiohttp, including error statuses surfaced by
# raise_for_status) and generic network failures. Nothing else is retried.
# Timeouts are excluded even where aiohttp also derives them from ClientError
# (ServerTimeoutError from sock_read/sock_connect limits).
TRANSIENT_FAULTS: tuple[Type[Exception], ...] = (aiohttp.ClientError, ConnectionError)


class FixedDelayRetryAdapter:
    """Tenacity-based retry adapter implementing RetryPort.

    Waits a constant delay between attempts and gives up after `retry`
    additional attempts. The last exception is re-raised as-is, never wrapped
    in tenacity's RetryError. The policy is fixed at construction time and
    shared by every call.
    """

    def __init__(
        self,
        retry: int = 3,
        delay: float = 2.0,
        exception_types: Sequence[Type[Exception]] = TRANSIENT_FAULTS,
        sleep: Optional[Callable[[float], Awaitable[Any]]] = None,
    ) -> None:
        if retry < 0:
            raise ValueError(f"retry must be >= 0, got {retry}")
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        self._retry = retry
        self._delay = delay
        self._exception_types = tuple(exception_types)
        self._sleep = sleep or asyncio.sleep

    @classmethod
    def from_options(cls, options: Optional[ServiceAccessOptions] = None, **kwargs) -> "FixedDelayRetryAdapter":
        options = options or ServiceAccessOptions()
        return cls(retry=options.retry, delay=options.delay, **kwargs)

    @property
    def retry(self) -> int:
        return self._retry

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def exception_types(self) -> tuple[Type[Exception], ...]:
        return self._exception_types

    def _is_transient(self, exc: BaseException) -> bool:
        return isinstance(exc, self._exception_types) and not isinstance(exc, asyncio.TimeoutError)

    def _log_before_sleep(self, retry_state: RetryCallState) -> None:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        logger.warning(
            "[retry] transient fault on attempt %s/%s, retrying in %ss: %r",
            retry_state.attempt_number,
            self._retry + 1,
            self._delay,
            exc,
        )

    async def execute(self, func: Callable[..., Awaitable[Any]], *args, **kwargs) -> Any:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._retry + 1),
            wait=wait_fixed(self._delay),
            retry=retry_if_exception(self._is_transient),
            before_sleep=self._log_before_sleep,
            sleep=self._sleep,
            reraise=True,
        )
        try:
            async for attempt in retrying:
                with attempt:
                    return await func(*args, **kwargs)
        except Exception as exc:
            # A transient fault only escapes once the retry budget is spent
            if self._is_transient(exc):
                logger.error(
                    "[retry] retry budget exhausted after %s attempts: %r",
                    self._retry + 1,
                    exc,
                )
            raise
