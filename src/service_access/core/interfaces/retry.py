from typing import Protocol, Any, Awaitable, Callable

class RetryPort(Protocol):
    """Abstract retry interface for async operations.

    Implementations wrap a remote call with bounded retry on transient faults.
    The contract keeps the core decoupled from a specific library (tenacity/backoff).
    """
    async def execute(self, func: Callable[..., Awaitable[Any]], *args, **kwargs) -> Any:  # pragma: no cover - protocol
        """Execute an async callable with retry semantics.

        Args:
            func: Async callable returning a result.
            *args/**kwargs: Passed to the callable.
        Returns:
            Result of the successful invocation.
        Raises:
            Propagates the last exception unmodified after exhausting attempts,
            or the first non-retryable exception immediately.
        """
        ...
