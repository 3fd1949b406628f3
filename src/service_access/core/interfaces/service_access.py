from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Optional, TypeVar

T = TypeVar("T")

class ServiceAccessPort(ABC):
    @abstractmethod
    async def execute(
        self,
        operation: Callable[[], Awaitable[Optional[T]]],
        cache_key: Optional[str] = None,
    ) -> Optional[T]:
        """Run a remote-call operation with retry and optional result caching.

        A blank cache_key (None, empty or whitespace) disables caching for the call.
        """
        pass
