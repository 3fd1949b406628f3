# service_access/adapters/aiohttp_client_adapter.py
import asyncio
import aiohttp
from typing import Any, Dict, Optional

from service_access.core.exceptions import InvalidResponseContentError
from service_access.core.settings import logger


class AioHttpClientAdapter:
    """Thin aiohttp client for remote calls made through the executor.

    Transport failures (aiohttp.ClientError, including HTTP error statuses)
    are logged and re-raised unchanged so the retry policy can recognise them
    as transient faults. Only a non-JSON body is translated, into
    InvalidResponseContentError, which is never retried.
    """

    def __init__(self):
        self._session: Optional[aiohttp.ClientSession] = None
        # Per-field defaults so callers only ever pass a total timeout
        self._default_total: float = 10.0
        self._default_sock_read: float = 10.0
        self._default_sock_connect: float = 5.0
        self._default_client_timeout = aiohttp.ClientTimeout(
            total=self._default_total,
            sock_read=self._default_sock_read,
            sock_connect=self._default_sock_connect,
        )

    async def __aenter__(self):
        """Async context manager entry"""
        self._session = aiohttp.ClientSession()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.close()
        return False

    def _client_timeout(self, timeout: float | None) -> aiohttp.ClientTimeout:
        if timeout is None:
            return self._default_client_timeout
        # Keep adapter-level sock_read/sock_connect values but apply provided total
        return aiohttp.ClientTimeout(
            total=timeout,
            sock_read=self._default_sock_read,
            sock_connect=self._default_sock_connect,
        )

    def _require_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            raise RuntimeError("HTTP client not initialized. Use 'async with' context manager.")
        return self._session

    async def _parse_json(self, url: str, response: aiohttp.ClientResponse) -> Any:
        try:
            return await response.json()
        except (aiohttp.ContentTypeError, ValueError):
            # Wrong content type, or a JSON content type with a malformed body
            response_text = await response.text()
            logger.error(
                "Invalid JSON response from remote service. URL: %s, Content: %s",
                url,
                response_text[:500],
            )
            raise InvalidResponseContentError(url, response_text[:500], status=response.status)

    async def get(self, url: str, timeout: float | None = None) -> Any:
        """GET a URL and return the parsed JSON body.

        HTTP error statuses raise aiohttp.ClientResponseError.
        """
        session = self._require_session()
        try:
            async with session.get(url, timeout=self._client_timeout(timeout)) as response:
                response.raise_for_status()
                return await self._parse_json(url, response)
        except asyncio.TimeoutError:
            logger.error("Timeout when requesting remote service. URL: %s", url)
            raise
        except aiohttp.ClientResponseError as client_response_error:
            logger.error(
                "HTTP error when requesting remote service. URL: %s, Status: %s, Error: %s",
                url,
                client_response_error.status,
                str(client_response_error),
            )
            raise
        except aiohttp.ClientError as client_error:
            logger.error(
                "Connection error when requesting remote service. URL: %s, Error: %s",
                url,
                str(client_error),
            )
            raise

    async def post(
        self,
        url: str,
        json: Dict[str, Any] | None,
        timeout: float | None = None,
        headers: Dict[str, str] | None = None,
    ) -> Dict[str, Any]:
        """POST JSON and return a dict with keys 'status', 'headers' and 'body'.

        The body is always parsed JSON; a non-JSON body raises
        InvalidResponseContentError. HTTP error statuses raise
        aiohttp.ClientResponseError.
        """
        session = self._require_session()
        try:
            async with session.post(
                url, json=json, timeout=self._client_timeout(timeout), headers=headers
            ) as response:
                response.raise_for_status()
                return {
                    "status": response.status,
                    "headers": dict(response.headers),
                    "body": await self._parse_json(url, response),
                }
        except asyncio.TimeoutError:
            logger.error("Timeout when POSTing to remote service. URL: %s", url)
            raise
        except aiohttp.ClientResponseError as client_response_err:
            logger.error(
                "HTTP error when POSTing to remote service. URL: %s, Status: %s, Error: %s",
                url,
                client_response_err.status,
                str(client_response_err),
            )
            raise
        except aiohttp.ClientError as client_err:
            logger.error("Connection error when POSTing to remote service. URL: %s, Error: %s", url, str(client_err))
            raise

    async def close(self) -> None:
        """Close the session"""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
