from typing import Optional


class ServiceAccessError(Exception):
    """Base exception for errors raised by this package itself.

    Failures of a wrapped operation are never converted into this type; they
    reach the caller exactly as the operation raised them.
    """


class InvalidResponseContentError(ServiceAccessError):
    """Raised when an upstream service answers with a body that is not JSON.

    This is a contract violation by the upstream, not a transient fault, so it
    is never retried.

    Attributes:
        url: URL that returned the invalid body
        content: Leading part of the response body
        status: HTTP status code of the response (if known)
    """
    def __init__(
        self,
        url: str,
        content: str,
        status: Optional[int] = None,
    ):
        self.url = url
        self.content = content
        self.status = status
        message = f"Response from {url} was not valid JSON: '{content[:100]}'"
        super().__init__(message)
