"""HTTP operations interface for remote version discovery.

This module defines the abstract interface for fetching documents over HTTP,
following the ops pattern with ABC-based dependency injection for testability.
"""

from abc import ABC, abstractmethod


class FetchError(Exception):
    """Raised when a URL cannot be fetched or answers with a non-2xx status."""

    def __init__(self, url: str, message: str, status_code: int | None = None) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"Failed to fetch response from URL {url}: {message}")


class HttpFetcher(ABC):
    """Abstract interface for HTTP GET operations.

    Real implementations use httpx. Fake implementations are pure in-memory
    for unit tests without network access.
    """

    @abstractmethod
    def get(self, url: str, verify_tls: bool = True) -> bytes:
        """Fetch a URL and return the response body.

        Args:
            url: Absolute URL to GET
            verify_tls: Whether to verify the server's TLS certificate chain.
                Applies to this request only.

        Returns:
            Raw response body

        Raises:
            FetchError: On transport failure or a non-2xx response status
        """
        ...
