"""Real HTTP operations using httpx.

A fresh client is created per request so that TLS settings never leak
from one request to another.
"""

import logging

import httpx

from fnlang.ops.http import FetchError, HttpFetcher

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


class RealHttpFetcher(HttpFetcher):
    """Production implementation of HttpFetcher backed by httpx.

    Example:
        fetcher = RealHttpFetcher(timeout=10.0)
        body = fetcher.get("https://repo1.maven.org/maven2/.../maven-metadata.xml")
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize fetcher.

        Args:
            timeout: Connect/read timeout in seconds for each request
            transport: Optional httpx transport (used by tests to avoid network)
        """
        self._timeout = timeout
        self._transport = transport

    def get(self, url: str, verify_tls: bool = True) -> bytes:
        if not verify_tls:
            logger.debug("TLS certificate verification disabled for %s", url)

        try:
            with httpx.Client(
                timeout=self._timeout,
                verify=verify_tls,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = client.get(url)
        except httpx.HTTPError as e:
            raise FetchError(url, str(e) or type(e).__name__) from e

        if not response.is_success:
            raise FetchError(url, f"Status: {response.status_code}", response.status_code)

        return response.content
