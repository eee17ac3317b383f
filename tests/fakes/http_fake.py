"""Fake HTTP operations for testing without network access.

Responses are configured per URL up front; every call is recorded for
verification in tests. A URL with no configured response fails like an
unreachable host.
"""

from fnlang.ops.http import FetchError, HttpFetcher


class FakeHttpFetcher(HttpFetcher):
    """In-memory fake HttpFetcher.

    Attributes:
        get_calls: List of (url, verify_tls) tuples, in call order

    Example:
        fake = FakeHttpFetcher(responses={"https://example.com/a": b"hello"})
        assert fake.get("https://example.com/a") == b"hello"
        assert fake.get_calls == [("https://example.com/a", True)]
    """

    def __init__(
        self,
        responses: dict[str, bytes] | None = None,
        status_codes: dict[str, int] | None = None,
    ) -> None:
        """Create fake with configured responses.

        Args:
            responses: Body returned for each URL
            status_codes: Non-2xx status to fail with for each URL
        """
        self._responses = responses if responses is not None else {}
        self._status_codes = status_codes if status_codes is not None else {}
        self.get_calls: list[tuple[str, bool]] = []

    def calls_to(self, url: str) -> int:
        return sum(1 for called_url, _ in self.get_calls if called_url == url)

    def get(self, url: str, verify_tls: bool = True) -> bytes:
        self.get_calls.append((url, verify_tls))

        status_code = self._status_codes.get(url)
        if status_code is not None:
            raise FetchError(url, f"Status: {status_code}", status_code)

        if url not in self._responses:
            raise FetchError(url, "Name or service not known")

        return self._responses[url]
