"""Latest FDK version discovery.

Resolution order (first success wins):
1. Override environment variable (never cached, no network)
2. Value already resolved by this resolver
3. Each configured VersionSourceStrategy, in order
4. VersionResolutionError naming the override variable

Transport errors, non-2xx responses and malformed documents are treated
alike: the next strategy is tried.
"""

import json
import logging
import os
import xml.etree.ElementTree as ET
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

from fnlang.core.errors import VersionResolutionError
from fnlang.ops.http import FetchError, HttpFetcher

logger = logging.getLogger(__name__)


class VersionSource(Enum):
    """Where a resolved FDK version came from."""

    PRIMARY = "maven"
    SECONDARY = "bintray"
    OVERRIDE = "override"


class MalformedVersionDocumentError(ValueError):
    """A registry answered, but the body has no usable version."""


@dataclass(frozen=True)
class ResolvedFdkVersion:
    version: str
    source: VersionSource


@dataclass(frozen=True)
class UnresolvedFdkVersion:
    """Sentinel for a resolver that has not looked up a version yet."""


def parse_maven_metadata(data: bytes) -> str:
    """Extract versioning/latest from a maven-metadata.xml document.

    The document is only trusted if it lists at least one version.

    Raises:
        MalformedVersionDocumentError: If the XML is invalid or lists no versions
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise MalformedVersionDocumentError(f"Invalid maven metadata: {e}") from e

    # element names match in any namespace; Maven 1.1.0 feeds declare one
    if root.tag.rpartition("}")[2] != "metadata":
        raise MalformedVersionDocumentError(f"Unexpected root element <{root.tag}>")

    versions = root.findall("./{*}versioning/{*}versions/{*}version")
    if not versions:
        raise MalformedVersionDocumentError("Maven response is not valid")

    latest = (root.findtext("./{*}versioning/{*}latest") or "").strip()
    if not latest:
        # <latest> is optional in maven-metadata.xml; versions are listed oldest first
        latest = (versions[-1].text or "").strip()
    if not latest:
        raise MalformedVersionDocumentError("Maven response has no version value")
    return latest


def parse_package_search(data: bytes) -> str:
    """Extract latest_version from the first element of a JSON package search result.

    Raises:
        MalformedVersionDocumentError: If the body is not a non-empty JSON array of objects
    """
    try:
        packages = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedVersionDocumentError(f"Invalid package search response: {e}") from e

    if not isinstance(packages, list) or not packages:
        raise MalformedVersionDocumentError("Package search returned no packages")

    first = packages[0]
    if not isinstance(first, dict):
        raise MalformedVersionDocumentError("Package search entry is not an object")

    version = first.get("latest_version")
    if not isinstance(version, str) or not version.strip():
        raise MalformedVersionDocumentError("Package search entry has no latest_version")
    return version.strip()


@dataclass(frozen=True)
class VersionSourceStrategy:
    """One upstream registry consulted by the resolver.

    Attributes:
        source: Tag recorded alongside versions resolved through this strategy
        url: Document to fetch
        parse: Turns the fetched body into a version string
        verify_tls: Whether the request verifies TLS certificates
    """

    source: VersionSource
    url: str
    parse: Callable[[bytes], str]
    verify_tls: bool = True

    def attempt(self, http: HttpFetcher) -> ResolvedFdkVersion | None:
        """Fetch and parse this source; None means "continue with the next one"."""
        try:
            data = http.get(self.url, verify_tls=self.verify_tls)
        except FetchError as e:
            logger.debug("%s version source unavailable: %s", self.source.value, e)
            return None

        try:
            version = self.parse(data)
        except MalformedVersionDocumentError as e:
            logger.debug("%s version source returned bad document: %s", self.source.value, e)
            return None

        return ResolvedFdkVersion(version=version, source=self.source)


def maven_version_sources(metadata_url: str, search_url: str) -> tuple[VersionSourceStrategy, ...]:
    """Standard chain: Maven Central metadata, then the Bintray search API.

    The Bintray request skips TLS verification; its certificate chain does not
    verify on every client platform. No other request is relaxed.
    """
    return (
        VersionSourceStrategy(
            source=VersionSource.PRIMARY,
            url=metadata_url,
            parse=parse_maven_metadata,
        ),
        VersionSourceStrategy(
            source=VersionSource.SECONDARY,
            url=search_url,
            parse=parse_package_search,
            verify_tls=False,
        ),
    )


class FdkVersionResolver:
    """Resolves, and remembers, the latest FDK version for one runtime family."""

    def __init__(
        self,
        runtime: str,
        override_env: str,
        sources: Sequence[VersionSourceStrategy],
        http: HttpFetcher,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.runtime = runtime
        self.override_env = override_env
        self._sources = tuple(sources)
        self._http = http
        self._environ = os.environ if environ is None else environ
        self._state: ResolvedFdkVersion | UnresolvedFdkVersion = UnresolvedFdkVersion()

    @property
    def state(self) -> ResolvedFdkVersion | UnresolvedFdkVersion:
        return self._state

    def resolve(self) -> ResolvedFdkVersion:
        """Return the latest FDK version and its source.

        Raises:
            VersionResolutionError: If no source produced a version
        """
        override = self._environ.get(self.override_env, "")
        if override:
            logger.debug(
                "Using %s FDK version %s from %s", self.runtime, override, self.override_env
            )
            return ResolvedFdkVersion(version=override, source=VersionSource.OVERRIDE)

        if isinstance(self._state, ResolvedFdkVersion):
            return self._state

        for strategy in self._sources:
            resolved = strategy.attempt(self._http)
            if resolved is not None:
                logger.debug(
                    "Resolved %s FDK version %s from %s",
                    self.runtime,
                    resolved.version,
                    resolved.source.value,
                )
                self._remember(resolved)
                return resolved

        raise VersionResolutionError(self.runtime, self.override_env)

    def _remember(self, resolved: ResolvedFdkVersion) -> None:
        if isinstance(self._state, ResolvedFdkVersion):
            raise RuntimeError(f"{self.runtime} FDK version already resolved")
        self._state = resolved
