"""Configuration data structures and loading.

Provides immutable config data loaded from ~/.fnlang/config.toml, with
environment variables taking precedence over file values. A missing file
is not an error: every field has a default.
"""

import os
import tomllib
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

DEFAULT_JAVA_METADATA_URL = "https://repo1.maven.org/maven2/com/fnproject/fn/fdk/maven-metadata.xml"
DEFAULT_JAVA_SEARCH_URL = (
    "https://api.bintray.com/search/packages/maven?repo=fnproject&g=com.fnproject.fn&a=fdk"
)
DEFAULT_HTTP_TIMEOUT = 30.0

ENV_JAVA_METADATA_URL = "FNLANG_JAVA_METADATA_URL"
ENV_JAVA_SEARCH_URL = "FNLANG_JAVA_SEARCH_URL"
ENV_HTTP_TIMEOUT = "FNLANG_HTTP_TIMEOUT"


@dataclass(frozen=True)
class FnLangConfig:
    """Immutable configuration data.

    Loaded once at CLI entry point and stored in FnLangContext.
    """

    java_metadata_url: str = DEFAULT_JAVA_METADATA_URL
    java_search_url: str = DEFAULT_JAVA_SEARCH_URL
    http_timeout: float = DEFAULT_HTTP_TIMEOUT


def _parse_timeout(raw: object, origin: str) -> float:
    try:
        timeout = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValueError(f"Invalid http_timeout {raw!r} in {origin}") from None
    if timeout <= 0:
        raise ValueError(f"http_timeout must be positive, got {timeout} in {origin}")
    return timeout


def apply_env_overrides(config: FnLangConfig, environ: Mapping[str, str]) -> FnLangConfig:
    """Return config with any FNLANG_* environment variables applied on top."""
    if environ.get(ENV_JAVA_METADATA_URL):
        config = replace(config, java_metadata_url=environ[ENV_JAVA_METADATA_URL])
    if environ.get(ENV_JAVA_SEARCH_URL):
        config = replace(config, java_search_url=environ[ENV_JAVA_SEARCH_URL])
    if environ.get(ENV_HTTP_TIMEOUT):
        config = replace(
            config, http_timeout=_parse_timeout(environ[ENV_HTTP_TIMEOUT], ENV_HTTP_TIMEOUT)
        )
    return config


class ConfigOps(ABC):
    """Abstract interface for config access.

    Enables in-memory implementations for tests without touching filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if a config file exists."""
        ...

    @abstractmethod
    def load(self) -> FnLangConfig:
        """Load config, falling back to defaults for absent values.

        Raises:
            ValueError: If the config contains malformed values
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the config file (for error messages and debugging)."""
        ...


class FilesystemConfigOps(ConfigOps):
    """Production implementation that reads ~/.fnlang/config.toml.

    Example file:

        http_timeout = 10

        [java]
        metadata_url = "https://mirror.example.com/maven2/com/fnproject/fn/fdk/maven-metadata.xml"
    """

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> FnLangConfig:
        config_path = self.path()
        if not config_path.exists():
            return FnLangConfig()

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Malformed config file {config_path}: {e}") from e

        java = data.get("java", {})
        if not isinstance(java, dict):
            raise ValueError(f"Expected [java] table in {config_path}")

        config = FnLangConfig(
            java_metadata_url=str(java.get("metadata_url", DEFAULT_JAVA_METADATA_URL)),
            java_search_url=str(java.get("search_url", DEFAULT_JAVA_SEARCH_URL)),
        )
        if "http_timeout" in data:
            config = replace(
                config, http_timeout=_parse_timeout(data["http_timeout"], str(config_path))
            )
        return config

    def path(self) -> Path:
        if self._config_path is not None:
            return self._config_path
        return Path.home() / ".fnlang" / "config.toml"


class InMemoryConfigOps(ConfigOps):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: FnLangConfig | None = None) -> None:
        """Initialize in-memory config ops.

        Args:
            config: Stored config (None = no config file, defaults apply)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> FnLangConfig:
        if self._config is None:
            return FnLangConfig()
        return self._config

    def path(self) -> Path:
        return Path("/fake/fnlang/config.toml")


def load_config(config_ops: ConfigOps, environ: Mapping[str, str] | None = None) -> FnLangConfig:
    """Load config from config_ops and apply environment overrides."""
    env = os.environ if environ is None else environ
    return apply_env_overrides(config_ops.load(), env)
