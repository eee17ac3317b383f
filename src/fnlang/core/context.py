"""Application context with dependency injection."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from fnlang.core.config import FilesystemConfigOps, FnLangConfig, load_config
from fnlang.core.langs.registry import LangRegistry, default_registry
from fnlang.ops.http import HttpFetcher
from fnlang.ops.http_real import RealHttpFetcher


@dataclass(frozen=True)
class FnLangContext:
    """Immutable context holding all dependencies for fnlang commands.

    Created at CLI entry point and threaded through the application.
    """

    http: HttpFetcher
    config: FnLangConfig
    registry: LangRegistry
    environ: Mapping[str, str]
    cwd: Path  # Current working directory at CLI invocation

    @staticmethod
    def for_test(
        http: HttpFetcher | None = None,
        config: FnLangConfig | None = None,
        environ: Mapping[str, str] | None = None,
        cwd: Path | None = None,
    ) -> "FnLangContext":
        """Create test context with fakes for anything not given.

        Args:
            http: Optional HttpFetcher. If None, creates an empty FakeHttpFetcher
                (every URL fails to fetch).
            config: Optional config. If None, uses defaults.
            environ: Optional environment. If None, uses an empty mapping.
            cwd: Optional working directory. If None, uses Path("/test/default/cwd").
        """
        from tests.fakes.http_fake import FakeHttpFetcher

        resolved_http = http if http is not None else FakeHttpFetcher()
        resolved_config = config if config is not None else FnLangConfig()
        resolved_environ = environ if environ is not None else {}

        return FnLangContext(
            http=resolved_http,
            config=resolved_config,
            registry=default_registry(resolved_config, resolved_http, resolved_environ),
            environ=resolved_environ,
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
        )


def create_context() -> FnLangContext:
    """Create production context with real implementations.

    Raises:
        ValueError: If the config file is malformed
    """
    environ = os.environ
    config = load_config(FilesystemConfigOps(), environ)
    http = RealHttpFetcher(timeout=config.http_timeout)
    return FnLangContext(
        http=http,
        config=config,
        registry=default_registry(config, http, environ),
        environ=environ,
        cwd=Path.cwd(),
    )
