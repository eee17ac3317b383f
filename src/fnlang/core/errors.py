"""Error types raised by the language helper layer.

Every error carries a message meant for the end user. CLI commands report
FnLangError through Ensure (red "Error:" line, exit status 1); nothing below
the CLI prints.
"""

from pathlib import Path


class FnLangError(Exception):
    """Base class for all fnlang errors."""


class VersionResolutionError(FnLangError):
    """All FDK version sources were exhausted."""

    def __init__(self, runtime: str, override_env: str) -> None:
        self.runtime = runtime
        self.override_env = override_env
        super().__init__(
            f"Failed to fetch latest {runtime} FDK version. "
            f"Check your network settings or manually override the version by setting "
            f"{override_env}"
        )


class UnsupportedVersionError(FnLangError):
    """A helper was configured with a runtime sub-version it does not know."""

    def __init__(self, runtime: str, version: str) -> None:
        self.runtime = runtime
        self.version = version
        super().__init__(f"unsupported {runtime} version {version}")


class MissingManifestError(FnLangError, FileNotFoundError):
    """Pre-build validation found no manifest in the working directory."""

    def __init__(self, manifest_path: Path, hint: str) -> None:
        self.manifest_path = manifest_path
        super().__init__(hint)


class ManifestAlreadyExistsError(FnLangError, FileExistsError):
    """Boilerplate generation refused to overwrite an existing manifest."""

    def __init__(self, manifest_path: Path) -> None:
        self.manifest_path = manifest_path
        super().__init__(
            f"Function boilerplate already exists: {manifest_path.name} found in "
            f"{manifest_path.parent}"
        )


class DuplicateLangError(FnLangError):
    """Two helpers claimed the same alias or file extension."""

    def __init__(self, key: str, kind: str) -> None:
        self.key = key
        self.kind = kind
        super().__init__(f"{kind} {key!r} is already registered by another language helper")
