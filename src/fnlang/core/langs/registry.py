"""Lookup of language helpers by runtime name or file extension."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from fnlang.core.config import FnLangConfig
from fnlang.core.errors import DuplicateLangError
from fnlang.core.langs.abc import LangHelper
from fnlang.core.langs.java import JavaLangHelper, java_fdk_resolver
from fnlang.ops.http import HttpFetcher

logger = logging.getLogger(__name__)

# Directories never searched when detecting a project's runtime
_SKIPPED_DIRS = frozenset({".git", "node_modules", "target", "build", "__pycache__"})


class LangRegistry:
    """Closed table of language helpers.

    Every alias and every file extension belongs to exactly one helper;
    registering a helper that claims a taken key fails instead of shadowing it.
    """

    def __init__(self) -> None:
        self._helpers: list[LangHelper] = []
        self._by_alias: dict[str, LangHelper] = {}
        self._by_extension: dict[str, LangHelper] = {}

    def register(self, helper: LangHelper) -> None:
        """Add helper to the registry.

        Raises:
            DuplicateLangError: If any alias or extension is already claimed
        """
        aliases = helper.lang_strings()
        extensions = helper.file_extensions()

        for alias in aliases:
            if alias in self._by_alias:
                raise DuplicateLangError(alias, "Runtime")
        for extension in extensions:
            if extension in self._by_extension:
                raise DuplicateLangError(extension, "File extension")

        self._helpers.append(helper)
        for alias in aliases:
            self._by_alias[alias] = helper
        for extension in extensions:
            self._by_extension[extension] = helper

    def helpers(self) -> list[LangHelper]:
        return list(self._helpers)

    def lang_strings(self) -> list[str]:
        return list(self._by_alias)

    def get_lang_helper(self, lang: str) -> LangHelper | None:
        return self._by_alias.get(lang)

    def lang_helper_for_extension(self, extension: str) -> LangHelper | None:
        return self._by_extension.get(extension)

    def detect_lang_helper(self, directory: Path) -> LangHelper | None:
        """Pick a helper from the extensions of files under directory.

        Files are visited in sorted order, so the result is stable for a given tree.
        """
        for path in sorted(_walk_files(directory)):
            helper = self.lang_helper_for_extension(path.suffix)
            if helper is not None:
                logger.debug("Detected runtime %s from %s", helper.runtime, path)
                return helper
        return None


def _walk_files(directory: Path) -> list[Path]:
    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(directory):
        dirnames[:] = [d for d in dirnames if d not in _SKIPPED_DIRS]
        files.extend(Path(dirpath) / name for name in filenames)
    return files


def default_registry(
    config: FnLangConfig,
    http: HttpFetcher,
    environ: Mapping[str, str] | None = None,
) -> LangRegistry:
    """Registry with every supported runtime.

    Each helper gets its own resolver: resolved versions are never shared.
    """
    registry = LangRegistry()
    for version, default in (("11", True), ("8", False)):
        resolver = java_fdk_resolver(
            metadata_url=config.java_metadata_url,
            search_url=config.java_search_url,
            http=http,
            environ=environ,
        )
        registry.register(
            JavaLangHelper(version=version, resolver=resolver, default=default, environ=environ)
        )
    return registry
