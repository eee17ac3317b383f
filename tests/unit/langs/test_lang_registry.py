"""Tests for language helper lookup."""

from pathlib import Path

import pytest

from fnlang.core.errors import DuplicateLangError
from fnlang.core.langs.abc import BaseLangHelper
from fnlang.core.langs.java import JavaLangHelper
from fnlang.core.langs.registry import LangRegistry, default_registry
from tests.fakes.http_fake import FakeHttpFetcher
from tests.test_utils.fdk_responses import TEST_CONFIG


class _StubHelper(BaseLangHelper):
    def __init__(self, names: list[str], extensions: list[str]) -> None:
        self._names = names
        self._extensions = extensions

    def lang_strings(self) -> list[str]:
        return self._names

    def file_extensions(self) -> list[str]:
        return self._extensions

    def build_image(self) -> str:
        return "stub/build:1"

    def run_image(self) -> str:
        return "stub/run:1"

    def build_stage_instructions(self) -> list[str]:
        return []

    def final_stage_instructions(self) -> list[str]:
        return []

    def entrypoint(self) -> str:
        return "./func"


def _registry() -> LangRegistry:
    return default_registry(TEST_CONFIG, FakeHttpFetcher(), {})


def test_default_registry_aliases_and_extensions_are_unique() -> None:
    registry = _registry()
    aliases = [a for h in registry.helpers() for a in h.lang_strings()]
    extensions = [e for h in registry.helpers() for e in h.file_extensions()]

    assert len(aliases) == len(set(aliases))
    assert len(extensions) == len(set(extensions))


def test_get_lang_helper_by_alias() -> None:
    registry = _registry()

    java = registry.get_lang_helper("java")
    java11 = registry.get_lang_helper("java11")
    java8 = registry.get_lang_helper("java8")

    assert java is java11
    assert isinstance(java8, JavaLangHelper)
    assert java8.version == "8"
    assert registry.get_lang_helper("JAVA") is None
    assert registry.get_lang_helper("cobol") is None


def test_helpers_do_not_share_resolved_versions() -> None:
    registry = _registry()
    java11 = registry.get_lang_helper("java11")
    java8 = registry.get_lang_helper("java8")
    assert isinstance(java11, JavaLangHelper) and isinstance(java8, JavaLangHelper)

    assert java11._resolver is not java8._resolver


def test_register_rejects_duplicate_alias() -> None:
    registry = _registry()

    with pytest.raises(DuplicateLangError, match="java11"):
        registry.register(_StubHelper(["kotlin", "java11"], [".kt"]))

    assert registry.get_lang_helper("kotlin") is None


def test_register_rejects_duplicate_extension() -> None:
    registry = _registry()

    with pytest.raises(DuplicateLangError, match=r"\.java"):
        registry.register(_StubHelper(["groovy"], [".java"]))

    assert registry.get_lang_helper("groovy") is None


def test_detect_lang_helper_from_files(tmp_path: Path) -> None:
    registry = _registry()
    source_dir = tmp_path / "src/main/java"
    source_dir.mkdir(parents=True)
    (source_dir / "Func.java").write_text("class Func {}")
    (tmp_path / "README.md").write_text("hi")

    helper = registry.detect_lang_helper(tmp_path)

    assert helper is registry.get_lang_helper("java")


def test_detect_lang_helper_ignores_build_output(tmp_path: Path) -> None:
    registry = _registry()
    (tmp_path / "target").mkdir()
    (tmp_path / "target/Generated.java").write_text("")

    assert registry.detect_lang_helper(tmp_path) is None


def test_base_helper_defaults_are_no_ops(tmp_path: Path) -> None:
    helper = _StubHelper(["stub"], [".stub"])

    assert not helper.has_boilerplate()
    helper.generate_boilerplate(tmp_path)
    assert list(tmp_path.iterdir()) == []
    assert not helper.supports_pre_build_validation()
    helper.pre_build_validate(tmp_path)
    assert not helper.should_pin_base_images_at_init()
    assert helper.identity().name == "stub"
