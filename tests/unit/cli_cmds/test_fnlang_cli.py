"""Tests for the fnlang command line."""

import json
from pathlib import Path

from click.testing import CliRunner

from fnlang.cli.cli import cli
from fnlang.core.context import FnLangContext
from tests.fakes.http_fake import FakeHttpFetcher
from tests.test_utils.fdk_responses import (
    METADATA_URL,
    SEARCH_URL,
    TEST_CONFIG,
    maven_metadata,
    package_search,
)


def _context(
    cwd: Path,
    responses: dict[str, bytes] | None = None,
    environ: dict[str, str] | None = None,
) -> FnLangContext:
    return FnLangContext.for_test(
        http=FakeHttpFetcher(responses=responses),
        config=TEST_CONFIG,
        environ=environ,
        cwd=cwd,
    )


def test_langs_lists_java_runtimes(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["langs"], obj=_context(tmp_path))

    assert result.exit_code == 0, result.output
    assert "java11" in result.output
    assert "java8" in result.output
    assert ".java" in result.output


def test_fdk_version_prints_version_and_source(tmp_path: Path) -> None:
    ctx = _context(tmp_path, responses={SEARCH_URL: package_search("2.3.1")})

    result = CliRunner().invoke(cli, ["fdk-version"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "2.3.1" in result.output
    assert "bintray" in result.output


def test_fdk_version_failure_names_override_env(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["fdk-version"], obj=_context(tmp_path))

    assert result.exit_code == 1
    assert "Error: " in result.output
    assert "FN_JAVA_FDK_VERSION" in result.output


def test_unknown_runtime_lists_supported(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["fdk-version", "--runtime", "cobol"], obj=_context(tmp_path))

    assert result.exit_code == 1
    assert "Unsupported runtime 'cobol'" in result.output
    assert "java11" in result.output


def test_init_scaffolds_project_and_pins_images(tmp_path: Path) -> None:
    responses = {METADATA_URL: maven_metadata("1.0.105", ["1.0.105"])}
    target = tmp_path / "hello"

    result = CliRunner().invoke(
        cli, ["init", "--runtime", "java11", str(target)], obj=_context(tmp_path, responses)
    )

    assert result.exit_code == 0, result.output
    assert (target / "pom.xml").is_file()
    assert (target / "src/main/java/com/example/fn/HelloFunction.java").is_file()
    assert "fnproject/fn-java-fdk-build:jdk11-1.0.105" in result.output
    assert "fnproject/fn-java-fdk:jre11-1.0.105" in result.output


def test_init_refuses_existing_project(tmp_path: Path) -> None:
    (tmp_path / "pom.xml").write_text("<project/>")

    result = CliRunner().invoke(cli, ["init", "--runtime", "java"], obj=_context(tmp_path))

    assert result.exit_code == 1
    assert "pom.xml" in result.output
    assert (tmp_path / "pom.xml").read_text() == "<project/>"


def test_init_reports_filesystem_error(tmp_path: Path) -> None:
    responses = {METADATA_URL: maven_metadata("1.0.105", ["1.0.105"])}
    (tmp_path / "src").write_text("not a directory")

    result = CliRunner().invoke(
        cli, ["init", "--runtime", "java11"], obj=_context(tmp_path, responses)
    )

    assert result.exit_code == 1
    assert "Error: " in result.output
    assert isinstance(result.exception, SystemExit)


def test_recipe_renders_dockerfile_for_detected_runtime(tmp_path: Path) -> None:
    (tmp_path / "pom.xml").write_text("<project/>")
    (tmp_path / "src").mkdir()
    (tmp_path / "src/Func.java").write_text("class Func {}")
    ctx = _context(tmp_path, environ={"FN_JAVA_FDK_VERSION": "1.0.105"})

    result = CliRunner().invoke(cli, ["recipe"], obj=ctx)

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "FROM fnproject/fn-java-fdk-build:jdk11-1.0.105 as build-stage"
    assert "FROM fnproject/fn-java-fdk:jre11-1.0.105" in lines
    assert lines[-1] == 'CMD ["com.example.fn.HelloFunction::handleRequest"]'


def test_recipe_json_format(tmp_path: Path) -> None:
    (tmp_path / "pom.xml").write_text("<project/>")
    ctx = _context(tmp_path, environ={"FN_JAVA_FDK_VERSION": "1.0.105"})

    result = CliRunner().invoke(
        cli, ["recipe", "--runtime", "java8", "--format", "json", str(tmp_path)], obj=ctx
    )

    assert result.exit_code == 0, result.output
    recipe = json.loads(result.output)
    assert recipe["build_image"] == "fnproject/fn-java-fdk-build:1.0.105"
    assert recipe["copy_instructions"] == [
        "COPY --from=build-stage /function/target/*.jar /function/app/"
    ]


def test_recipe_missing_pom_is_reported(tmp_path: Path) -> None:
    ctx = _context(tmp_path, environ={"FN_JAVA_FDK_VERSION": "1.0.105"})

    result = CliRunner().invoke(cli, ["recipe", "--runtime", "java"], obj=ctx)

    assert result.exit_code == 1
    assert "Could not find pom.xml" in result.output


def test_recipe_without_detectable_runtime(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["recipe"], obj=_context(tmp_path))

    assert result.exit_code == 1
    assert "Could not detect a runtime" in result.output
