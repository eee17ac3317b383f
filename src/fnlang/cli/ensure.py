"""CLI error handling utilities with styled output.

All errors use a red "Error:" prefix and exit with status 1.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn, TypeVar

import click

from fnlang.cli.output import user_output
from fnlang.core.errors import FnLangError

if TYPE_CHECKING:
    from fnlang.core.context import FnLangContext
    from fnlang.core.langs.abc import LangHelper

T = TypeVar("T")


def _fail(error_message: str) -> NoReturn:
    user_output(click.style("Error: ", fg="red") + error_message)
    raise SystemExit(1)


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            _fail(error_message)

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        Returns:
            The value unchanged if not None (with narrowed type T)

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            _fail(error_message)
        return value

    @staticmethod
    def lang_helper(ctx: "FnLangContext", runtime: str | None, project_dir: Path) -> "LangHelper":
        """Select the helper named by runtime, or detect one from project_dir.

        Raises:
            SystemExit: If runtime is unknown or nothing could be detected
        """
        supported = ", ".join(ctx.registry.lang_strings())
        if runtime is not None:
            return Ensure.not_none(
                ctx.registry.get_lang_helper(runtime),
                f"Unsupported runtime '{runtime}'. Supported runtimes: {supported}",
            )
        return Ensure.not_none(
            ctx.registry.detect_lang_helper(project_dir),
            f"Could not detect a runtime in {project_dir}.\n"
            f"Pass --runtime with one of: {supported}",
        )

    @staticmethod
    @contextmanager
    def no_fnlang_error() -> Iterator[None]:
        """Turn FnLangError or OSError raised inside the block into a styled error and exit."""
        try:
            yield
        except (FnLangError, OSError) as e:
            _fail(str(e))
