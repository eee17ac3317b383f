import click

from fnlang.cli.ensure import Ensure
from fnlang.cli.output import machine_output, user_output
from fnlang.core.context import FnLangContext
from fnlang.core.langs.java import JavaLangHelper


@click.command("fdk-version")
@click.option("--runtime", default="java", show_default=True, help="Runtime to resolve for.")
@click.pass_obj
def fdk_version_cmd(ctx: FnLangContext, runtime: str) -> None:
    """Print the latest FDK version for a runtime.

    The version goes to stdout; where it came from goes to stderr.
    """
    helper = Ensure.lang_helper(ctx, runtime, ctx.cwd)
    java_helper = Ensure.not_none(
        helper if isinstance(helper, JavaLangHelper) else None,
        f"Runtime '{runtime}' does not use a versioned FDK",
    )

    with Ensure.no_fnlang_error():
        resolved = java_helper.fdk_version()

    user_output(f"Resolved from {click.style(resolved.source.value, fg='cyan')}")
    machine_output(resolved.version)
