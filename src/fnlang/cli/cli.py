import logging
import os

import click

from fnlang.cli.commands.fdk_version import fdk_version_cmd
from fnlang.cli.commands.init import init_cmd
from fnlang.cli.commands.langs import langs_cmd
from fnlang.cli.commands.recipe import recipe_cmd
from fnlang.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV = "FNLANG_DEBUG"


def configure_logging(debug: bool) -> None:
    if debug or os.environ.get(DEBUG_ENV):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="fnlang")
@click.option("--debug", is_flag=True, help="Log version lookups and build decisions to stderr.")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Decide how function projects are built, and scaffold new ones."""
    configure_logging(debug)
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ValueError as e:
            raise click.ClickException(str(e)) from e


cli.add_command(fdk_version_cmd)
cli.add_command(init_cmd)
cli.add_command(langs_cmd)
cli.add_command(recipe_cmd)


def main() -> None:
    """CLI entry point used by the `fnlang` console script."""
    cli()
