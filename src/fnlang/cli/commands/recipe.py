import json
from dataclasses import asdict
from pathlib import Path

import click

from fnlang.cli.ensure import Ensure
from fnlang.cli.output import machine_output
from fnlang.core.context import FnLangContext
from fnlang.core.recipe import build_recipe, render_dockerfile


@click.command("recipe")
@click.option("--runtime", help="Runtime to build with. Detected from file extensions if omitted.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["dockerfile", "json"]),
    default="dockerfile",
    show_default=True,
    help="Render a Dockerfile, or dump the recipe as JSON.",
)
@click.argument(
    "path",
    required=False,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.pass_obj
def recipe_cmd(
    ctx: FnLangContext, runtime: str | None, output_format: str, path: Path | None
) -> None:
    """Print the build recipe for the function project in PATH."""
    working_dir = path if path is not None else ctx.cwd
    helper = Ensure.lang_helper(ctx, runtime, working_dir)

    with Ensure.no_fnlang_error():
        recipe = build_recipe(helper, working_dir)

    if output_format == "json":
        machine_output(json.dumps(asdict(recipe), indent=2))
    else:
        machine_output(render_dockerfile(recipe), nl=False)
