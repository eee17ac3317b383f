from pathlib import Path

import click

from fnlang.cli.ensure import Ensure
from fnlang.cli.output import user_output
from fnlang.core.context import FnLangContext


@click.command("init")
@click.option("--runtime", required=True, help="Runtime of the new function (e.g. java11).")
@click.argument(
    "path",
    required=False,
    type=click.Path(file_okay=False, path_type=Path),
)
@click.pass_obj
def init_cmd(ctx: FnLangContext, runtime: str, path: Path | None) -> None:
    """Scaffold a new function project in PATH (default: current directory)."""
    target_dir = path if path is not None else ctx.cwd
    helper = Ensure.lang_helper(ctx, runtime, target_dir)

    if not helper.has_boilerplate():
        user_output(f"Runtime '{runtime}' has no boilerplate; nothing to generate.")
        return

    with Ensure.no_fnlang_error():
        target_dir.mkdir(parents=True, exist_ok=True)
        helper.generate_boilerplate(target_dir)
        user_output(f"✓ Generated {helper.runtime} function boilerplate in {target_dir}")

        if helper.should_pin_base_images_at_init():
            user_output(f"  build image: {click.style(helper.build_image(), fg='green')}")
            user_output(f"  run image:   {click.style(helper.run_image(), fg='green')}")
