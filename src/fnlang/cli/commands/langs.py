import click
from rich.console import Console
from rich.table import Table

from fnlang.core.context import FnLangContext


@click.command("langs")
@click.pass_obj
def langs_cmd(ctx: FnLangContext) -> None:
    """List supported runtimes."""
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("runtime", style="cyan")
    table.add_column("aliases")
    table.add_column("extensions", style="dim")
    table.add_column("boilerplate")

    for helper in ctx.registry.helpers():
        identity = helper.identity()
        table.add_row(
            identity.name,
            ", ".join(identity.aliases),
            ", ".join(helper.file_extensions()) or "-",
            "yes" if helper.has_boilerplate() else "no",
        )

    Console().print(table)
