"""Named color listing."""

from typing import Optional

import click

from argbcolor.cli.context import load_config


@click.command(name="names")
@click.option("--filter", "name_filter", type=str, default=None, help="Only show names containing TEXT")
@click.pass_context
def names(ctx: click.Context, name_filter: Optional[str]):
    """List the known color names, including names from the config palette."""
    config = load_config(ctx)
    table = config.color_table()
    custom = {name.upper() for name in config.palette}

    shown = [name for name in table if not name_filter or name_filter.upper() in name.upper()]
    if not shown:
        click.echo(f"No color names match '{name_filter}'.")
        return

    width = max(len(name) for name in shown) + 2
    for name in shown:
        marker = "  [custom]" if name.upper() in custom else ""
        click.echo(f"{name:<{width}}{table[name]}{marker}")
