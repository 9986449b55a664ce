"""Config command implementations."""

import logging

import click

from argbcolor.cli.context import fail, get_state, load_config, save_config
from argbcolor.exceptions import ColorFormatError
from argbcolor.models import DEFAULT_CONFIG_PATH, Color

logger = logging.getLogger(__name__)


@click.group(name="config")
def config():
    """Show and edit the argbcolor configuration."""
    pass


@config.command(name="show")
@click.pass_context
def show_config(ctx: click.Context):
    """Print the effective configuration as JSON."""
    click.echo(load_config(ctx).model_dump_json(indent=2))


@config.command(name="path")
@click.pass_context
def config_path(ctx: click.Context):
    """Print the configuration file path."""
    click.echo(str(get_state(ctx).config_path or DEFAULT_CONFIG_PATH))


@config.command(name="add")
@click.argument("name")
@click.argument("color")
@click.pass_context
def add_color(ctx: click.Context, name: str, color: str):
    """
    Add or replace a custom color NAME in the palette.

    COLOR may be a hex string or an existing color name.

    \b
    Examples:
      argbcolor config add Brand "#ff112233"
      argbcolor config add Accent tomato
    """
    if not name or name.startswith("#"):
        raise click.BadParameter("color names must be non-empty and not start with '#'", param_hint="NAME")

    app_config = load_config(ctx)
    try:
        value = Color.parse(color, table=app_config.color_table())
    except ColorFormatError as e:
        fail(ctx, e)

    palette = {k: v for k, v in app_config.palette.items() if k.upper() != name.upper()}
    palette[name] = value
    save_config(ctx, app_config.model_copy(update={"palette": palette}))

    logger.info(f"Added palette color {name}={value}")
    click.echo(f"{name} = {value}")


@config.command(name="remove")
@click.argument("name")
@click.pass_context
def remove_color(ctx: click.Context, name: str):
    """Remove custom color NAME (any case) from the palette."""
    app_config = load_config(ctx)
    palette = {k: v for k, v in app_config.palette.items() if k.upper() != name.upper()}
    if len(palette) == len(app_config.palette):
        raise click.BadParameter(f"'{name}' is not in the palette", param_hint="NAME")

    save_config(ctx, app_config.model_copy(update={"palette": palette}))

    logger.info(f"Removed palette color {name}")
    click.echo(f"Removed {name}")
