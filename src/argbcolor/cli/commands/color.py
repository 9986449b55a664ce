"""Parse and convert command implementations."""

import logging
from typing import Optional

import click

from argbcolor.cli.context import OUTPUT_FORMATS, format_color, load_config
from argbcolor.exceptions import collect_errors
from argbcolor.models import Color

logger = logging.getLogger(__name__)


class UInt32ParamType(click.ParamType):
    """Unsigned 32-bit integer in decimal or 0x-prefixed hexadecimal."""

    name = "uint32"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            number = value
        else:
            try:
                number = int(value, 0)
            except ValueError:
                self.fail(f"{value!r} is not a decimal or 0x-prefixed integer", param, ctx)

        if not 0 <= number <= 0xFFFFFFFF:
            self.fail(f"{value!r} is outside the unsigned 32-bit range", param, ctx)
        return number


UINT32 = UInt32ParamType()
BYTE = click.IntRange(0, 255)


@click.command(name="parse")
@click.argument("values", nargs=-1, required=True)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default=None,
    help="Output format (default: from config, normally hex)",
)
@click.pass_context
def parse(ctx: click.Context, values: tuple[str, ...], output_format: Optional[str]):
    """
    Parse color strings and print them in canonical form.

    VALUES may be '#RRGGBB', '#AARRGGBB' or color names (case-insensitive).
    Every value is attempted; the exit code is 1 if any of them failed.

    \b
    Examples:
      argbcolor parse "#ff0000" "#80ff0000" cornflowerblue
      argbcolor parse --format uint32 Red
    """
    config = load_config(ctx)
    table = config.color_table()
    output_format = (output_format or config.output_format).lower()

    collector = collect_errors("parse colors")
    for value in values:
        with collector.try_operation(value):
            color = Color.parse(value, table=table)
            click.echo(format_color(color, output_format))

    logger.info(f"Parsed {collector.success_count} of {len(values)} color(s)")

    if collector.has_errors:
        click.echo(collector.get_summary(), err=True)
        ctx.exit(1)


@click.command(name="convert")
@click.option("--uint32", "uint32_value", type=UINT32, default=None, help="Packed 0xAARRGGBB integer")
@click.option("--argb", type=BYTE, nargs=4, default=None, help="Alpha, red, green, blue (0-255)")
@click.option("--rgb", type=BYTE, nargs=3, default=None, help="Red, green, blue (0-255), opaque")
@click.option("--vector", type=float, nargs=4, default=None, help="X=red Y=green Z=blue W=alpha")
@click.option("--normalized", is_flag=True, help="Treat --vector components as 0.0-1.0")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default="hex",
    help="Output format (default: hex)",
)
@click.pass_context
def convert(
    ctx: click.Context,
    uint32_value: Optional[int],
    argb: Optional[tuple[int, int, int, int]],
    rgb: Optional[tuple[int, int, int]],
    vector: Optional[tuple[float, float, float, float]],
    normalized: bool,
    output_format: str,
):
    """
    Build a color from numeric components.

    Exactly one of --uint32, --argb, --rgb or --vector is required.
    Vector components are truncated, not rounded, and wrap modulo 256.

    \b
    Examples:
      argbcolor convert --uint32 0xff336699
      argbcolor convert --argb 128 255 0 0
      argbcolor convert --vector 1 0 0 1 --normalized
    """
    sources = [uint32_value, argb, rgb, vector]
    if sum(source is not None for source in sources) != 1:
        raise click.UsageError("Specify exactly one of --uint32, --argb, --rgb or --vector")
    if normalized and vector is None:
        raise click.UsageError("--normalized only applies to --vector")

    if uint32_value is not None:
        color = Color.from_uint32(uint32_value)
    elif argb is not None:
        color = Color.from_argb(*argb)
    elif rgb is not None:
        color = Color.from_rgb(*rgb)
    else:
        color = Color.from_vector4(vector, normalized=normalized)

    logger.debug(f"Converted to {color!r}")
    click.echo(format_color(color, output_format.lower()))
