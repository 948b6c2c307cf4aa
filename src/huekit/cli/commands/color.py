"""Commands that convert, inspect and transform a single color."""

import logging

import click

from huekit.cli.utils import FORMAT_CHOICE, get_config, render, report_errors, require_color

logger = logging.getLogger(__name__)

MODIFY_OPERATIONS = [
    "lighten",
    "darken",
    "brighten",
    "saturate",
    "desaturate",
    "spin",
    "greyscale",
    "complement",
]

SCHEMES = ["analogous", "monochromatic", "triad", "tetrad", "splitcomplement"]


@click.command()
@click.argument("color")
@click.option("--format", "-f", "fmt", type=FORMAT_CHOICE, default=None, help="Output format")
@click.pass_context
@report_errors
def convert(ctx, color: str, fmt: str | None):
    """
    Print COLOR in another format.

    \b
    Examples:
      huekit convert red -f hex       # #ff0000
      huekit convert "#f00" -f hsl    # hsl(0, 100%, 50%)
    """
    parsed = require_color(color)
    click.echo(render(parsed, fmt, get_config(ctx)))


@click.command()
@click.argument("color")
@report_errors
def info(color: str):
    """Show every representation of COLOR."""
    parsed = require_color(color)

    click.echo(f"Input:      {color}")
    click.echo(f"Format:     {parsed.format.value if parsed.format else '-'}")
    click.echo(f"Hex:        {parsed.to_hex_string()}")
    click.echo(f"Hex8:       {parsed.to_hex8_string()}")
    click.echo(f"RGB:        {parsed.to_rgb_string()}")
    click.echo(f"RGB %:      {parsed.to_percentage_rgb_string()}")
    click.echo(f"HSL:        {parsed.to_hsl_string()}")
    click.echo(f"HSV:        {parsed.to_hsv_string()}")
    click.echo(f"CMYK:       {parsed.to_cmyk_string()}")
    click.echo(f"Name:       {parsed.to_name() or '-'}")
    click.echo(f"Luminance:  {parsed.get_luminance():.4f}")
    click.echo(f"Brightness: {parsed.get_brightness():.1f}")
    click.echo(f"Tone:       {'dark' if parsed.is_dark() else 'light'}")


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("color")
@click.argument("operation", type=click.Choice(MODIFY_OPERATIONS, case_sensitive=False))
@click.argument("amount", type=float, required=False)
@click.option("--format", "-f", "fmt", type=FORMAT_CHOICE, default=None, help="Output format")
@click.pass_context
@report_errors
def modify(ctx, color: str, operation: str, amount: float | None, fmt: str | None):
    """
    Apply OPERATION to COLOR.

    AMOUNT is in percentage points (degrees for spin) and defaults to 10.

    \b
    Examples:
      huekit modify red lighten 20
      huekit modify "#336699" spin -45
    """
    parsed = require_color(color)
    operation = operation.lower()

    if operation == "greyscale":
        result = parsed.greyscale()
    elif operation == "complement":
        result = parsed.complement()
    else:
        if amount is None:
            amount = 10
        result = getattr(parsed, operation)(amount)

    logger.info(f"{operation}({color!r}, {amount}) -> {result.to_rgb_string()}")
    click.echo(render(result, fmt, get_config(ctx)))


@click.command()
@click.argument("color")
@click.argument("kind", type=click.Choice(SCHEMES, case_sensitive=False))
@click.option("--results", "-n", type=click.IntRange(min=1), default=None, help="Number of colors")
@click.option("--slices", type=click.IntRange(min=1), default=None, help="Hue wheel slices (analogous)")
@click.option("--format", "-f", "fmt", type=FORMAT_CHOICE, default=None, help="Output format")
@click.pass_context
@report_errors
def scheme(ctx, color: str, kind: str, results: int | None, slices: int | None, fmt: str | None):
    """Print a color scheme built around COLOR, one color per line."""
    config = get_config(ctx)
    parsed = require_color(color)
    kind = kind.lower()

    if kind == "analogous":
        colors = parsed.analogous(
            results or config.analogous_results, slices or config.analogous_slices
        )
    elif kind == "monochromatic":
        colors = parsed.monochromatic(results or config.monochromatic_results)
    else:
        colors = getattr(parsed, kind)()

    for c in colors:
        click.echo(render(c, fmt, config))


@click.command()
@click.argument("color1")
@click.argument("color2")
@click.option("--amount", "-a", type=float, default=50, show_default=True, help="Percent of COLOR2")
@click.option("--format", "-f", "fmt", type=FORMAT_CHOICE, default=None, help="Output format")
@click.pass_context
@report_errors
def mix(ctx, color1: str, color2: str, amount: float, fmt: str | None):
    """Blend COLOR1 towards COLOR2."""
    first = require_color(color1)
    second = require_color(color2)
    click.echo(render(first.mix(second, amount), fmt, get_config(ctx)))
