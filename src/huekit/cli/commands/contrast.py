"""WCAG2 contrast commands."""

import click

from huekit.cli.utils import LEVEL_CHOICE, SIZE_CHOICE, get_config, report_errors, require_color
from huekit.readability import is_readable, most_readable, readability


@click.command()
@click.argument("color1")
@click.argument("color2")
@click.option("--level", type=LEVEL_CHOICE, default=None, help="WCAG2 level (default: config)")
@click.option("--size", type=SIZE_CHOICE, default=None, help="Text size (default: config)")
@click.pass_context
@report_errors
def contrast(ctx, color1: str, color2: str, level: str | None, size: str | None):
    """Show the contrast ratio of two colors and whether it is readable."""
    config = get_config(ctx)
    level = (level or config.wcag_level.value).upper()
    size = (size or config.wcag_size.value).lower()

    first = require_color(color1)
    second = require_color(color2)

    ratio = readability(first, second)
    verdict = "yes" if is_readable(first, second, level=level, size=size) else "no"

    click.echo(f"Contrast ratio: {ratio:.2f}:1")
    click.echo(f"Readable ({level}, {size}): {verdict}")


@click.command()
@click.argument("base")
@click.argument("candidates", nargs=-1, required=True)
@click.option(
    "--fallback/--no-fallback",
    default=None,
    help="Fall back to white or black when no candidate is readable (default: config)",
)
@click.option("--level", type=LEVEL_CHOICE, default=None, help="WCAG2 level (default: config)")
@click.option("--size", type=SIZE_CHOICE, default=None, help="Text size (default: config)")
@click.pass_context
@report_errors
def readable(
    ctx,
    base: str,
    candidates: tuple[str, ...],
    fallback: bool | None,
    level: str | None,
    size: str | None,
):
    """
    Print the candidate most readable on BASE.

    \b
    Examples:
      huekit readable "#123" "#124" "#125" --no-fallback   # #112255
      huekit readable "#123" "#124" "#125"                 # #ffffff
    """
    config = get_config(ctx)

    best = most_readable(
        require_color(base),
        [require_color(c) for c in candidates],
        include_fallback_colors=config.include_fallback_colors if fallback is None else fallback,
        level=(level or config.wcag_level.value).upper(),
        size=(size or config.wcag_size.value).lower(),
    )
    click.echo(best.to_hex_string())
