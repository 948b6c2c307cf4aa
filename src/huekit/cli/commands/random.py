"""Random color command."""

import click

from huekit.cli.utils import FORMAT_CHOICE, get_config, report_errors
from huekit.models import ColorFormat, Luminosity
from huekit.random_color import from_random


@click.command(name="random")
@click.option("--hue", default=None, help="Hue in degrees, a hue name (red, blue, ...) or a color")
@click.option(
    "--luminosity",
    "-l",
    type=click.Choice([lum.value for lum in Luminosity], case_sensitive=False),
    default=None,
    help="Luminosity class",
)
@click.option("--seed", "-s", type=int, default=None, help="Seed for reproducible colors")
@click.option("--count", "-n", type=click.IntRange(min=0), default=None, help="Number of colors")
@click.option("--alpha", type=click.FloatRange(0, 1), default=None, help="Alpha of the colors")
@click.option("--format", "-f", "fmt", type=FORMAT_CHOICE, default=None, help="Output format")
@click.pass_context
@report_errors
def random_command(
    ctx,
    hue: str | None,
    luminosity: str | None,
    seed: int | None,
    count: int | None,
    alpha: float | None,
    fmt: str | None,
):
    """
    Generate attractive random colors.

    \b
    Examples:
      huekit random --hue purple --count 3 --seed 11100
      huekit random -l dark -n 5
    """
    config = get_config(ctx)
    colors = from_random(
        hue=hue,
        luminosity=luminosity.lower() if luminosity else None,
        seed=seed,
        count=count,
        alpha=alpha,
    )

    for color in colors:
        click.echo(color.to_string(fmt or config.output_format or ColorFormat.HEX))
