"""Configuration commands.

Commands:
    - config show     # Print the active configuration as JSON
    - config init     # Write a default configuration file
    - config path     # Print the configuration file location
"""

import logging

import click

from huekit.cli.utils import get_config, report_errors
from huekit.models import DEFAULT_CONFIG_PATH, AppConfig

logger = logging.getLogger(__name__)


def _config_path(ctx: click.Context):
    obj = ctx.find_object(dict) or {}
    return obj.get("config_path") or DEFAULT_CONFIG_PATH


@click.group(name="config")
def config():
    """Manage huekit defaults."""
    pass


@config.command(name="show")
@click.pass_context
@report_errors
def show_config(ctx):
    """Print the active configuration."""
    click.echo(get_config(ctx).model_dump_json(indent=2))


@config.command(name="init")
@click.option("--force", is_flag=True, help="Overwrite an existing file (a .bak is kept)")
@click.pass_context
@report_errors
def init_config(ctx, force: bool):
    """Write a configuration file with default values."""
    path = _config_path(ctx)

    if path.exists() and not force:
        click.echo(f"Config file already exists: {path}", err=True)
        click.echo("Use --force to overwrite it", err=True)
        ctx.exit(1)

    AppConfig().save(path)
    logger.info(f"Wrote default config to {path}")
    click.echo(f"Wrote {path}")


@config.command(name="path")
@click.pass_context
def config_path(ctx):
    """Print the configuration file location."""
    click.echo(str(_config_path(ctx)))
