"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from huekit import __version__
from huekit.exceptions import format_error_for_display
from huekit.models import DEFAULT_CONFIG_PATH, AppConfig

from .commands import config, contrast, convert, info, mix, modify, random_command, readable, scheme

logger = logging.getLogger(__name__)


def setup_logging(verbose: int, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        log_file: Log file path; logs go to stderr when not given
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Explicit log level wins for file logging
    if log_file:
        level = getattr(logging, log_level.upper())

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        # Keeps last 5 files, max 10MB each
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5
        )
    else:
        handler = logging.StreamHandler(sys.stderr)

    handler.setLevel(level)
    handler.setFormatter(formatter)

    # Replace handlers from an earlier invocation in the same process
    logging.basicConfig(level=level, handlers=[handler], force=True)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


@click.group()
@click.version_option(version=__version__, prog_name="huekit")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v: INFO, -vv: DEBUG)")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write logs to this file instead of stderr",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    help="Log level for file logging (default: INFO)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Config file (default: {DEFAULT_CONFIG_PATH})",
)
@click.pass_context
def cli(
    ctx,
    verbose: int,
    log_file: Optional[Path],
    log_level: str,
    config_path: Optional[Path],
):
    """
    huekit - parse, convert and manipulate colors.

    COLOR arguments accept CSS names, hex (#f00, #ff0000, #ff000080) and
    rgb/hsl/hsv/cmyk notation; quote them in the shell.

    \b
    Examples:
      huekit convert "rgb(255, 0, 0)" -f hex
      huekit modify red darken 20
      huekit scheme "#336699" triad
      huekit contrast "#000" "#fff" --level AAA
      huekit random --hue blue --luminosity light --count 5
    """
    setup_logging(verbose, log_file, log_level)

    path = config_path or DEFAULT_CONFIG_PATH
    try:
        app_config = AppConfig.load_or_default(path)
    except Exception as e:
        logger.error(f"Could not load config from {path}: {e}")
        user_message, recovery_hint = format_error_for_display(e)
        click.echo(f"ERROR: {user_message}", err=True)
        if recovery_hint:
            click.echo(recovery_hint, err=True)
        sys.exit(1)

    ctx.obj = {"config": app_config, "config_path": path}


cli.add_command(convert)
cli.add_command(info)
cli.add_command(modify)
cli.add_command(scheme)
cli.add_command(mix)
cli.add_command(contrast)
cli.add_command(readable)
cli.add_command(random_command)
cli.add_command(config)

if __name__ == "__main__":
    cli()
