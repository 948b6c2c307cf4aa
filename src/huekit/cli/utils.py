"""Helpers shared by the CLI commands."""

import functools
import logging
import sys
from collections.abc import Callable
from typing import Any

import click

from huekit.exceptions import InvalidColorError, format_error_for_display
from huekit.models import AppConfig, Color, ColorFormat

logger = logging.getLogger(__name__)

FORMAT_CHOICE = click.Choice([f.value for f in ColorFormat], case_sensitive=False)
LEVEL_CHOICE = click.Choice(["AA", "AAA"], case_sensitive=False)
SIZE_CHOICE = click.Choice(["small", "large"], case_sensitive=False)


def report_errors(func: Callable) -> Callable:
    """
    Print errors as ``ERROR: <message>`` plus a hint and exit with status 1.

    Click's own usage errors and aborts pass through untouched.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (click.ClickException, click.Abort, click.exceptions.Exit):
            raise
        except Exception as e:
            logger.debug("Command failed", exc_info=True)
            user_message, recovery_hint = format_error_for_display(e)
            click.echo(f"ERROR: {user_message}", err=True)
            if recovery_hint:
                click.echo(recovery_hint, err=True)
            sys.exit(1)

    return wrapper


def require_color(value: str) -> Color:
    """
    Parse a color argument.

    Raises:
        InvalidColorError: If the argument is not a color
    """
    color = Color.parse(value)
    if not color.is_valid:
        raise InvalidColorError(value)
    return color


def get_config(ctx: click.Context) -> AppConfig:
    """The AppConfig loaded by the root command, or defaults."""
    obj = ctx.find_object(dict) or {}
    return obj.get("config") or AppConfig()


def render(color: Color, fmt: str | None, config: AppConfig) -> str:
    """Serialize with the explicit format, else the configured one, else the color's own."""
    return color.to_string(fmt or config.output_format)
