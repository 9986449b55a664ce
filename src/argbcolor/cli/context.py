"""Shared state and error reporting for CLI commands."""

import logging
from pathlib import Path
from typing import NoReturn, Optional

import click

from argbcolor.exceptions import ArgbColorError, ConfigurationError, format_error_for_display
from argbcolor.models import AppConfig, Color

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ["hex", "uint32", "channels"]


class CliState:
    """Per-invocation state stored on the click context."""

    def __init__(self, config_path: Optional[Path] = None, log_path: Optional[Path] = None):
        self.config_path = config_path
        self.log_path = log_path
        self.config: Optional[AppConfig] = None


def get_state(ctx: click.Context) -> CliState:
    return ctx.ensure_object(CliState)


def load_config(ctx: click.Context) -> AppConfig:
    """Load the configuration once per invocation, exiting with a readable error on failure."""
    state = get_state(ctx)
    if state.config is None:
        try:
            state.config = AppConfig.load_or_default(state.config_path)
        except ArgbColorError as e:
            logger.error(f"Failed to load configuration: {e.technical_message}")
            fail(ctx, e)
    return state.config


def save_config(ctx: click.Context, config: AppConfig) -> None:
    """Save the configuration, exiting with a readable error if the file cannot be written."""
    state = get_state(ctx)
    try:
        config.save(state.config_path)
    except OSError as e:
        logger.exception("Failed to save configuration")
        fail(ctx, ConfigurationError(
            user_message="Failed to save configuration",
            technical_message=f"Failed to save configuration to {state.config_path}: {e}",
            recovery_hint="Check file permissions and disk space. A backup (.bak) may be available.",
        ))
    state.config = config


def fail(ctx: click.Context, error: Exception) -> NoReturn:
    """
    Print a user-facing error and exit with code 1.

    Recoverable errors show their recovery hint. Anything else also points
    at the log file, which holds the technical details.
    """
    user_message, recovery_hint = format_error_for_display(error)

    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    log_path = get_state(ctx).log_path
    if not getattr(error, "recoverable", False) and log_path is not None:
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)

    ctx.exit(1)


def format_color(color: Color, output_format: str) -> str:
    """Render a color in one of OUTPUT_FORMATS."""
    if output_format == "uint32":
        return str(color.to_uint32())
    if output_format == "channels":
        return f"a={color.a} r={color.r} g={color.g} b={color.b}"
    return str(color)
