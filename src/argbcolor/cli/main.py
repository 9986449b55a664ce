"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from argbcolor import __version__
from argbcolor.cli.context import CliState

from .commands import config, convert, names, parse

logger = logging.getLogger(__name__)


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging in the current directory
        log_file: Custom log file path (optional)
        log_level: Log level for a custom log file (DEBUG/INFO/WARNING/ERROR)

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        level = getattr(logging, log_level.upper())

    if debug and not log_file:
        log_path = Path.cwd() / "argbcolor-debug.log"
    elif log_file:
        log_path = log_file
    else:
        log_dir = Path.home() / ".argbcolor" / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / "argbcolor.log"

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="argbcolor")
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.argbcolor/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./argbcolor-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for --log-file (default: INFO)'
)
def cli(
    ctx: click.Context,
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    ARGB color tool - parse, convert and list 32-bit ARGB colors.

    \b
    Colors are written as '#AARRGGBB' (lowercase on output). Input also
    accepts '#RRGGBB' (fully opaque) and case-insensitive color names.

    \b
    Examples:
      # Parse hex strings and names
      argbcolor parse "#ff8000" "#80ff0000" CornflowerBlue

      # Show the packed integer
      argbcolor parse --format uint32 red

      # Build a color from components
      argbcolor convert --argb 255 51 102 153
      argbcolor convert --vector 1 0.5 0 1 --normalized

      # List color names
      argbcolor names --filter blue

      # Add a custom name to the palette
      argbcolor config add Brand "#ff112233"
    """
    log_path = setup_logging(verbose, debug, log_file, log_level)
    ctx.obj = CliState(config_path=config_path, log_path=log_path)
    logger.debug(f"Invoking '{ctx.invoked_subcommand}' with config {config_path or 'default'}")


cli.add_command(parse)
cli.add_command(convert)
cli.add_command(names)
cli.add_command(config)

if __name__ == "__main__":
    cli()
