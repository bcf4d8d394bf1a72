#!/usr/bin/env python3
"""
MIG Console.

Connects to the MIG API, prints the dashboard report, and opens an
interactive prompt. Press ctrl+c to exit.

Usage:
    python cli.py --help
    python cli.py
    python cli.py -c ~/.migconsole
    python cli.py --api-url http://localhost:1664/api/v1/ --verbose
"""

import asyncio
import sys
from pathlib import Path

import click
import structlog
from rich.console import Console

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from modules.console import __version__
from modules.console.banner import banner
from modules.console.session import SHUTDOWN_MESSAGE, ConsoleSession
from modules.core.config import default_config_path, load_console_config
from modules.core.exceptions import ConsoleError
from modules.core.logging import get_logger, setup_logging


def fail(message: str) -> None:
    """Print an error in red on stderr and exit non-zero."""
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    sys.exit(1)


@click.command()
@click.option(
    "--config", "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Load configuration from file (default: ~/.migconsole).",
)
@click.option(
    "--api-url",
    default=None,
    help="API base URL, overrides the configuration file.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output (INFO level logging).",
)
@click.option(
    "--debug", "-d",
    is_flag=True,
    help="Enable debug output (DEBUG level logging).",
)
@click.option(
    "--no-banner",
    is_flag=True,
    help="Do not print the start-up banner.",
)
@click.version_option(__version__, prog_name="migconsole")
def main(
    config_path: Path | None,
    api_url: str | None,
    verbose: bool,
    debug: bool,
    no_banner: bool,
) -> None:
    """
    MIG Console.

    Prints the agent summary and latest actions from the API dashboard,
    then reads operator input until interrupted with ctrl+c.

    \b
    Examples:
        python cli.py
        python cli.py -c ./migconsole.yaml
        python cli.py --api-url http://localhost:1664/api/v1/ --debug
    """
    console = Console(soft_wrap=True, highlight=False)

    try:
        start_console(console, config_path, api_url, verbose, debug, no_banner)
    except KeyboardInterrupt:
        # ctrl+c before the session installs its own SIGINT handler
        click.echo(SHUTDOWN_MESSAGE)
        sys.exit(0)


def start_console(
    console: Console,
    config_path: Path | None,
    api_url: str | None,
    verbose: bool,
    debug: bool,
    no_banner: bool,
) -> None:
    """Print the banner, resolve configuration and run the session."""
    if not no_banner:
        console.print(banner())

    try:
        config = load_console_config(config_path or default_config_path(), api_url=api_url)
    except ConsoleError as e:
        fail(e.message)

    if debug:
        log_level = "DEBUG"
    elif verbose:
        log_level = "INFO"
    else:
        log_level = None

    setup_logging(config.logging, level=log_level)

    structlog.contextvars.bind_contextvars(source="cli")

    logger = get_logger(__name__)
    logger.debug("Console starting", api_url=config.api.url, timeout=config.api.timeout)

    session = ConsoleSession(config.api.url, console=console, timeout=config.api.timeout)

    try:
        asyncio.run(session.run())
    except ConsoleError as e:
        logger.error("Console aborted", code=e.code, error=e.message)
        fail(e.message)


if __name__ == "__main__":
    main()
