"""
Shared console instances for the Haven CLI.

``console`` writes to stdout, ``err_console`` to stderr. The generated configuration
template itself is written with ``typer.echo`` so that rich markup never touches it.
"""

import os
import sys

from loguru import logger
from rich.console import Console


def _create_console(stderr: bool = False) -> Console:
    """Create a console instance with appropriate settings."""
    disable_console_styling = os.environ.get("HAVEN_DISABLE_CONSOLE_STYLING")
    if disable_console_styling:
        # Disable all styling features. Reference: https://rich.readthedocs.io/en/latest/console.html
        environ = os.environ.copy()
        environ["NO_COLOR"] = "1"
        environ["TERM"] = "dumb"
        environ["TTY_COMPATIBLE"] = "0"
        environ["TTY_INTERACTIVE"] = "0"
        return Console(stderr=stderr, _environ=environ)
    return Console(stderr=stderr)


def configure_logging(verbose: bool = False) -> None:
    """Route library logs to stderr. Only warnings and errors are shown unless ``verbose`` is set."""
    logger.enable("haven.core")
    logger.remove()
    logger.add(
        lambda message: sys.stderr.write(message),
        level="DEBUG" if verbose else "WARNING",
        colorize=not os.environ.get("HAVEN_DISABLE_CONSOLE_STYLING"),
        format="<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>",
    )


# Shared console instances for all CLI output
console = _create_console()
err_console = _create_console(stderr=True)

__all__ = ["console", "err_console", "configure_logging"]
