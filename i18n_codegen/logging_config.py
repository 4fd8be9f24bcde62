"""Logging setup shared by all i18n_codegen modules.

Modules obtain loggers through get_logger(__name__); the CLI calls
setup_logging() once to attach a rich handler to the package logger.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "i18n_codegen"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package logger.

    Args:
        name: Usually the calling module's __name__.

    Returns:
        The named logger.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def setup_logging(level: int | str = logging.WARNING, console: Console | None = None) -> None:
    """Attach a RichHandler to the package logger.

    Calling it again only updates the level.

    Args:
        level: Logging level name or number.
        console: Console to log to; defaults to stderr.
    """
    global _configured

    logger = logging.getLogger(PACKAGE_LOGGER)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)

    if _configured:
        return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.propagate = False
    _configured = True
