"""Logging helpers shared by every prop_codegen module.

Library modules only ever call :func:`get_logger`; handlers are installed by
the CLI through :func:`setup_logging`.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "prop_codegen"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger for a module, namespaced under the package logger.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        The configured logger instance.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(level: int | str = logging.WARNING, console: Console | None = None) -> None:
    """Attach a rich handler to the package logger.

    Calling this more than once replaces the previous rich handler.

    Args:
        level: Logging level name or number.
        console: Console to log to; defaults to stderr.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
