"""Logging setup for the restconnector command line."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "restconnector"


def setup_logging(
    level: int | str = logging.WARNING,
    *,
    console: Console | None = None,
    rich_output: bool = True,
) -> logging.Logger:
    """Attach a single handler to the package logger.

    Library code only ever logs; handlers are installed here, by the CLI.
    Calling this again replaces the handler instead of stacking another.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    if rich_output:
        handler: logging.Handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    package_logger.addHandler(handler)
    package_logger.propagate = False
    return package_logger
