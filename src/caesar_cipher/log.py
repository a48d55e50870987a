"""Logging setup for caesar-cipher.

Modules log through ``logging.getLogger(__name__)``.  The CLI calls
:func:`configure_logging` once; records are rendered by Rich on stderr
so they never interleave with the messages written to stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME: str = "caesar_cipher"


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """Attach a Rich stderr handler to the package logger.

    Calling this more than once only updates the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger
