from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from ..config import CARGO_PACK_CONFIG

LOGGER_NAME = "cargo_pack"


class _CargoPackRichConsoleHandler(RichHandler):
    """Console handler installed by ``configure_logging``."""

    def __init__(self, level: int) -> None:
        super().__init__(
            level=level,
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
            rich_tracebacks=False,
        )


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging(level: int | None = None) -> logging.Logger:
    """Attach a rich console handler to the cargo_pack logger.

    Calling this more than once only updates the level.
    """
    resolved = CARGO_PACK_CONFIG.log_level if level is None else level
    logger = get_logger()
    logger.setLevel(resolved)

    for handler in logger.handlers:
        if isinstance(handler, _CargoPackRichConsoleHandler):
            handler.setLevel(resolved)
            return logger

    logger.addHandler(_CargoPackRichConsoleHandler(resolved))
    return logger
