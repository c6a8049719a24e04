"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Build the ``musicorg`` logger: rich console output plus an optional rotating file.
Why: The CLI reconfigures logging once its verbosity flags and log file are known.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from musicorg.config.paths import default_log_file

from .handlers import WhitePathRichHandler

LOGGER_NAME: Final[str] = "musicorg"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()

_FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 5


def console_level_for(*, verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags to a console log level."""

    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.INFO


def _rotating_file_handler(log_file: Path, level: int) -> logging.Handler:
    resolved = Path(log_file).expanduser().resolve()
    resolved.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        resolved,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=_LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """Replace the handlers of the ``musicorg`` logger.

    Args:
        log_file: Rotating log file; ``None`` keeps logging on the console only.
        console_level: Threshold for console records, see ``console_level_for``.
        file_level: Threshold for the log file.
        console: Console to render to. Defaults to stderr so reports on stdout stay clean.

    Returns:
        logging.Logger: The configured logger.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    console_handler = WhitePathRichHandler(console=console or Console(stderr=True, soft_wrap=True))
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        logger.addHandler(_rotating_file_handler(log_file, file_level))

    return logger


# Console only until the CLI knows where the log file goes.
logger: Final[logging.Logger] = setup_logger()


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "console_level_for", "logger", "setup_logger"]
