"""Where: src/musicorg/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
"""

from __future__ import annotations

from musicorg.config.config import (
    CLASSICAL_GENRE_DEFAULT,
    SPLITTER_COMMAND_DEFAULT,
    SPLITTER_TIMEOUT_DEFAULT,
    config as app_config,
)
from musicorg.platform.logging import logger


def text_setting(name: str, value: object, default: str) -> str:
    """Return ``value`` stripped, or ``default`` when it is not a non-blank string."""

    if isinstance(value, str) and value.strip():
        return value.strip()
    if value is not None and not isinstance(value, str):
        logger.warning("Ignoring %s = %r: expected a string, using %r", name, value, default)
    return default


def positive_seconds_setting(name: str, value: object, default: float) -> float:
    """Return ``value`` as seconds, or ``default`` unless it is a positive number."""

    if isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0:
        return float(value)
    if value is not None:
        logger.warning("Ignoring %s = %r: expected a positive number, using %r", name, value, default)
    return default


# Recognized source files ---------------------------------------------------

AUDIO_EXTENSIONS: frozenset[str] = frozenset({".flac", ".ape", ".mp3"})
CUE_EXTENSION: str = ".cue"
IMAGE_EXTENSIONS: frozenset[str] = frozenset({".jpg", ".jpeg", ".png"})

# Classical output is always flac, the container the splitter produces.
CLASSICAL_OUTPUT_EXTENSION: str = ".flac"


# External splitter ---------------------------------------------------------

SPLITTER_COMMAND: str = text_setting("splitter_command", app_config.splitter_command, SPLITTER_COMMAND_DEFAULT)
SPLITTER_TIMEOUT: float = positive_seconds_setting(
    "splitter_timeout", app_config.splitter_timeout, SPLITTER_TIMEOUT_DEFAULT
)


# Strategy selection --------------------------------------------------------

CLASSICAL_GENRE: str = text_setting("classical_genre", app_config.classical_genre, CLASSICAL_GENRE_DEFAULT)


__all__ = [
    "AUDIO_EXTENSIONS",
    "CUE_EXTENSION",
    "IMAGE_EXTENSIONS",
    "CLASSICAL_OUTPUT_EXTENSION",
    "SPLITTER_COMMAND",
    "SPLITTER_TIMEOUT",
    "CLASSICAL_GENRE",
    "positive_seconds_setting",
    "text_setting",
]
