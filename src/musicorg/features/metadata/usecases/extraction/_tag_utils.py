"""Tag utility helpers.

Where: src/musicorg/features/metadata/usecases/extraction/_tag_utils.py
What: Provide pure helper routines for parsing and safe metadata tag access.
Why: Share parsing between the mutagen extractors and the cue-sheet parser.
"""

from __future__ import annotations

__all__ = [
    "safe_get_first",
    "parse_slash_separated",
    "parse_year",
]


def safe_get_first(data: list[str] | None, default: str = "") -> str:
    """Safely get the first element from a list or return the default."""
    return data[0] if data else default


def parse_slash_separated(value: str) -> tuple[int | None, int | None]:
    """Parse a string in 'number/total' format.

    Returns a tuple (number, total) or (None, None) if conversion fails.
    """
    parts: list[str] = value.split(sep="/") if value else []
    num: int | None = int(parts[0]) if parts and parts[0].strip().isdigit() else None
    total: int | None = int(parts[1]) if len(parts) > 1 and parts[1].strip().isdigit() else None
    return num, total


def parse_year(date_str: str) -> int | None:
    """Parse a year from a string (expects the first 4 characters to be digits)."""
    date_str = date_str.strip() if date_str else ""
    return int(date_str[:4]) if len(date_str) >= 4 and date_str[:4].isdigit() else None
