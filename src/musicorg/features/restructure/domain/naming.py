"""Destination naming for restructured albums and tracks."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Final

from musicorg.shared import AlbumMetadata

_SEPARATORS: Final[re.Pattern[str]] = re.compile(r"[/\\\x00]")


def safe_component(text: str) -> str:
    """Make ``text`` usable as a single path component.

    Only path separators and NUL are replaced; everything else is kept as tagged.
    """
    cleaned = _SEPARATORS.sub("-", text).strip()
    if cleaned in {"", ".", ".."}:
        return "_"
    return cleaned


def regular_album_dir(destination_root: Path, album: AlbumMetadata) -> Path:
    """``destination_root/Artist/Title (Year)``."""
    return destination_root / safe_component(album.artist or "") / safe_component(album.dir_name)


def regular_track_name(number: int, title: str, extension: str) -> str:
    """``NN. Title.ext`` with the source extension kept as is."""
    return f"{number:02d}. {safe_component(title)}{extension}"


def classical_album_dir(destination_root: Path, artist: str, work_title: str) -> Path:
    """``destination_root/Artist/WorkTitle``."""
    return destination_root / safe_component(artist) / safe_component(work_title)


def classical_track_name(number: int, movement_title: str, extension: str) -> str:
    """``N. MovementTitle.ext``, numbers unpadded."""
    return f"{number}. {safe_component(movement_title)}{extension}"


__all__ = [
    "classical_album_dir",
    "classical_track_name",
    "regular_album_dir",
    "regular_track_name",
    "safe_component",
]
