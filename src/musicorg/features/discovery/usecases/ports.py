"""Summary: Ports defining album discovery dependencies.
Why: Decouple discovery from mutagen and the cue parser so tests can swap them."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from musicorg.features.metadata import CueSheet
from musicorg.shared import TrackMetadata


@runtime_checkable
class TagReaderPort(Protocol):
    """Port for reading track tags from an audio file."""

    def extract(self, file_path: Path) -> TrackMetadata:
        """Return the tags of ``file_path``; raise ``TagReadError`` on failure."""
        ...


@runtime_checkable
class CueSheetParserPort(Protocol):
    """Port for parsing cue sheets from disk."""

    def parse_file(self, path: Path) -> CueSheet:
        """Return the parsed cue sheet at ``path``."""
        ...


__all__ = ["CueSheetParserPort", "TagReaderPort"]
