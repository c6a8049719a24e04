"""Cue sheet parsing.

Where: src/musicorg/features/metadata/usecases/cue_sheet.py
What: Parse the album and track metadata a merged album's cue sheet carries.
Why: Merged albums have no per-track files to read tags from until split.
"""

from __future__ import annotations

import codecs
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar, final

from musicorg.platform.logging import logger

from .extraction._tag_utils import parse_year

__all__ = ["CueSheet", "CueSheetParser", "CueTrack", "read_text_guessing"]

_ENCODINGS: tuple[str, ...] = ("utf-8-sig", "cp1251", "latin-1")


def read_text_guessing(path: Path) -> str:
    """Try common encodings for cue files, which rippers write inconsistently."""
    raw = path.read_bytes()
    encodings = _ENCODINGS
    if raw.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        encodings = ("utf-16", *_ENCODINGS)
    for encoding in encodings:
        try:
            text = raw.decode(encoding, errors="strict")
        except UnicodeDecodeError:
            continue
        if "\uFFFD" not in text:
            return text
    return raw.decode("utf-8", errors="replace")


@dataclass(frozen=True, slots=True)
class CueTrack:
    """Per-track entry of a cue sheet."""

    number: int
    title: str | None = None
    performer: str | None = None


@dataclass(frozen=True, slots=True)
class CueSheet:
    """Album-level metadata and ordered tracks of a cue sheet."""

    file: str | None = None
    title: str | None = None
    performer: str | None = None
    genre: str | None = None
    date: str | None = None
    tracks: tuple[CueTrack, ...] = field(default_factory=tuple)

    @property
    def year(self) -> int | None:
        return parse_year(self.date or "")


@final
class CueSheetParser:
    """Parse cue-sheet text into a ``CueSheet``."""

    FILE_RE: ClassVar[re.Pattern[str]] = re.compile(r'^FILE\s+(?:"([^"]+)"|(\S+))(?:\s+\S+)?$', re.IGNORECASE)
    TRACK_RE: ClassVar[re.Pattern[str]] = re.compile(r"^TRACK\s+(\d+)\s+\S+$", re.IGNORECASE)
    FIELD_RE: ClassVar[re.Pattern[str]] = re.compile(
        r'^(TITLE|PERFORMER)\s+(?:"(.*)"|(.+))$', re.IGNORECASE
    )
    REM_RE: ClassVar[re.Pattern[str]] = re.compile(
        r'^REM\s+(GENRE|DATE)\s+(?:"(.*)"|(.+))$', re.IGNORECASE
    )

    @classmethod
    def parse(cls, text: str) -> CueSheet:
        """Parse cue-sheet text.

        Unknown commands (INDEX, FLAGS, CATALOG, ...) are ignored. Only the
        first FILE entry is kept.
        """
        album: dict[str, str | None] = {
            "file": None,
            "title": None,
            "performer": None,
            "genre": None,
            "date": None,
        }
        tracks: list[dict[str, str | int | None]] = []

        for raw_line in text.splitlines():
            line = raw_line.strip()
            if not line:
                continue

            if match := cls.FILE_RE.match(line):
                if album["file"] is None:
                    album["file"] = match.group(1) or match.group(2)
                continue

            if match := cls.TRACK_RE.match(line):
                tracks.append({"number": int(match.group(1)), "title": None, "performer": None})
                continue

            if match := cls.FIELD_RE.match(line):
                key = match.group(1).lower()
                value = match.group(2) if match.group(2) is not None else match.group(3).strip()
                target = tracks[-1] if tracks else album
                target[key] = value
                continue

            if not tracks and (match := cls.REM_RE.match(line)):
                key = match.group(1).lower()
                album[key] = match.group(2) if match.group(2) is not None else match.group(3).strip()

        sheet = CueSheet(
            file=album["file"],
            title=album["title"],
            performer=album["performer"],
            genre=album["genre"],
            date=album["date"],
            tracks=tuple(
                CueTrack(
                    number=int(track["number"] or 0),
                    title=track["title"] if isinstance(track["title"], str) else None,
                    performer=track["performer"] if isinstance(track["performer"], str) else None,
                )
                for track in tracks
            ),
        )
        logger.debug("Parsed cue sheet: %s", sheet)
        return sheet

    @classmethod
    def parse_file(cls, path: Path) -> CueSheet:
        """Read and parse the cue sheet at ``path``."""
        return cls.parse(read_text_guessing(path))
