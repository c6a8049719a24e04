"""Format-specific tag writers.

Where: src/musicorg/features/metadata/usecases/tagging/tag_writer.py
What: Write TrackMetadata back to FLAC, MP3 and APE files with mutagen.
Why: Mirror the extractor layout so reading and writing share one tag mapping per format.
"""

from __future__ import annotations

import abc
from pathlib import Path
from typing import Any, ClassVar

from mutagen import MutagenError
from mutagen.easyid3 import EasyID3
from mutagen.flac import FLAC
from mutagen.monkeysaudio import MonkeysAudio
from mutagen.mp3 import MP3

from musicorg.platform.logging import logger
from musicorg.shared import TagWriteError, TrackMetadata

__all__ = [
    "BaseTagWriter",
    "FlacTagWriter",
    "Mp3TagWriter",
    "ApeTagWriter",
    "TagWriter",
]


class BaseTagWriter(abc.ABC):
    """Base class for writers that open a file, set tags and save it."""

    FILE_CLASS: ClassVar[type | None] = None
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "",
        "artist": "",
        "album": "",
        "genre": "",
        "track": "",
        "date": "",
    }

    def write(self, file_path: Path, metadata: TrackMetadata) -> None:
        """Write ``metadata`` into ``file_path``.

        Fields left as None keep whatever the file already carries.
        """
        if self.FILE_CLASS is None:
            raise NotImplementedError("FILE_CLASS must be defined in subclass")

        try:
            audio = self.FILE_CLASS(file_path, **self.FILE_INIT_PARAMS)
            if audio.tags is None:
                audio.add_tags()

            values: dict[str, str | None] = {
                "title": metadata.title,
                "artist": metadata.artist,
                "album": metadata.album,
                "genre": metadata.genre,
                "track": str(metadata.track_number) if metadata.track_number is not None else None,
                "date": str(metadata.year) if metadata.year is not None else None,
            }
            for field_name, value in values.items():
                if value is None:
                    continue
                self._set_tag_value(audio, self.TAG_MAPPING[field_name], value)

            audio.save()
        except (MutagenError, OSError) as exc:
            logger.error("Failed to write tags to %s: %s", file_path, exc)
            raise TagWriteError(file_path, str(exc)) from exc

        logger.debug("Wrote tags to %s: %s", file_path, metadata)

    def _set_tag_value(self, audio: Any, key: str, value: str) -> None:
        audio[key] = [value]


class Mp3TagWriter(BaseTagWriter):
    """Writer for MP3 files using EasyID3 tags."""

    FILE_CLASS: ClassVar[type | None] = MP3
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {"ID3": EasyID3}

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "title",
        "artist": "artist",
        "album": "album",
        "genre": "genre",
        "track": "tracknumber",
        "date": "date",
    }


class FlacTagWriter(BaseTagWriter):
    """Writer for FLAC files using Vorbis comments."""

    FILE_CLASS: ClassVar[type | None] = FLAC
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "title",
        "artist": "artist",
        "album": "album",
        "genre": "genre",
        "track": "tracknumber",
        "date": "date",
    }


class ApeTagWriter(BaseTagWriter):
    """Writer for Monkey's Audio files using APEv2 tags."""

    FILE_CLASS: ClassVar[type | None] = MonkeysAudio
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "Title",
        "artist": "Artist",
        "album": "Album",
        "genre": "Genre",
        "track": "Track",
        "date": "Year",
    }

    def _set_tag_value(self, audio: Any, key: str, value: str) -> None:
        audio[key] = value


class TagWriter:
    """Facade routing tag writes by file extension."""

    _format_map: ClassVar[dict[str, BaseTagWriter]] = {
        ".mp3": Mp3TagWriter(),
        ".flac": FlacTagWriter(),
        ".ape": ApeTagWriter(),
    }

    def write(self, metadata: TrackMetadata) -> None:
        """Write ``metadata`` into the file at ``metadata.path``.

        Raises:
            TagWriteError: If the path is unset, the format unsupported or the write fails.
        """
        if metadata.path is None:
            raise TagWriteError(Path(), "track has no file path")

        writer = self._format_map.get(metadata.path.suffix.lower())
        if writer is None:
            raise TagWriteError(metadata.path, f"Unsupported file format: {metadata.path.suffix}")

        writer.write(metadata.path, metadata)
