"""Shared base classes for metadata extractors.

Where: src/musicorg/features/metadata/usecases/extraction/_base_extractors.py
What: Define abstract base classes that encapsulate shared tag handling logic.
Why: Keep per-format extractors down to a file class and a tag mapping.
"""

from __future__ import annotations

import abc
from pathlib import Path
from typing import Any, ClassVar, Protocol, cast, override

from mutagen import MutagenError

from musicorg.platform.logging import logger
from musicorg.shared import TagReadError, TrackMetadata

from ._tag_utils import parse_slash_separated, parse_year, safe_get_first

class TagSource(Protocol):
    """Mapping-like view mutagen file objects give over their tags."""

    def get(self, key: str, default: object = None) -> object: ...


__all__ = [
    "TagSource",
    "AudioFormatExtractor",
    "BaseTagExtractor",
    "BaseAudioExtractor",
]


class AudioFormatExtractor(abc.ABC):
    """Abstract base class for audio metadata extractors."""

    @abc.abstractmethod
    def extract_metadata(self, file_path: Path) -> TrackMetadata:
        """Extract metadata from an audio file."""
        raise NotImplementedError


class BaseTagExtractor:
    """Provides common helper methods for tag extraction."""

    @staticmethod
    def get_str_tag(tags: TagSource, key: str, default: str | None = None) -> str | None:
        """Extract the first string value for a key from tag collection."""
        value: str | list[str] | None = cast(str | list[str] | None, tags.get(key))
        if isinstance(value, list):
            return safe_get_first(data=cast(list[str], value), default=default or "") or default
        if isinstance(value, str):
            return value
        return default


class BaseAudioExtractor(AudioFormatExtractor, abc.ABC):
    """Base class for audio metadata extractors."""

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

    def _open_file(self, file_path: Path) -> TagSource:
        """Open the audio file and get its tags."""
        if self.FILE_CLASS is None:
            raise NotImplementedError("FILE_CLASS must be defined in subclass")

        try:
            file_instance = self.FILE_CLASS(file_path, **self.FILE_INIT_PARAMS)
        except MutagenError as exc:
            logger.error(
                "Failed to extract %s metadata from %s: %s",
                self.__class__.__name__.replace("Extractor", ""),
                file_path,
                exc,
            )
            if "No such file" in str(exc):
                raise FileNotFoundError(str(exc)) from exc
            raise TagReadError(file_path, str(exc)) from exc
        return cast(TagSource, file_instance)

    @abc.abstractmethod
    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        """Get a tag value from the audio file."""
        raise NotImplementedError

    @override
    def extract_metadata(self, file_path: Path) -> TrackMetadata:
        """Extract metadata from an audio file."""
        tags: TagSource = self._open_file(file_path)
        logger.debug("Opened file %s with tags type: %s", file_path, type(tags))

        title: str | None = self._get_tag_value(tags, key=self.TAG_MAPPING["title"])
        artist: str | None = self._get_tag_value(tags, key=self.TAG_MAPPING["artist"])
        album: str | None = self._get_tag_value(tags, key=self.TAG_MAPPING["album"])
        genre: str | None = self._get_tag_value(tags, key=self.TAG_MAPPING["genre"])

        track_str: str = self._get_tag_value(tags, key=self.TAG_MAPPING["track"]) or ""
        track_number, _ = parse_slash_separated(value=track_str)

        year_str_preferred: str = self._get_tag_value(tags, key="year") or ""
        date_str: str = self._get_tag_value(tags, key=self.TAG_MAPPING["date"]) or ""
        year: int | None = parse_year(year_str_preferred) or parse_year(date_str)

        metadata = TrackMetadata(
            title=title,
            artist=artist,
            album=album,
            genre=genre,
            year=year,
            track_number=track_number,
            path=file_path,
        )
        logger.debug("Extracted metadata: %s", metadata)
        return metadata
