"""Format-specific metadata extractors.

Where: src/musicorg/features/metadata/usecases/extraction/format_extractors.py
What: Define concrete metadata extractors for supported audio formats.
Why: Separate format logic from the facade to simplify future maintenance and extensions.
"""

from __future__ import annotations

from typing import Any, ClassVar, cast

from mutagen.easyid3 import EasyID3
from mutagen.flac import FLAC
from mutagen.monkeysaudio import MonkeysAudio
from mutagen.mp3 import MP3

from ._base_extractors import BaseAudioExtractor, BaseTagExtractor, TagSource

__all__ = [
    "Mp3Extractor",
    "FlacExtractor",
    "ApeExtractor",
]


class Mp3Extractor(BaseAudioExtractor):
    """Extractor for MP3 files using EasyID3 tags."""

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

    def _get_tag_value(self, tags: TagSource, key: str) -> str | None:
        return BaseTagExtractor.get_str_tag(tags, key)


class FlacExtractor(BaseAudioExtractor):
    """Extractor for FLAC files."""

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

    def _get_tag_value(self, tags: TagSource, key: str) -> str | None:
        return BaseTagExtractor.get_str_tag(tags, key)


class ApeExtractor(BaseAudioExtractor):
    """Extractor for Monkey's Audio (.ape) files using APEv2 tags."""

    FILE_CLASS: ClassVar[type | None] = MonkeysAudio
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}

    # APEv2 keys are case-insensitive
    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "Title",
        "artist": "Artist",
        "album": "Album",
        "genre": "Genre",
        "track": "Track",
        "date": "Year",
    }

    def _get_tag_value(self, tags: TagSource, key: str) -> str | None:
        value: object = cast(object, tags.get(key))
        if value is None:
            return None
        # Multi-value APE text items are NUL-separated
        return str(value).split("\0")[0] or None
