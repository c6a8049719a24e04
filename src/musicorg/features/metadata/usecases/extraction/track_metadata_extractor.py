"""Audio file metadata extraction functionality.

Where: src/musicorg/features/metadata/usecases/extraction/track_metadata_extractor.py
What: Provide the MetadataExtractor facade routing to format extractors.
Why: Offer a slim entry point the discoverer can call (and tests can patch).
"""

from pathlib import Path
from typing import ClassVar

from musicorg.shared import TagReadError, TrackMetadata

from ._base_extractors import AudioFormatExtractor
from .format_extractors import ApeExtractor, FlacExtractor, Mp3Extractor

__all__ = [
    "MetadataExtractor",
    "Mp3Extractor",
    "FlacExtractor",
    "ApeExtractor",
]


class MetadataExtractor:
    """Facade class for extracting metadata from audio files.

    This class selects the appropriate extractor based on file extension.
    """

    SUPPORTED_FORMATS: ClassVar[set[str]] = {".flac", ".mp3", ".ape"}

    # Mapping from file extension to corresponding extractor instance.
    _format_map: ClassVar[dict[str, AudioFormatExtractor]] = {
        ".mp3": Mp3Extractor(),
        ".flac": FlacExtractor(),
        ".ape": ApeExtractor(),
    }

    @classmethod
    def extract(cls, file_path: Path) -> TrackMetadata:
        """Extract metadata from an audio file.

        Args:
            file_path: Path to the audio file.

        Returns:
            TrackMetadata: Extracted metadata, ``path`` set to ``file_path``.

        Raises:
            TagReadError: If the format is unsupported or the tags cannot be read.
            FileNotFoundError: If the file does not exist.
        """
        ext: str = file_path.suffix.lower()
        extractor = cls._format_map.get(ext)
        if extractor is None:
            raise TagReadError(file_path, f"Unsupported file format: {ext}")

        return extractor.extract_metadata(file_path)
