"""Tag reading for supported audio formats."""

from .track_metadata_extractor import (
    ApeExtractor,
    FlacExtractor,
    MetadataExtractor,
    Mp3Extractor,
)

__all__ = ["ApeExtractor", "FlacExtractor", "MetadataExtractor", "Mp3Extractor"]
