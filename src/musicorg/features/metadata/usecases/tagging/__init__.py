"""Tag writing for supported audio formats."""

from .tag_writer import ApeTagWriter, FlacTagWriter, Mp3TagWriter, TagWriter

__all__ = ["ApeTagWriter", "FlacTagWriter", "Mp3TagWriter", "TagWriter"]
