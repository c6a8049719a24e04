"""Metadata use cases: tag reading, tag writing and cue-sheet parsing."""

from .cue_sheet import CueSheet, CueSheetParser, CueTrack
from .extraction import MetadataExtractor
from .tagging import TagWriter

__all__ = ["CueSheet", "CueSheetParser", "CueTrack", "MetadataExtractor", "TagWriter"]
