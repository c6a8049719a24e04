"""Metadata feature public API."""

from .usecases import CueSheet, CueSheetParser, CueTrack, MetadataExtractor, TagWriter

__all__ = ["CueSheet", "CueSheetParser", "CueTrack", "MetadataExtractor", "TagWriter"]
