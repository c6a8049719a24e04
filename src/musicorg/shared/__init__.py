# Where: musicorg.shared.__init__
# What: Provide a concise import surface for shared dataclasses and errors.
# Why: Encourage consistent reuse of shared value objects across features.

"""Shared cross-cutting value objects exposed at the package level."""

from .errors import (
    InvalidMovementTitleError,
    PathNotFoundError,
    RestructureError,
    SplitterError,
    TagReadError,
    TagWriteError,
    TrackError,
    TrackErrorKind,
)
from .track_metadata import AlbumMetadata, TrackMetadata

__all__ = [
    "AlbumMetadata",
    "InvalidMovementTitleError",
    "PathNotFoundError",
    "RestructureError",
    "SplitterError",
    "TagReadError",
    "TagWriteError",
    "TrackError",
    "TrackErrorKind",
    "TrackMetadata",
]
