"""Exception hierarchy and per-track error values.

Exceptions signal failures at the point they happen; ``TrackError`` values
are what survives of them once a restructuring pass has decided to skip the
track and carry on.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path


class RestructureError(Exception):
    """Base class for errors raised while restructuring a library."""


class PathNotFoundError(RestructureError):
    """Raised when the source root does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Path not found: {path}")
        self.path: Path = path


class InvalidMovementTitleError(RestructureError):
    """Raised when a movement title does not start with a supported Roman numeral."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Movement title does not begin with a Roman numeral (I-X): {title!r}")
        self.title: str = title


class TagReadError(RestructureError):
    """Raised when tags cannot be read from an audio file."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to read tags from {path}: {reason}")
        self.path: Path = path


class TagWriteError(RestructureError):
    """Raised when tags cannot be written to an audio file."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to write tags to {path}: {reason}")
        self.path: Path = path


class SplitterError(RestructureError):
    """Raised when the external splitter fails, times out or is missing."""


class TrackErrorKind(StrEnum):
    """Categories of per-track failures."""

    FILE_MISSING = "file_missing"
    INVALID_MOVEMENT_TITLE = "invalid_movement_title"
    INCOMPLETE_TAGS = "incomplete_tags"
    TAG_READ = "tag_read"
    TAG_WRITE = "tag_write"
    COPY = "copy"


@dataclass(frozen=True, slots=True)
class TrackError:
    """A recorded failure for one track that did not stop its album."""

    kind: TrackErrorKind
    message: str
    path: Path | None = None

    @classmethod
    def file_missing(cls, path: Path) -> TrackError:
        return cls(TrackErrorKind.FILE_MISSING, f"File not found: {path}", path)

    def __str__(self) -> str:
        return self.message


__all__ = [
    "InvalidMovementTitleError",
    "PathNotFoundError",
    "RestructureError",
    "SplitterError",
    "TagReadError",
    "TagWriteError",
    "TrackError",
    "TrackErrorKind",
]
