"""src/musicorg/features/restructure/domain/results.py
Where: Restructure feature domain layer.
What: Shared enums and dataclasses describing restructuring outcomes.
Why: Keep strategies and the orchestrator lean by centralising type definitions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from musicorg.shared import AlbumMetadata, TrackError


class RestructureEvent(StrEnum):
    """Structured event identifiers for restructuring logs."""

    RUN_START = "restructure.run.start"
    RUN_COMPLETE = "restructure.run.complete"
    RUN_NO_ALBUMS = "restructure.run.no_albums"
    RUN_PATH_NOT_FOUND = "restructure.run.path_not_found"
    ALBUM_START = "restructure.album.start"
    ALBUM_COMPLETE = "restructure.album.complete"
    ALBUM_PARTIAL = "restructure.album.partial"
    ALBUM_ERROR = "restructure.album.error"
    SPLIT_START = "restructure.split.start"
    TRACK_COPY = "restructure.track.copy"
    TRACK_ERROR = "restructure.track.error"
    COVER_COPY = "restructure.cover.copy"


class RestructureOutcome(StrEnum):
    """Overall result of a restructuring run."""

    DONE = "done"
    PATH_NOT_FOUND = "path_not_found"
    ALBUMS_NOT_FOUND = "albums_not_found"


@dataclass
class AlbumResult:
    """Outcome of restructuring one album.

    ``error_message`` is set when the album failed as a whole (splitter
    failure, directory or cover copy error); ``track_errors`` lists tracks
    that were skipped while the rest of the album went through.
    """

    album: AlbumMetadata
    strategy: str
    destinations: list[Path] = field(default_factory=list)
    track_errors: list[TrackError] = field(default_factory=list)
    error_message: str | None = None

    @property
    def success(self) -> bool:
        return self.error_message is None and not self.track_errors


@dataclass
class RestructureReport:
    """Outcome of a whole run plus per-album results."""

    outcome: RestructureOutcome
    source_root: Path
    destination_root: Path | None = None
    albums: list[AlbumResult] = field(default_factory=list)
    discovery_failures: list[TrackError] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        if self.outcome is RestructureOutcome.PATH_NOT_FOUND:
            return True
        return bool(self.discovery_failures) or any(not result.success for result in self.albums)


__all__ = ["AlbumResult", "RestructureEvent", "RestructureOutcome", "RestructureReport"]
