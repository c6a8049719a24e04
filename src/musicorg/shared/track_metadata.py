# Where: musicorg.shared.track_metadata
# What: TrackMetadata and AlbumMetadata value objects shared across features.
# Why: One immutable representation flows from discovery through restructuring.

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path


@dataclass(frozen=True, slots=True)
class TrackMetadata:
    """Metadata for a music track."""

    title: str | None = None
    artist: str | None = None
    album: str | None = None
    genre: str | None = None
    year: int | None = None
    track_number: int | None = None
    path: Path | None = None

    def with_path(self, path: Path) -> TrackMetadata:
        """Return a copy pointing at ``path``."""
        return replace(self, path=path)

    def as_movement(
        self,
        *,
        work_title: str,
        movement_title: str,
        movement_number: int,
        artist: str | None,
        genre: str | None,
    ) -> TrackMetadata:
        """Return a copy retitled as one movement of a classical work."""
        return replace(
            self,
            title=movement_title,
            artist=artist,
            album=work_title,
            track_number=movement_number,
            genre=genre,
        )


@dataclass(frozen=True, slots=True)
class AlbumMetadata:
    """A candidate album discovered in the source tree.

    An album is either merged (one audio container described by a cue sheet)
    or split (one file per track); ``cue_sheet_path`` and
    ``source_audio_path`` are set together or not at all.
    """

    title: str | None
    artist: str | None
    source_dir: Path
    tracks: tuple[TrackMetadata, ...] = field(default_factory=tuple)
    album_artist: str | None = None
    year: int | None = None
    genre: str | None = None
    cue_sheet_path: Path | None = None
    source_audio_path: Path | None = None
    cover_path: Path | None = None

    def __post_init__(self) -> None:
        if not self.tracks:
            raise ValueError(f"Album without tracks: {self.source_dir}")
        if (self.cue_sheet_path is None) != (self.source_audio_path is None):
            raise ValueError(
                f"Album must be merged or split, not both: {self.source_dir}"
            )
        if self.cue_sheet_path is None and any(track.path is None for track in self.tracks):
            raise ValueError(f"Split album track without a file: {self.source_dir}")

    @property
    def is_merged(self) -> bool:
        """True when the album is a single container plus cue sheet."""
        return self.cue_sheet_path is not None

    @property
    def dir_name(self) -> str:
        """Destination directory name, ``Title (Year)`` or ``Title``."""
        title = self.title or ""
        return f"{title} ({self.year})" if self.year is not None else title


__all__ = ["AlbumMetadata", "TrackMetadata"]
