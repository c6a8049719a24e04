"""src/musicorg/features/restructure/usecases/classical.py
Where: Restructure feature usecases layer.
What: Place a classical album as ``Artist/Work/N. Movement.flac`` files.
Why: Classical releases group movements by work rather than by disc.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import override

from musicorg.config.settings import CLASSICAL_OUTPUT_EXTENSION
from musicorg.platform.filesystem import copy_file
from musicorg.shared import (
    AlbumMetadata,
    InvalidMovementTitleError,
    TagWriteError,
    TrackError,
    TrackErrorKind,
    TrackMetadata,
)

from ..domain.naming import classical_album_dir, classical_track_name
from ..domain.results import AlbumResult, RestructureEvent
from ..domain.titles import parse_classical_title
from .event_log import log_event
from .splitting import split_merged_album
from .strategy import AlbumRestructurer, StrategyKind


class ClassicalRestructurer(AlbumRestructurer):
    """Retag every track as a movement of its work and copy it under the work directory.

    Merged albums are split next to their source container first; the
    resulting files are then handled like any split album. Tags are written
    to the file being copied, so the copy carries the movement metadata.
    """

    kind = StrategyKind.CLASSICAL

    @override
    def _place_tracks(self, album: AlbumMetadata, destination_root: Path, result: AlbumResult) -> None:
        tracks: tuple[TrackMetadata, ...] = album.tracks
        if album.is_merged:
            assert album.source_audio_path is not None
            outcome = split_merged_album(
                album,
                album.source_audio_path.parent,
                splitter=self.splitter,
                tag_writer=self.tag_writer,
            )
            result.track_errors.extend(outcome.errors)
            tracks = tuple(outcome.tracks)

        for track in tracks:
            target = self._place_movement(track, album, destination_root, result)
            if target is not None and target.parent not in result.destinations:
                result.destinations.append(target.parent)

    def _place_movement(
        self,
        track: TrackMetadata,
        album: AlbumMetadata,
        destination_root: Path,
        result: AlbumResult,
    ) -> Path | None:
        source = track.path
        if source is None:
            return None

        if not source.is_file():
            self._record(result, TrackError.file_missing(source), album.source_dir)
            return None

        artist = track.artist or album.artist
        if not track.title or not artist:
            self._record(
                result,
                TrackError(
                    TrackErrorKind.INCOMPLETE_TAGS,
                    f"Missing title or artist: {source}",
                    source,
                ),
                album.source_dir,
            )
            return None

        try:
            parsed = parse_classical_title(track.title)
        except InvalidMovementTitleError as exc:
            self._record(
                result,
                TrackError(TrackErrorKind.INVALID_MOVEMENT_TITLE, str(exc), source),
                album.source_dir,
            )
            return None

        movement = track.as_movement(
            work_title=parsed.work_title,
            movement_title=parsed.movement_title,
            movement_number=parsed.movement_number,
            artist=artist,
            genre=track.genre or album.genre,
        )

        try:
            self.tag_writer.write(movement)
        except TagWriteError as exc:
            self._record(
                result,
                TrackError(TrackErrorKind.TAG_WRITE, str(exc), source),
                album.source_dir,
            )
            return None

        target = classical_album_dir(destination_root, artist, parsed.work_title) / classical_track_name(
            parsed.movement_number,
            parsed.movement_title,
            CLASSICAL_OUTPUT_EXTENSION,
        )
        try:
            _ = copy_file(source, target)
        except OSError as exc:
            self._record(
                result,
                TrackError(TrackErrorKind.COPY, f"Failed to copy {source}: {exc}", source),
                album.source_dir,
            )
            return None

        log_event(
            logging.DEBUG,
            RestructureEvent.TRACK_COPY,
            "Copied %s to %s",
            source,
            target,
            source_path=source,
            source_base_path=album.source_dir,
            target_path=target,
        )
        return target


__all__ = ["ClassicalRestructurer"]
