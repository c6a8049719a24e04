"""src/musicorg/features/restructure/usecases/regular.py
Where: Restructure feature usecases layer.
What: Place a non-classical album under ``Artist/Title (Year)``.
Why: Regular albums keep their own track numbering and titles.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import override

from musicorg.platform.filesystem import copy_file, ensure_directory
from musicorg.shared import (
    AlbumMetadata,
    RestructureError,
    TrackError,
    TrackErrorKind,
    TrackMetadata,
)

from ..domain.naming import regular_album_dir, regular_track_name
from ..domain.results import AlbumResult, RestructureEvent
from .event_log import log_event
from .splitting import split_merged_album
from .strategy import AlbumRestructurer, StrategyKind


class RegularRestructurer(AlbumRestructurer):
    """Copy split albums track by track; split merged albums straight into place."""

    kind = StrategyKind.REGULAR

    @override
    def _place_tracks(self, album: AlbumMetadata, destination_root: Path, result: AlbumResult) -> None:
        if not album.artist or not album.title:
            raise RestructureError(f"Album is missing an artist or title tag: {album.source_dir}")

        album_dir = ensure_directory(regular_album_dir(destination_root, album))
        result.destinations.append(album_dir)

        if album.is_merged:
            outcome = split_merged_album(
                album,
                album_dir,
                splitter=self.splitter,
                tag_writer=self.tag_writer,
            )
            result.track_errors.extend(outcome.errors)
            return

        for track in album.tracks:
            self._copy_track(track, album, album_dir, result)

    def _copy_track(
        self,
        track: TrackMetadata,
        album: AlbumMetadata,
        album_dir: Path,
        result: AlbumResult,
    ) -> None:
        source = track.path
        assert source is not None

        if not source.is_file():
            self._record(result, TrackError.file_missing(source), album.source_dir)
            return

        if track.track_number is None or not track.title:
            self._record(
                result,
                TrackError(
                    TrackErrorKind.INCOMPLETE_TAGS,
                    f"Missing track number or title: {source}",
                    source,
                ),
                album.source_dir,
            )
            return

        target = album_dir / regular_track_name(track.track_number, track.title, source.suffix)
        try:
            _ = copy_file(source, target)
        except OSError as exc:
            self._record(
                result,
                TrackError(TrackErrorKind.COPY, f"Failed to copy {source}: {exc}", source),
                album.source_dir,
            )
            return

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


__all__ = ["RegularRestructurer"]
