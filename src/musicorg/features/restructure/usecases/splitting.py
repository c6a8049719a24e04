"""src/musicorg/features/restructure/usecases/splitting.py
Where: Restructure feature usecases layer.
What: Split a merged album with the external splitter, then locate and tag each output.
Why: Both strategies need per-track files before they can place a merged album.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from musicorg.platform.splitter import split_output_name
from musicorg.shared import (
    AlbumMetadata,
    TagWriteError,
    TrackError,
    TrackErrorKind,
    TrackMetadata,
)

from ..domain.results import RestructureEvent
from .event_log import log_event
from .ports import SplitterPort, TagWriterPort


@dataclass
class SplitOutcome:
    """Tracks that were produced and tagged, and the ones that were not."""

    tracks: list[TrackMetadata] = field(default_factory=list)
    errors: list[TrackError] = field(default_factory=list)


def split_merged_album(
    album: AlbumMetadata,
    destination_dir: Path,
    *,
    splitter: SplitterPort,
    tag_writer: TagWriterPort,
) -> SplitOutcome:
    """Split ``album`` into ``destination_dir`` and tag every produced track.

    Expected file names are derived from the cue sheet's own numbers and
    titles. A track whose file did not appear is recorded as missing instead
    of being tagged.

    Raises:
        SplitterError: If the splitter process fails; nothing is tagged then.
    """
    if album.source_audio_path is None or album.cue_sheet_path is None:
        raise ValueError(f"Album is not merged: {album.source_dir}")

    log_event(
        logging.INFO,
        RestructureEvent.SPLIT_START,
        "Splitting %s into %s",
        album.source_audio_path,
        destination_dir,
        source_path=album.source_audio_path,
        target_path=destination_dir,
    )
    splitter.split(album.source_audio_path, album.cue_sheet_path, destination_dir)

    outcome = SplitOutcome()
    for track in album.tracks:
        expected = destination_dir / split_output_name(track.track_number or 0, track.title)
        if not expected.is_file():
            error = TrackError.file_missing(expected)
            outcome.errors.append(error)
            log_event(
                logging.WARNING,
                RestructureEvent.TRACK_ERROR,
                "Splitter output missing: %s",
                expected,
                source_path=expected,
                error_message="not produced by splitter",
            )
            continue

        placed = track.with_path(expected)
        try:
            tag_writer.write(placed)
        except TagWriteError as exc:
            outcome.errors.append(TrackError(TrackErrorKind.TAG_WRITE, str(exc), expected))
            log_event(
                logging.WARNING,
                RestructureEvent.TRACK_ERROR,
                "Failed to tag %s: %s",
                expected,
                exc,
                source_path=expected,
                error_message="tag write failed",
            )
            continue

        outcome.tracks.append(placed)

    return outcome


__all__ = ["SplitOutcome", "split_merged_album"]
