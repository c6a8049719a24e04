"""src/musicorg/features/discovery/usecases/album_discoverer.py
Where: Discovery feature usecases layer.
What: Scan a source tree and group its files into candidate albums.
Why: Restructuring works album by album; this is where albums come from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from musicorg.config.settings import AUDIO_EXTENSIONS, CUE_EXTENSION
from musicorg.features.metadata import CueSheetParser, MetadataExtractor
from musicorg.platform.filesystem import sorted_files
from musicorg.platform.logging import logger
from musicorg.shared import (
    AlbumMetadata,
    PathNotFoundError,
    TagReadError,
    TrackError,
    TrackErrorKind,
    TrackMetadata,
)

from .cover_art import find_cover
from .ports import CueSheetParserPort, TagReaderPort


@dataclass
class DiscoveryResult:
    """Albums found under a source root plus files that could not be grouped."""

    albums: list[AlbumMetadata] = field(default_factory=list)
    failures: list[TrackError] = field(default_factory=list)


class AlbumDiscoverer:
    """Find merged (cue + container) and split (file per track) albums."""

    tag_reader: TagReaderPort
    cue_parser: CueSheetParserPort

    def __init__(
        self,
        tag_reader: TagReaderPort | None = None,
        cue_parser: CueSheetParserPort | None = None,
    ) -> None:
        self.tag_reader = tag_reader or MetadataExtractor
        self.cue_parser = cue_parser or CueSheetParser

    def discover(self, source_root: Path) -> DiscoveryResult:
        """Return merged albums followed by split albums found under ``source_root``.

        Raises:
            PathNotFoundError: If ``source_root`` is not an existing directory.
        """
        if not source_root.is_dir():
            raise PathNotFoundError(source_root)

        result = DiscoveryResult()
        merged = self._collect_merged_albums(source_root)
        covered = {album.source_audio_path for album in merged}
        split = self._collect_split_albums(source_root, covered, result.failures)
        result.albums = [*merged, *split]

        logger.info(
            "Discovered %d album(s) under %s [merged=%d, split=%d, unreadable=%d]",
            len(result.albums),
            source_root,
            len(merged),
            len(split),
            len(result.failures),
        )
        return result

    def _collect_merged_albums(self, source_root: Path) -> list[AlbumMetadata]:
        albums: list[AlbumMetadata] = []

        for cue_path in sorted_files(source_root, {CUE_EXTENSION}):
            try:
                sheet = self.cue_parser.parse_file(cue_path)
            except OSError as exc:
                logger.warning("Skipping unreadable cue sheet %s: %s", cue_path, exc)
                continue

            if not sheet.file:
                logger.debug("Cue sheet references no audio file: %s", cue_path)
                continue

            album_dir = cue_path.parent
            audio_path = album_dir / sheet.file
            if not audio_path.is_file():
                logger.debug("Cue sheet audio file missing: %s", audio_path)
                continue

            if not sheet.tracks:
                logger.debug("Cue sheet has no tracks: %s", cue_path)
                continue

            tracks = tuple(
                TrackMetadata(
                    title=cue_track.title,
                    artist=cue_track.performer or sheet.performer,
                    album=sheet.title,
                    genre=sheet.genre,
                    year=sheet.year,
                    track_number=cue_track.number,
                )
                for cue_track in sheet.tracks
            )

            albums.append(
                AlbumMetadata(
                    title=sheet.title,
                    artist=sheet.performer,
                    album_artist=sheet.performer,
                    genre=sheet.genre,
                    year=sheet.year,
                    source_dir=album_dir,
                    cue_sheet_path=cue_path,
                    source_audio_path=audio_path,
                    cover_path=find_cover(album_dir),
                    tracks=tracks,
                )
            )
            logger.debug("Merged album %r from %s", sheet.title, cue_path)

        return albums

    def _collect_split_albums(
        self,
        source_root: Path,
        covered: set[Path | None],
        failures: list[TrackError],
    ) -> list[AlbumMetadata]:
        grouped: dict[str, list[TrackMetadata]] = {}

        for file_path in sorted_files(source_root, AUDIO_EXTENSIONS):
            if file_path in covered or file_path.with_suffix(CUE_EXTENSION).exists():
                continue

            try:
                track = self.tag_reader.extract(file_path)
            except (TagReadError, OSError) as exc:
                failures.append(TrackError(TrackErrorKind.TAG_READ, str(exc), file_path))
                logger.warning(
                    "Skipping %s: %s",
                    file_path,
                    exc,
                    extra={
                        "processing_event": "restructure.track.error",
                        "source_path": file_path,
                        "source_base_path": source_root,
                        "error_message": "tags unreadable",
                    },
                )
                continue

            if track.path is None:
                track = track.with_path(file_path)

            if not track.album:
                failures.append(
                    TrackError(TrackErrorKind.INCOMPLETE_TAGS, f"Missing album tag: {file_path}", file_path)
                )
                logger.warning("Skipping %s: no album tag", file_path)
                continue

            grouped.setdefault(track.album, []).append(track)

        albums: list[AlbumMetadata] = []
        for title, tracks in grouped.items():
            first = tracks[0]
            assert first.path is not None
            album_dir = first.path.parent
            albums.append(
                AlbumMetadata(
                    title=title,
                    artist=first.artist,
                    genre=first.genre,
                    year=first.year,
                    source_dir=album_dir,
                    cover_path=find_cover(album_dir),
                    tracks=tuple(tracks),
                )
            )
            logger.debug("Split album %r with %d track(s)", title, len(tracks))

        return albums


__all__ = ["AlbumDiscoverer", "DiscoveryResult"]
