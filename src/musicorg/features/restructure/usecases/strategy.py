"""src/musicorg/features/restructure/usecases/strategy.py
Where: Restructure feature usecases layer.
What: Strategy kinds and the base class both album restructurers share.
Why: An album's strategy is chosen once from its genre, then one class handles it end to end.
"""

from __future__ import annotations

import abc
import logging
from enum import StrEnum
from pathlib import Path
from typing import ClassVar

from musicorg.config.settings import CLASSICAL_GENRE
from musicorg.features.discovery import copy_cover
from musicorg.features.metadata import TagWriter
from musicorg.platform.splitter import ShnsplitRunner
from musicorg.shared import AlbumMetadata, RestructureError, TrackError

from ..domain.results import AlbumResult, RestructureEvent
from .event_log import log_event
from .ports import SplitterPort, TagWriterPort


class StrategyKind(StrEnum):
    """The two ways an album can be restructured."""

    REGULAR = "regular"
    CLASSICAL = "classical"

    @classmethod
    def for_album(cls, album: AlbumMetadata, classical_genre: str = CLASSICAL_GENRE) -> "StrategyKind":
        """Classical when the album genre matches ``classical_genre`` exactly."""
        return cls.CLASSICAL if album.genre == classical_genre else cls.REGULAR


class AlbumRestructurer(abc.ABC):
    """Base class for strategies that place one album under a destination root."""

    kind: ClassVar[StrategyKind]

    splitter: SplitterPort
    tag_writer: TagWriterPort

    def __init__(
        self,
        splitter: SplitterPort | None = None,
        tag_writer: TagWriterPort | None = None,
    ) -> None:
        self.splitter = splitter or ShnsplitRunner()
        self.tag_writer = tag_writer or TagWriter()

    def restructure(self, album: AlbumMetadata, destination_root: Path) -> AlbumResult:
        """Place ``album`` under ``destination_root``.

        Per-track problems are collected on the result. Album-level failures
        (splitter, directory creation, cover copy) stop this album only and
        are reported through ``AlbumResult.error_message``.
        """
        result = AlbumResult(album=album, strategy=self.kind.value)
        try:
            self._place_tracks(album, destination_root, result)
            for album_dir in result.destinations:
                self._copy_cover(album, album_dir)
        except (RestructureError, OSError) as exc:
            result.error_message = str(exc) or type(exc).__name__
        return result

    @abc.abstractmethod
    def _place_tracks(self, album: AlbumMetadata, destination_root: Path, result: AlbumResult) -> None:
        """Put every track of ``album`` in place, recording destinations and track errors."""
        raise NotImplementedError

    def _copy_cover(self, album: AlbumMetadata, album_dir: Path) -> None:
        target = copy_cover(album.cover_path, album_dir)
        if target is not None:
            log_event(
                logging.DEBUG,
                RestructureEvent.COVER_COPY,
                "Copied cover %s to %s",
                album.cover_path,
                target,
                source_path=album.cover_path,
                source_base_path=album.source_dir,
                target_path=target,
            )

    @staticmethod
    def _record(result: AlbumResult, error: TrackError, base_path: Path | None = None) -> None:
        result.track_errors.append(error)
        log_event(
            logging.WARNING,
            RestructureEvent.TRACK_ERROR,
            "Track skipped: %s",
            error.message,
            source_path=error.path,
            source_base_path=base_path,
            error_message=error.kind.value,
        )


__all__ = ["AlbumRestructurer", "StrategyKind"]
