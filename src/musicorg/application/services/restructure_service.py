"""Application service for restructuring a music library.

This layer builds the discoverer, the splitter, the tag writer and both
album strategies, then drives them album by album so the CLI only has to
turn a request into a report.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import final

from musicorg.config.settings import CLASSICAL_GENRE, SPLITTER_TIMEOUT
from musicorg.features.discovery import AlbumDiscoverer
from musicorg.features.metadata import TagWriter
from musicorg.features.restructure import (
    AlbumRestructurer,
    AlbumResult,
    ClassicalRestructurer,
    RegularRestructurer,
    RestructureEvent,
    RestructureOutcome,
    RestructureReport,
    SplitterPort,
    StrategyKind,
    TagWriterPort,
)
from musicorg.features.restructure.usecases import log_event
from musicorg.platform.splitter import ShnsplitRunner
from musicorg.shared import AlbumMetadata

RestructurerFactory = Callable[[SplitterPort, TagWriterPort], AlbumRestructurer]

DEFAULT_RESTRUCTURERS: Mapping[StrategyKind, RestructurerFactory] = {
    StrategyKind.REGULAR: RegularRestructurer,
    StrategyKind.CLASSICAL: ClassicalRestructurer,
}


@dataclass(frozen=True)
class RestructureRequest:
    """Input parameters for a restructuring run.

    Attributes:
        source_root: Directory scanned for albums.
        destination_root: Root of the new layout; defaults to the parent of ``source_root``.
        splitter_timeout: Seconds allowed per splitter run.
        classical_genre: Genre value that selects the classical strategy.
    """

    source_root: Path
    destination_root: Path | None = None
    splitter_timeout: float = SPLITTER_TIMEOUT
    classical_genre: str = CLASSICAL_GENRE

    def resolved_destination(self) -> Path:
        if self.destination_root is not None:
            return self.destination_root
        return self.source_root.resolve().parent


@final
class RestructureMusicService:
    """Application service that discovers albums and restructures each one.

    Every collaborator is built through an overridable factory so tests can
    replace the splitter and tag I/O without touching the filesystem tools.
    """

    def __init__(
        self,
        *,
        discoverer_factory: Callable[[], AlbumDiscoverer] | None = None,
        splitter_factory: Callable[[RestructureRequest], SplitterPort] | None = None,
        tag_writer_factory: Callable[[], TagWriterPort] | None = None,
        restructurer_factories: Mapping[StrategyKind, RestructurerFactory] | None = None,
    ) -> None:
        self._discoverer_factory: Callable[[], AlbumDiscoverer] = discoverer_factory or AlbumDiscoverer
        self._splitter_factory: Callable[[RestructureRequest], SplitterPort] = (
            splitter_factory or _default_splitter
        )
        self._tag_writer_factory: Callable[[], TagWriterPort] = tag_writer_factory or TagWriter
        self._restructurer_factories: Mapping[StrategyKind, RestructurerFactory] = (
            restructurer_factories or DEFAULT_RESTRUCTURERS
        )

    def build_restructurers(self, request: RestructureRequest) -> dict[StrategyKind, AlbumRestructurer]:
        """Instantiate one restructurer per strategy, sharing splitter and tag writer."""
        splitter = self._splitter_factory(request)
        tag_writer = self._tag_writer_factory()
        return {
            kind: factory(splitter, tag_writer)
            for kind, factory in self._restructurer_factories.items()
        }

    def run(self, request: RestructureRequest) -> RestructureReport:
        """Restructure every album found under ``request.source_root``.

        Args:
            request: Run parameters.

        Returns:
            A report whose outcome is ``path_not_found`` when the source root
            is missing (nothing is touched), ``albums_not_found`` when the
            tree holds no albums, and ``done`` otherwise.
        """
        source_root = request.source_root
        if not source_root.is_dir():
            log_event(
                logging.ERROR,
                RestructureEvent.RUN_PATH_NOT_FOUND,
                "Source path not found: %s",
                source_root,
                source_path=source_root,
            )
            return RestructureReport(outcome=RestructureOutcome.PATH_NOT_FOUND, source_root=source_root)

        destination_root = request.resolved_destination()
        log_event(
            logging.INFO,
            RestructureEvent.RUN_START,
            "Restructuring %s into %s",
            source_root,
            destination_root,
            source_path=source_root,
            target_path=destination_root,
        )

        discovery = self._discoverer_factory().discover(source_root)
        report = RestructureReport(
            outcome=RestructureOutcome.DONE,
            source_root=source_root,
            destination_root=destination_root,
            discovery_failures=list(discovery.failures),
        )

        if not discovery.albums:
            report.outcome = RestructureOutcome.ALBUMS_NOT_FOUND
            log_event(
                logging.INFO,
                RestructureEvent.RUN_NO_ALBUMS,
                "No albums found under %s",
                source_root,
                source_path=source_root,
            )
            return report

        restructurers = self.build_restructurers(request)
        total = len(discovery.albums)
        for sequence, album in enumerate(discovery.albums, start=1):
            kind = StrategyKind.for_album(album, request.classical_genre)
            result = self._restructure_album(restructurers[kind], album, destination_root, sequence, total)
            report.albums.append(result)

        failed = sum(1 for result in report.albums if not result.success)
        log_event(
            logging.INFO,
            RestructureEvent.RUN_COMPLETE,
            "Restructured %d album(s), %d with problems",
            total,
            failed,
            total_albums=total,
            error_count=failed,
        )
        return report

    @staticmethod
    def _restructure_album(
        restructurer: AlbumRestructurer,
        album: AlbumMetadata,
        destination_root: Path,
        sequence: int,
        total: int,
    ) -> AlbumResult:
        album_title = album.title or album.source_dir.name
        log_event(
            logging.INFO,
            RestructureEvent.ALBUM_START,
            "Album %d/%d: %s (%s)",
            sequence,
            total,
            album_title,
            restructurer.kind.value,
            sequence=sequence,
            total_albums=total,
            album_title=album_title,
            strategy=restructurer.kind.value,
            source_path=album.source_dir,
        )

        result = restructurer.restructure(album, destination_root)

        if result.error_message is not None:
            log_event(
                logging.ERROR,
                RestructureEvent.ALBUM_ERROR,
                "Album failed: %s: %s",
                album_title,
                result.error_message,
                sequence=sequence,
                total_albums=total,
                album_title=album_title,
                error_message=result.error_message,
                source_path=album.source_dir,
            )
        elif result.track_errors:
            log_event(
                logging.WARNING,
                RestructureEvent.ALBUM_PARTIAL,
                "Album finished with %d track error(s): %s",
                len(result.track_errors),
                album_title,
                sequence=sequence,
                total_albums=total,
                album_title=album_title,
                error_count=len(result.track_errors),
            )
        else:
            log_event(
                logging.INFO,
                RestructureEvent.ALBUM_COMPLETE,
                "Album done: %s",
                album_title,
                sequence=sequence,
                total_albums=total,
                album_title=album_title,
                target_base_path=destination_root,
                target_path=result.destinations[0] if result.destinations else None,
            )
        return result


def _default_splitter(request: RestructureRequest) -> SplitterPort:
    return ShnsplitRunner(timeout=request.splitter_timeout)


__all__ = ["DEFAULT_RESTRUCTURERS", "RestructureMusicService", "RestructureRequest"]
