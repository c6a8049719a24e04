"""Shared fixtures: album trees on disk and doubles for the splitter and tag writer."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from musicorg.features.metadata import CueSheetParser
from musicorg.platform.splitter import split_output_name
from musicorg.shared import (
    AlbumMetadata,
    SplitterError,
    TagWriteError,
    TrackMetadata,
)


class FakeSplitter:
    """Produce one file per cue track the way shnsplit names them."""

    def __init__(self, *, skip: set[int] | None = None, error: SplitterError | None = None) -> None:
        self.skip = skip or set()
        self.error = error
        self.calls: list[tuple[Path, Path, Path]] = []

    def split(self, source_audio: Path, cue_sheet: Path, destination_dir: Path) -> None:
        self.calls.append((source_audio, cue_sheet, destination_dir))
        if self.error is not None:
            raise self.error
        destination_dir.mkdir(parents=True, exist_ok=True)
        for track in CueSheetParser.parse_file(cue_sheet).tracks:
            if track.number in self.skip:
                continue
            _ = (destination_dir / split_output_name(track.number, track.title)).write_bytes(
                f"audio {track.number}".encode()
            )


class RecordingTagWriter:
    """Remember every write; fail for file names listed in ``fail_for``."""

    def __init__(self, fail_for: set[str] | None = None) -> None:
        self.fail_for = fail_for or set()
        self.written: list[TrackMetadata] = []

    def write(self, metadata: TrackMetadata) -> None:
        assert metadata.path is not None
        if metadata.path.name in self.fail_for:
            raise TagWriteError(metadata.path, "read-only")
        self.written.append(metadata)


@pytest.fixture
def tag_writer() -> RecordingTagWriter:
    return RecordingTagWriter()


@pytest.fixture
def splitter() -> FakeSplitter:
    return FakeSplitter()


@pytest.fixture
def make_merged_album(tmp_path: Path) -> Callable[..., AlbumMetadata]:
    """Write ``album.cue`` + ``album.flac`` (+ cover) and return the album."""

    def _make(
        titles: list[str],
        *,
        genre: str = "Rock",
        year: int | None = 1973,
        with_cover: bool = True,
    ) -> AlbumMetadata:
        source_dir = tmp_path / "library" / "incoming"
        source_dir.mkdir(parents=True, exist_ok=True)
        lines = [f'REM GENRE "{genre}"', 'PERFORMER "Y"', 'TITLE "X"', 'FILE "album.flac" WAVE']
        if year is not None:
            lines.insert(1, f"REM DATE {year}")
        for number, title in enumerate(titles, start=1):
            lines.extend([f"  TRACK {number:02d} AUDIO", f'    TITLE "{title}"', "    INDEX 01 00:00:00"])
        cue = source_dir / "album.cue"
        _ = cue.write_text("\n".join(lines), encoding="utf-8")
        audio = source_dir / "album.flac"
        _ = audio.write_bytes(b"merged")
        cover = None
        if with_cover:
            cover = source_dir / "cover.jpg"
            _ = cover.write_bytes(b"jpg")

        return AlbumMetadata(
            title="X",
            artist="Y",
            album_artist="Y",
            genre=genre,
            year=year,
            source_dir=source_dir,
            cue_sheet_path=cue,
            source_audio_path=audio,
            cover_path=cover,
            tracks=tuple(
                TrackMetadata(title=title, artist="Y", album="X", genre=genre, year=year, track_number=number)
                for number, title in enumerate(titles, start=1)
            ),
        )

    return _make


@pytest.fixture
def make_split_album(tmp_path: Path) -> Callable[..., AlbumMetadata]:
    """Write one file per track and return the split album."""

    def _make(
        tracks: list[tuple[str, TrackMetadata]],
        *,
        title: str | None = "X",
        artist: str | None = "Y",
        genre: str | None = "Rock",
        year: int | None = None,
        cover_name: str | None = None,
        create_files: bool = True,
    ) -> AlbumMetadata:
        source_dir = tmp_path / "library" / "loose"
        source_dir.mkdir(parents=True, exist_ok=True)
        placed: list[TrackMetadata] = []
        for file_name, metadata in tracks:
            path = source_dir / file_name
            if create_files:
                _ = path.write_bytes(file_name.encode())
            placed.append(metadata.with_path(path))
        cover = None
        if cover_name is not None:
            cover = source_dir / cover_name
            _ = cover.write_bytes(b"img")

        return AlbumMetadata(
            title=title,
            artist=artist,
            genre=genre,
            year=year,
            source_dir=source_dir,
            cover_path=cover,
            tracks=tuple(placed),
        )

    return _make


@pytest.fixture
def splitter_cls() -> type[FakeSplitter]:
    """The splitter double itself, for tests that need a configured instance."""
    return FakeSplitter


@pytest.fixture
def tag_writer_cls() -> type[RecordingTagWriter]:
    return RecordingTagWriter
