"""Tests for album discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from musicorg.features.discovery import AlbumDiscoverer
from musicorg.shared import PathNotFoundError, TagReadError, TrackErrorKind, TrackMetadata


class FakeTagReader:
    """Serve tags from a dict keyed by file name."""

    def __init__(self, tags: dict[str, TrackMetadata | Exception]) -> None:
        self.tags = tags
        self.calls: list[Path] = []

    def extract(self, file_path: Path) -> TrackMetadata:
        self.calls.append(file_path)
        entry = self.tags[file_path.name]
        if isinstance(entry, Exception):
            raise entry
        return entry.with_path(file_path)


def _touch(path: Path, content: bytes = b"") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_bytes(content)
    return path


def _write_cue(path: Path, audio_name: str | None, tracks: list[str]) -> Path:
    lines = ['REM GENRE "Rock"', "REM DATE 1973", 'PERFORMER "Y"', 'TITLE "X"']
    if audio_name is not None:
        lines.append(f'FILE "{audio_name}" WAVE')
    for number, title in enumerate(tracks, start=1):
        lines.extend([f"  TRACK {number:02d} AUDIO", f'    TITLE "{title}"', "    INDEX 01 00:00:00"])
    return _touch(path, "\n".join(lines).encode("utf-8"))


def test_missing_root_raises(tmp_path: Path) -> None:
    with pytest.raises(PathNotFoundError):
        _ = AlbumDiscoverer(tag_reader=FakeTagReader({})).discover(tmp_path / "nope")


def test_empty_tree_has_no_albums(tmp_path: Path) -> None:
    _ = _touch(tmp_path / "notes.txt")

    result = AlbumDiscoverer(tag_reader=FakeTagReader({})).discover(tmp_path)

    assert result.albums == []
    assert result.failures == []


def test_merged_album_from_cue(tmp_path: Path) -> None:
    """A valid cue sheet yields one merged album with path-less tracks."""
    album_dir = tmp_path / "in"
    cue = _write_cue(album_dir / "album.cue", "album.flac", ["t1", "t2", "t3"])
    audio = _touch(album_dir / "album.flac")
    cover = _touch(album_dir / "cover.jpg")
    reader = FakeTagReader({})

    result = AlbumDiscoverer(tag_reader=reader).discover(tmp_path)

    assert len(result.albums) == 1
    album = result.albums[0]
    assert album.is_merged
    assert album.title == "X"
    assert album.artist == "Y"
    assert album.album_artist == "Y"
    assert album.genre == "Rock"
    assert album.year == 1973
    assert album.cue_sheet_path == cue
    assert album.source_audio_path == audio
    assert album.cover_path == cover
    assert [track.title for track in album.tracks] == ["t1", "t2", "t3"]
    assert [track.track_number for track in album.tracks] == [1, 2, 3]
    assert all(track.artist == "Y" and track.path is None for track in album.tracks)
    # the container is not also read as a loose file
    assert reader.calls == []


def test_cue_without_file_or_with_missing_audio_is_skipped(tmp_path: Path) -> None:
    _ = _write_cue(tmp_path / "a" / "a.cue", None, ["t1"])
    _ = _write_cue(tmp_path / "b" / "b.cue", "gone.flac", ["t1"])

    result = AlbumDiscoverer(tag_reader=FakeTagReader({})).discover(tmp_path)

    assert result.albums == []
    assert result.failures == []


def test_audio_referenced_by_differently_named_cue_is_excluded(tmp_path: Path) -> None:
    _ = _write_cue(tmp_path / "disc" / "rip.cue", "CDImage.ape", ["t1"])
    _ = _touch(tmp_path / "disc" / "CDImage.ape")
    reader = FakeTagReader({})

    result = AlbumDiscoverer(tag_reader=reader).discover(tmp_path)

    assert len(result.albums) == 1
    assert reader.calls == []


def test_loose_files_group_by_album_title(tmp_path: Path) -> None:
    """Files sharing an album tag join one album regardless of location."""
    reader = FakeTagReader(
        {
            "b.mp3": TrackMetadata(title="Two", artist="Z", album="Same", genre="Pop", year=2001, track_number=2),
            "a.flac": TrackMetadata(title="One", artist="Z", album="Same", genre="Pop", year=2001, track_number=1),
            "c.flac": TrackMetadata(title="Solo", artist="W", album="Other", track_number=1),
        }
    )
    _ = _touch(tmp_path / "x" / "b.mp3")
    _ = _touch(tmp_path / "y" / "a.flac")
    _ = _touch(tmp_path / "y" / "c.flac")

    result = AlbumDiscoverer(tag_reader=reader).discover(tmp_path)

    by_title = {album.title: album for album in result.albums}
    assert set(by_title) == {"Same", "Other"}
    same = by_title["Same"]
    assert not same.is_merged
    assert same.artist == "Z"
    assert same.album_artist is None
    assert same.year == 2001
    assert sorted(track.title or "" for track in same.tracks) == ["One", "Two"]
    assert all(track.path is not None for track in same.tracks)


def test_album_titles_are_case_sensitive(tmp_path: Path) -> None:
    reader = FakeTagReader(
        {
            "a.flac": TrackMetadata(title="One", album="Moon", track_number=1),
            "b.flac": TrackMetadata(title="Two", album="moon", track_number=2),
        }
    )
    _ = _touch(tmp_path / "a.flac")
    _ = _touch(tmp_path / "b.flac")

    result = AlbumDiscoverer(tag_reader=reader).discover(tmp_path)

    assert len(result.albums) == 2


def test_file_with_sibling_cue_is_skipped(tmp_path: Path) -> None:
    """A loose file whose stem matches a cue sheet is never read for tags."""
    _ = _touch(tmp_path / "album.flac")
    _ = _touch(tmp_path / "album.cue", b'TITLE "No file line"\n')
    reader = FakeTagReader({})

    result = AlbumDiscoverer(tag_reader=reader).discover(tmp_path)

    assert result.albums == []
    assert reader.calls == []


def test_unreadable_and_untagged_files_are_recorded(tmp_path: Path) -> None:
    reader = FakeTagReader(
        {
            "bad.flac": TagReadError(tmp_path / "bad.flac", "not a FLAC file"),
            "bare.mp3": TrackMetadata(title="Untitled"),
            "ok.flac": TrackMetadata(title="Fine", album="Good", track_number=1),
        }
    )
    for name in ("bad.flac", "bare.mp3", "ok.flac"):
        _ = _touch(tmp_path / name)

    result = AlbumDiscoverer(tag_reader=reader).discover(tmp_path)

    assert [album.title for album in result.albums] == ["Good"]
    kinds = {failure.path.name: failure.kind for failure in result.failures if failure.path}
    assert kinds == {"bad.flac": TrackErrorKind.TAG_READ, "bare.mp3": TrackErrorKind.INCOMPLETE_TAGS}


def test_merged_albums_come_first(tmp_path: Path) -> None:
    reader = FakeTagReader({"a.flac": TrackMetadata(title="One", album="Loose", track_number=1)})
    _ = _touch(tmp_path / "a" / "a.flac")
    _ = _write_cue(tmp_path / "z" / "z.cue", "z.flac", ["t1"])
    _ = _touch(tmp_path / "z" / "z.flac")

    result = AlbumDiscoverer(tag_reader=reader).discover(tmp_path)

    assert [album.is_merged for album in result.albums] == [True, False]
