"""Tests for filesystem helpers."""

from pathlib import Path

import pytest

from musicorg.platform.filesystem import (
    copy_file,
    ensure_directory,
    ensure_parent_directory,
    sorted_files,
)


def test_ensure_directory_creates_nested(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "c"
    assert ensure_directory(target) == target
    assert target.is_dir()
    # second call is a no-op
    assert ensure_directory(target) == target


def test_ensure_directory_rejects_file(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    _ = blocker.write_text("x")
    with pytest.raises(NotADirectoryError):
        _ = ensure_directory(blocker)


def test_ensure_parent_directory(tmp_path: Path) -> None:
    target = tmp_path / "x" / "y.txt"
    assert ensure_parent_directory(target) == tmp_path / "x"
    assert (tmp_path / "x").is_dir()


def test_copy_file_overwrites_and_keeps_source(tmp_path: Path) -> None:
    """Copies create missing parents and replace existing targets."""
    source = tmp_path / "src.flac"
    _ = source.write_bytes(b"new")
    target = tmp_path / "out" / "dst.flac"
    target.parent.mkdir()
    _ = target.write_bytes(b"old")

    assert copy_file(source, target) == target
    assert target.read_bytes() == b"new"
    assert source.exists()


def test_sorted_files_filters_case_insensitively(tmp_path: Path) -> None:
    """Suffix matching ignores case and results come back sorted."""
    (tmp_path / "b").mkdir()
    for name in ("b/02.FLAC", "a.mp3", "notes.txt", "b/01.flac"):
        _ = (tmp_path / name).write_bytes(b"")
    (tmp_path / "dir.flac").mkdir()

    found = sorted_files(tmp_path, {".flac", ".mp3"})

    assert found == [tmp_path / "a.mp3", tmp_path / "b" / "01.flac", tmp_path / "b" / "02.FLAC"]
