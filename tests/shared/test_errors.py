"""Tests for error values."""

from pathlib import Path

from musicorg.shared import (
    InvalidMovementTitleError,
    PathNotFoundError,
    RestructureError,
    SplitterError,
    TrackError,
    TrackErrorKind,
)


def test_file_missing_message() -> None:
    error = TrackError.file_missing(Path("/a/b.flac"))

    assert error.kind is TrackErrorKind.FILE_MISSING
    assert str(error) == "File not found: /a/b.flac"
    assert error.path == Path("/a/b.flac")


def test_hierarchy() -> None:
    for exc in (PathNotFoundError(Path("/x")), InvalidMovementTitleError("Allegro"), SplitterError("boom")):
        assert isinstance(exc, RestructureError)


def test_invalid_movement_title_keeps_title() -> None:
    exc = InvalidMovementTitleError("Allegro")
    assert exc.title == "Allegro"
    assert "'Allegro'" in str(exc)
