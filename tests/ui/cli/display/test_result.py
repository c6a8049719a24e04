"""Tests for the restructure result display."""

from io import StringIO
from pathlib import Path

from rich.console import Console

from musicorg.features.restructure import AlbumResult, RestructureOutcome, RestructureReport
from musicorg.shared import AlbumMetadata, TrackError, TrackErrorKind, TrackMetadata
from musicorg.ui.cli.display import RestructureResultDisplay


def _display() -> tuple[RestructureResultDisplay, StringIO]:
    buffer = StringIO()
    return RestructureResultDisplay(Console(file=buffer, width=200)), buffer


def _album(title: str) -> AlbumMetadata:
    return AlbumMetadata(
        title=title,
        artist="Y",
        source_dir=Path("/in") / title,
        tracks=(TrackMetadata(title="t1", track_number=1, path=Path("/in") / title / "1.flac"),),
    )


def _report() -> RestructureReport:
    ok = AlbumResult(album=_album("Good"), strategy="regular")
    partial = AlbumResult(album=_album("Partial"), strategy="classical")
    partial.track_errors.append(
        TrackError(TrackErrorKind.INVALID_MOVEMENT_TITLE, "Movement title does not begin with a Roman numeral")
    )
    failed = AlbumResult(album=_album("Broken"), strategy="regular", error_message="shnsplit failed")
    return RestructureReport(
        outcome=RestructureOutcome.DONE,
        source_root=Path("/in"),
        destination_root=Path("/"),
        albums=[ok, partial, failed],
    )


def test_shows_albums_errors_and_summary() -> None:
    display, buffer = _display()

    display.show_report(_report())

    output = buffer.getvalue()
    assert "✓ Good (regular)" in output
    assert "! Partial (classical): 1 track error(s)" in output
    assert "Movement title does not begin with a Roman numeral" in output
    assert "✗ Broken (regular): shnsplit failed" in output
    assert "Total albums: 3" in output
    assert "Successful: 1" in output
    assert "With errors: 2" in output


def test_quiet_hides_album_lines_but_keeps_summary_on_failure() -> None:
    display, buffer = _display()

    display.show_report(_report(), quiet=True)

    output = buffer.getvalue()
    assert "Good" not in output
    assert "With errors: 2" in output


def test_quiet_clean_run_prints_nothing() -> None:
    display, buffer = _display()
    report = RestructureReport(
        outcome=RestructureOutcome.DONE,
        source_root=Path("/in"),
        destination_root=Path("/"),
        albums=[AlbumResult(album=_album("Good"), strategy="regular")],
    )

    display.show_report(report, quiet=True)

    assert buffer.getvalue() == ""


def test_path_not_found_and_no_albums_messages() -> None:
    display, buffer = _display()

    display.show_report(RestructureReport(outcome=RestructureOutcome.PATH_NOT_FOUND, source_root=Path("/nope")))
    display.show_report(
        RestructureReport(outcome=RestructureOutcome.ALBUMS_NOT_FOUND, source_root=Path("/empty"))
    )

    output = buffer.getvalue()
    assert "Path not found: /nope" in output
    assert "No albums found under /empty" in output
