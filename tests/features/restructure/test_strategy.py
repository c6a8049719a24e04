"""Tests for strategy selection."""

from pathlib import Path

import pytest

from musicorg.features.restructure import StrategyKind
from musicorg.shared import AlbumMetadata, TrackMetadata


def _album(genre: str | None) -> AlbumMetadata:
    return AlbumMetadata(
        title="X",
        artist="Y",
        genre=genre,
        source_dir=Path("/in"),
        tracks=(TrackMetadata(title="t", track_number=1, path=Path("/in/t.flac")),),
    )


@pytest.mark.parametrize(
    ("genre", "expected"),
    [
        ("Classical", StrategyKind.CLASSICAL),
        ("classical", StrategyKind.REGULAR),
        ("Rock", StrategyKind.REGULAR),
        (None, StrategyKind.REGULAR),
    ],
)
def test_genre_selects_strategy(genre: str | None, expected: StrategyKind) -> None:
    """Only an exact genre match routes to the classical layout."""
    assert StrategyKind.for_album(_album(genre)) is expected


def test_custom_classical_genre() -> None:
    assert StrategyKind.for_album(_album("Klassik"), "Klassik") is StrategyKind.CLASSICAL
