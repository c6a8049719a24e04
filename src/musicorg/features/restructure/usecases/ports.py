"""Summary: Ports defining restructuring side effects.
Why: Strategies tag files and run the splitter through these, so tests can stub both."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from musicorg.shared import TrackMetadata


@runtime_checkable
class TagWriterPort(Protocol):
    """Port for writing tags back to a track's file."""

    def write(self, metadata: TrackMetadata) -> None:
        """Write ``metadata`` into ``metadata.path``; raise ``TagWriteError`` on failure."""
        ...


@runtime_checkable
class SplitterPort(Protocol):
    """Port for the external process that cuts a merged album into tracks."""

    def split(self, source_audio: Path, cue_sheet: Path, destination_dir: Path) -> None:
        """Produce one flac per cue track in ``destination_dir``; raise ``SplitterError`` on failure."""
        ...


__all__ = ["SplitterPort", "TagWriterPort"]
