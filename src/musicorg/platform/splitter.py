"""External splitter process.

Where: platform/splitter.py
What: Run ``shnsplit`` to cut a merged album into one flac file per cue track.
Why: Keep process invocation, timeouts and exit-status handling in one place.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, final

from musicorg.config.settings import SPLITTER_COMMAND, SPLITTER_TIMEOUT
from musicorg.platform.filesystem import ensure_directory
from musicorg.platform.logging import logger
from musicorg.shared import SplitterError


def split_output_name(number: int, title: str | None) -> str:
    """File name the splitter produces for a track under ``NAME_TEMPLATE``."""
    return f"{number:02d}. {title or ''}.flac"


@final
@dataclass(frozen=True, slots=True)
class ShnsplitRunner:
    """Invoke shnsplit with a structured argument list."""

    # %n is the zero-padded track number, %t the cue track title
    NAME_TEMPLATE: ClassVar[str] = "%n. %t"
    OUTPUT_FORMAT: ClassVar[str] = "flac"

    command: str = SPLITTER_COMMAND
    timeout: float | None = SPLITTER_TIMEOUT

    def build_args(self, source_audio: Path, cue_sheet: Path, destination_dir: Path) -> list[str]:
        """Return the argument vector for one split."""
        return [
            self.command,
            "-f",
            str(cue_sheet),
            "-t",
            self.NAME_TEMPLATE,
            "-o",
            self.OUTPUT_FORMAT,
            "-O",
            "always",
            "-d",
            str(destination_dir),
            str(source_audio),
        ]

    def split(self, source_audio: Path, cue_sheet: Path, destination_dir: Path) -> None:
        """Split ``source_audio`` along ``cue_sheet`` into ``destination_dir``.

        Raises:
            SplitterError: If the executable is missing, times out or exits non-zero.
        """
        _ = ensure_directory(destination_dir)
        args = self.build_args(source_audio, cue_sheet, destination_dir)
        logger.debug("Running splitter: %s", args)

        try:
            proc = subprocess.run(
                args,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as exc:
            raise SplitterError(f"Splitter executable not found: {self.command}") from exc
        except subprocess.TimeoutExpired as exc:
            raise SplitterError(
                f"Splitter timed out after {self.timeout}s splitting {source_audio}"
            ) from exc

        if proc.returncode != 0:
            logger.debug("Splitter stdout: %s", proc.stdout)
            raise SplitterError(
                f"{self.command} failed with code {proc.returncode}: {proc.stderr.strip()}"
            )


__all__ = ["ShnsplitRunner", "split_output_name"]
