"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class RestructureArgs:
    """Command line arguments for the ``restructure`` subcommand."""

    command: Literal["restructure"]
    source_root: Path
    target_root: Path | None
    splitter_timeout: float
    verbose: bool
    quiet: bool


CLIArgs = RestructureArgs

__all__ = ["CLIArgs", "RestructureArgs"]
