"""Display management for CLI interface."""

from musicorg.ui.cli.display.result import RestructureResultDisplay

__all__ = ["RestructureResultDisplay"]
