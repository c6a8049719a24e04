"""Command execution package for CLI."""

from musicorg.ui.cli.commands.restructure import RestructureCommand

__all__ = ["RestructureCommand"]
