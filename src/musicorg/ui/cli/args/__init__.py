"""Command line argument handling package."""

from musicorg.ui.cli.args.parser import ArgumentParser
from musicorg.ui.cli.args.options import CLIArgs, RestructureArgs

__all__ = ["ArgumentParser", "CLIArgs", "RestructureArgs"]
