"""Command line argument parser."""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from musicorg.config.config import Config
from musicorg.config.settings import SPLITTER_TIMEOUT
from musicorg.platform.logging import DEFAULT_LOG_FILE, console_level_for, logger, setup_logger
from musicorg.ui.cli.args.options import CLIArgs, RestructureArgs


def _positive_seconds(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a number: {raw!r}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than zero: {raw!r}")
    return value


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="musicorg",
            description="musicorg - Restructure a music library into Artist/Album folders.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        restructure_parser = subparsers.add_parser(
            "restructure",
            help="Split, retag and copy albums into the target layout",
        )
        _ = restructure_parser.add_argument(
            "source_root",
            type=str,
            help="Directory holding the albums to restructure",
            metavar="SOURCE",
        )
        _ = restructure_parser.add_argument(
            "--target",
            type=str,
            help="Root of the new layout (defaults to the parent of SOURCE)",
            metavar="DIR",
        )
        _ = restructure_parser.add_argument(
            "--splitter-timeout",
            type=_positive_seconds,
            default=SPLITTER_TIMEOUT,
            help=f"Seconds allowed for each splitter run (default: {SPLITTER_TIMEOUT:g})",
            metavar="SECONDS",
        )
        verbosity = restructure_parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show per-track details",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If argument validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        log_level = console_level_for(
            verbose=bool(getattr(parsed_args, "verbose", False)),
            quiet=bool(getattr(parsed_args, "quiet", False)),
        )

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "restructure":
            return ArgumentParser._process_restructure(parsed_args)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_restructure(parsed_args: argparse.Namespace) -> RestructureArgs:
        # A missing source is reported by the run itself as path_not_found.
        source_root = Path(parsed_args.source_root).expanduser()
        target_root = Path(parsed_args.target).expanduser() if parsed_args.target else None

        return RestructureArgs(
            command="restructure",
            source_root=source_root,
            target_root=target_root,
            splitter_timeout=parsed_args.splitter_timeout,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
