"""Command line interface for musicorg."""

from typing import final

from musicorg.features.restructure import RestructureReport
from musicorg.platform.logging import logger
from musicorg.ui.cli.args import ArgumentParser
from musicorg.ui.cli.args.options import CLIArgs
from musicorg.ui.cli.commands import RestructureCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Process exit code. 0 when every album went through or there
            was nothing to do, 1 on a missing source or any failure, 130 when
            interrupted.
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            report = RestructureCommand(args).execute()
            return CommandProcessor.exit_code(report)

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            return 130
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            return 1

    @staticmethod
    def exit_code(report: RestructureReport) -> int:
        """Map a run report to a process exit code."""

        return 1 if report.has_failures else 0


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code.
    """
    return CommandProcessor.process_command()
