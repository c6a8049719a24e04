"""src/musicorg/ui/cli/display/result.py
What: Render the outcome of a restructuring run.
Why: Keep console output formatting in one place for the CLI.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape

from musicorg.features.restructure import AlbumResult, RestructureOutcome, RestructureReport


@final
class RestructureResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_report(self, report: RestructureReport, *, quiet: bool = False) -> None:
        """Display a run report.

        Args:
            report: The report returned by the restructure service.
            quiet: Whether to suppress everything but failures.
        """
        if report.outcome is RestructureOutcome.PATH_NOT_FOUND:
            self.console.print(f"[red]Path not found: {escape(str(report.source_root))}[/red]")
            return

        if quiet and not report.has_failures:
            return

        if report.outcome is RestructureOutcome.ALBUMS_NOT_FOUND:
            self.console.print(f"[yellow]No albums found under {escape(str(report.source_root))}[/yellow]")
            self._show_discovery_failures(report)
            return

        if not quiet:
            for result in report.albums:
                self._show_album(result)

        self._show_discovery_failures(report)
        self._show_summary(report)

    def _show_album(self, result: AlbumResult) -> None:
        title = escape(result.album.title or result.album.source_dir.name)
        if result.error_message is not None:
            self.console.print(f"[red]✗ {title} ({result.strategy}): {escape(result.error_message)}[/red]")
        elif result.track_errors:
            self.console.print(
                f"[yellow]! {title} ({result.strategy}): {len(result.track_errors)} track error(s)[/yellow]"
            )
        else:
            self.console.print(f"[green]✓ {title} ({result.strategy})[/green]")

        for error in result.track_errors:
            self.console.print(f"[red]  • {escape(error.message)}[/red]")

    def _show_discovery_failures(self, report: RestructureReport) -> None:
        if not report.discovery_failures:
            return
        self.console.print(f"[red]Unreadable files: {len(report.discovery_failures)}[/red]")
        for failure in report.discovery_failures:
            self.console.print(f"[red]  • {escape(failure.message)}[/red]")

    def _show_summary(self, report: RestructureReport) -> None:
        succeeded = sum(1 for result in report.albums if result.success)
        failed = len(report.albums) - succeeded

        self.console.print("\n[bold]Restructure Summary:[/bold]")
        self.console.print(f"Destination: {escape(str(report.destination_root))}")
        self.console.print(f"Total albums: {len(report.albums)}")
        self.console.print(f"[green]Successful: {succeeded}[/green]")
        if failed:
            self.console.print(f"[red]With errors: {failed}[/red]")
