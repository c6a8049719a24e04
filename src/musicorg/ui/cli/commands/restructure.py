"""Restructure command implementation for the CLI."""

from __future__ import annotations

from typing import final

from musicorg.application.services import RestructureMusicService, RestructureRequest
from musicorg.features.restructure import RestructureReport
from musicorg.ui.cli.args.options import RestructureArgs
from musicorg.ui.cli.display.result import RestructureResultDisplay


@final
class RestructureCommand:
    """Command that restructures one source tree."""

    def __init__(
        self,
        args: RestructureArgs,
        service: RestructureMusicService | None = None,
        display: RestructureResultDisplay | None = None,
    ) -> None:
        self.args = args
        self.service = service or RestructureMusicService()
        self.display = display or RestructureResultDisplay()

    def execute(self) -> RestructureReport:
        """Execute the restructure command."""

        request = RestructureRequest(
            source_root=self.args.source_root,
            destination_root=self.args.target_root,
            splitter_timeout=self.args.splitter_timeout,
        )
        report = self.service.run(request)
        self.display.show_report(report, quiet=self.args.quiet)
        return report
