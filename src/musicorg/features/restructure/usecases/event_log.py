"""src/musicorg/features/restructure/usecases/event_log.py
What: Emit structured restructuring events through the shared logger.
Why: The Rich console handler renders records by their ``processing_event``.
"""

from __future__ import annotations

from musicorg.platform.logging import logger

from ..domain.results import RestructureEvent


def log_event(
    level: int,
    event: RestructureEvent,
    message: str,
    *message_args: object,
    **context: object,
) -> None:
    """Log ``message`` tagged with ``event`` and the structured ``context``."""

    extra: dict[str, object] = {"processing_event": event.value}
    extra.update(context)
    logger.log(level, message, *message_args, extra=extra)


__all__ = ["log_event"]
