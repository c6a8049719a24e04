"""Rich console handler for restructuring logs.

Where: platform/logging/handlers.py
What: Render structured restructuring events with icons and compact paths.
Why: Keep console output scannable while the file log keeps full detail.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class WhitePathRichHandler(RichHandler):
    """Custom Rich handler that displays file paths in white."""

    _PROCESSING_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "restructure.run.start": ("🚀", "cyan"),
        "restructure.run.complete": ("✅", "green"),
        "restructure.run.no_albums": ("ℹ️", "yellow"),
        "restructure.run.path_not_found": ("❌", "red"),
        "restructure.album.start": ("💿", "cyan"),
        "restructure.album.complete": ("🎉", "green"),
        "restructure.album.partial": ("⚠️", "yellow"),
        "restructure.album.error": ("❌", "red"),
        "restructure.split.start": ("✂️", "blue"),
        "restructure.track.copy": ("🎧", "blue"),
        "restructure.track.error": ("⛔", "red"),
        "restructure.cover.copy": ("🖼️", "magenta"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str | PurePath, base: str | PurePath | None = None) -> Text:
        """Format a path with colored separators and compact rendering.

        Args:
            path: Absolute or relative path to format.
            base: Optional base path used to relativize ``path`` when possible.

        Returns:
            Text: Formatted path with colored separators and ellipsis truncation.
        """
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and pure_path.is_relative_to(base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor:
            display_string = anchor.rstrip("\\/") + separator if anchor.rstrip("\\/") else separator
        if truncated:
            display_string += "…"
            if body_parts:
                display_string += separator
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str | PurePath) -> PurePath:
        """Return a platform-aware ``PurePath`` for a path or its string form."""

        if isinstance(raw_path, PurePath):
            raw_path = str(raw_path)
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        separator_chars = {separator}
        if separator == "\\":
            separator_chars.add("/")

        for char in path_string:
            if char in separator_chars or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_processing_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render structured restructuring events with dedicated styling."""

        event = getattr(record, "processing_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._PROCESSING_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        source_base_path = getattr(record, "source_base_path", None)
        target_base_path = getattr(record, "target_base_path", None)

        if event.startswith("restructure.run"):
            _ = body.append(message)
        elif event.startswith("restructure.album"):
            sequence = getattr(record, "sequence", None)
            total = getattr(record, "total_albums", None)
            if isinstance(sequence, int) and isinstance(total, int) and total > 0:
                _ = body.append(f"[{sequence}/{total}] ")
            strategy = getattr(record, "strategy", None)
            album_title = getattr(record, "album_title", None)
            _ = body.append(
                {
                    "restructure.album.start": "Album ",
                    "restructure.album.complete": "Done ",
                    "restructure.album.partial": "Done with errors ",
                    "restructure.album.error": "Failed ",
                }.get(event, "")
            )
            if album_title:
                _ = body.append(str(album_title))
            if strategy:
                _ = body.append(f" ({strategy})")
            error_count = getattr(record, "error_count", None)
            if isinstance(error_count, int) and error_count > 0:
                _ = body.append(f" [errors={error_count}]")
            error_message = getattr(record, "error_message", None)
            if error_message:
                _ = body.append(f" ({error_message})")
        else:
            prefix = {
                "restructure.split.start": "Splitting ",
                "restructure.track.copy": "Copying ",
                "restructure.track.error": "Failed ",
                "restructure.cover.copy": "Cover ",
            }.get(event, "")
            _ = body.append(prefix)

            source_path = getattr(record, "source_path", None)
            target_path = getattr(record, "target_path", None)
            if source_path:
                _ = body.append_text(self._format_path(str(source_path), base=source_base_path))
            if target_path:
                _ = body.append(" → ")
                _ = body.append_text(self._format_path(str(target_path), base=target_base_path))
            error_message = getattr(record, "error_message", None)
            if error_message:
                _ = body.append(f" ({error_message})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for restructuring events."""

        processing_text = self._render_processing_message(record, message)
        if processing_text is not None:
            return processing_text

        return super().render_message(record, message)


__all__ = ["WhitePathRichHandler"]
