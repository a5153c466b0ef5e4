"""Rich console handler for structured extraction events.

Where: platform/logging/handlers.py
What: Render ``extraction_event`` log records with icons, compact paths and metrics.
Why: Keep per-file console output scannable while plain messages fall through to Rich.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class EventRichHandler(RichHandler):
    """Rich handler that renders extraction and serving events."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "extraction.file.start": ("🔎", "blue", "Extracting "),
        "extraction.file.success": ("✅", "green", "Extracted "),
        "extraction.file.error": ("⛔", "red", "Failed "),
        "extraction.artwork.registered": ("🖼️", "magenta", "Album art "),
        "extraction.artwork.rejected": ("🚫", "yellow", "Album art rejected "),
        "extraction.artwork.not_found": ("ℹ️", "cyan", "No album art "),
        "serving.artwork.success": ("📤", "green", "Served album art "),
        "serving.artwork.error": ("❌", "red", "Album art unavailable "),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _format_path(self, path: str) -> Text:
        """Render the trailing path segments with an ellipsis for long paths."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        parts = [part for part in pure_path.parts if part and part != pure_path.anchor]

        if len(parts) > self._PATH_SEGMENT_LIMIT:
            display = "…" + separator + separator.join(parts[-self._PATH_SEGMENT_LIMIT:])
        else:
            display = str(pure_path) or "."

        text = Text()
        for char in display:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_event(self, record: logging.LogRecord) -> Text | None:
        """Render structured extraction events with dedicated styling."""

        event = getattr(record, "extraction_event", None)
        if not isinstance(event, str):
            return None

        icon, color, prefix = self._EVENT_STYLES.get(event, ("ℹ️", "blue", ""))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(prefix)

        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(self._format_path(str(source_path)))

        details: list[str] = []
        family = getattr(record, "container_family", None)
        if family:
            details.append(str(family))
        mimetype = getattr(record, "mimetype", None)
        if mimetype:
            details.append(str(mimetype))
        total_size = getattr(record, "total_size", None)
        if isinstance(total_size, int):
            details.append(f"{total_size} bytes")
        duration_ms = getattr(record, "duration_ms", None)
        if isinstance(duration_ms, (int, float)):
            details.append(f"{duration_ms:.2f} ms")
        label = " - ".join(
            part
            for part in (getattr(record, "artist", None), getattr(record, "title", None))
            if part
        )
        if label:
            details.append(label)
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))

        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for extraction events."""

        event_text = self._render_event(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["EventRichHandler"]
