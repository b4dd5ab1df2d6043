"""Rich console handler rendering resolution events.

Where: platform/logging/handlers.py
What: ``RichHandler`` subclass with compact, coloured path rendering.
Why: Keep formatting separate from logger setup.
"""

from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ResolutionRichHandler(RichHandler):
    """Rich handler that renders resolution events with icons and short paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "resolution.source.start": ("📂", "cyan"),
        "resolution.source.complete": ("✅", "green"),
        "resolution.entry.symlink": ("🔗", "blue"),
        "resolution.entry.file": ("📄", "magenta"),
        "resolution.entry.skip": ("↪️", "yellow"),
        "resolution.line.accept": ("➕", "green"),
        "resolution.line.reject": ("➖", "yellow"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format ``path`` keeping only its last few segments."""

        pure_path = PurePosixPath(path)
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = "/" if anchor else ""
        if truncated:
            display_string += "…/"
        display_string += "/".join(body_parts)
        return self._style_path_string(display_string or ".")

    @staticmethod
    def _style_path_string(path_string: str) -> Text:
        text = Text()
        for char in path_string:
            if char in {"/", "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_resolution_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render structured resolution events; return None for plain records."""

        event = getattr(record, "resolution_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        entry_path = getattr(record, "entry_path", None)
        target_path = getattr(record, "target_path", None)
        directory = getattr(record, "directory", None)

        if event == "resolution.source.start" and directory:
            _ = body.append("Scanning ")
            _ = body.append_text(self._format_path(str(directory)))
        elif event == "resolution.source.complete" and directory:
            _ = body.append_text(self._format_path(str(directory)))
            count = getattr(record, "count", None)
            if isinstance(count, int):
                _ = body.append(f" [paths={count}]")
        elif event == "resolution.entry.symlink" and entry_path and target_path:
            _ = body.append_text(self._format_path(str(entry_path)))
            _ = body.append(" → ")
            _ = body.append_text(self._format_path(str(target_path)))
        elif event == "resolution.entry.skip" and entry_path:
            _ = body.append("Skipped ")
            _ = body.append_text(self._format_path(str(entry_path)))
            reason = getattr(record, "reason", None)
            if reason:
                _ = body.append(f" ({reason})")
        else:
            _ = body.append(message)

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        resolution_text = self._render_resolution_message(record, message)
        if resolution_text is not None:
            return resolution_text
        return super().render_message(record, message)


__all__ = ["ResolutionRichHandler"]
