"""
Summary: Structured log events emitted while resolving search paths.
Why: The console handler renders events by name, not by message text.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from rpaths.platform.logging import logger


class ResolutionEvent(StrEnum):
    """Event identifiers understood by the console log handler."""

    SOURCE_START = "resolution.source.start"
    SOURCE_COMPLETE = "resolution.source.complete"
    ENTRY_SYMLINK = "resolution.entry.symlink"
    ENTRY_FILE = "resolution.entry.file"
    ENTRY_SKIP = "resolution.entry.skip"
    LINE_ACCEPT = "resolution.line.accept"
    LINE_REJECT = "resolution.line.reject"


def log_resolution(
    level: int,
    event: ResolutionEvent,
    message: str,
    *message_args: object,
    **context: object,
) -> None:
    """Log ``message`` tagged with ``event`` and stringified ``context`` extras."""

    extra: dict[str, object] = {"resolution_event": event.value}
    for key, value in context.items():
        extra[key] = str(value) if isinstance(value, Path) else value
    logger.log(level, message, *message_args, extra=extra, stacklevel=2)


__all__ = ["ResolutionEvent", "log_resolution"]
