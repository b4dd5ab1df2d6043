"""
Summary: Read plain-text list files of path fragments.
Why: Both /etc/paths and files inside a paths.d directory use this format.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .events import ResolutionEvent, log_resolution
from .ports import FileSystemGateway


def parse_list_file(
    path: Path,
    fs: FileSystemGateway,
    *,
    filter_existing: bool = True,
) -> list[str]:
    """Return the lines of ``path`` as fragments, in file order.

    Args:
        path: List file to read.
        fs: Filesystem port.
        filter_existing: Keep only lines naming an existing path. When False
            every line is kept, blank ones included.

    Returns:
        list[str]: Collected fragments. A file that cannot be opened yields
        an empty list; a read or decode error stops parsing and returns the
        lines gathered up to that point.
    """

    fragments: list[str] = []
    log_resolution(
        logging.INFO,
        ResolutionEvent.ENTRY_FILE,
        "Looking in file %s for paths...",
        path,
        entry_path=path,
    )
    try:
        for line in fs.read_lines(path):
            if filter_existing and not _names_existing_path(line, fs):
                log_resolution(
                    logging.DEBUG,
                    ResolutionEvent.LINE_REJECT,
                    "Ignoring missing path: %s",
                    line,
                    fragment=line,
                )
                continue
            log_resolution(
                logging.INFO,
                ResolutionEvent.LINE_ACCEPT,
                "Found entry: %s",
                line,
                fragment=line,
            )
            fragments.append(line)
    except (OSError, UnicodeDecodeError) as exc:
        log_resolution(
            logging.DEBUG,
            ResolutionEvent.ENTRY_SKIP,
            "Stopped reading %s after %d line(s): %s",
            path,
            len(fragments),
            exc,
            entry_path=path,
        )
    return fragments


def _names_existing_path(line: str, fs: FileSystemGateway) -> bool:
    if not line:
        return False
    try:
        return fs.exists(Path(line))
    except (OSError, ValueError):
        # ValueError: embedded NUL byte.
        return False


__all__ = ["parse_list_file"]
