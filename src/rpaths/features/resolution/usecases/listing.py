"""
Summary: List directory entries in a stable order.
Why: Output must not depend on the order the filesystem returns entries in.
"""

from __future__ import annotations

from pathlib import Path

from rpaths.platform.logging import logger

from ..domain.models import DirectoryEntry, EntryKind
from .ports import FileSystemGateway


def list_entries(directory: Path, fs: FileSystemGateway) -> list[DirectoryEntry]:
    """Return the entries of ``directory`` sorted by full path string.

    Unreadable, missing, or non-directory paths yield an empty list.
    """

    try:
        paths = fs.list_directory(directory)
    except OSError as exc:
        logger.debug("Cannot list %s: %s", directory, exc)
        return []

    entries = [DirectoryEntry(path) for path in paths]
    entries.sort(key=lambda entry: entry.sort_key)
    return entries


def classify_entry(entry: DirectoryEntry, fs: FileSystemGateway) -> EntryKind:
    """Classify ``entry``; the symlink check does not follow the link."""

    if fs.is_symlink(entry.path):
        return EntryKind.SYMLINK
    if fs.is_file(entry.path):
        return EntryKind.FILE
    return EntryKind.OTHER


__all__ = ["classify_entry", "list_entries"]
