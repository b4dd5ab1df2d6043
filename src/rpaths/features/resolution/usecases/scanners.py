"""
Summary: Scan paths.d-style directories into ordered path fragments.
Why: Symlink-only and mixed symlink/list-file directories share entry handling.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rpaths.platform.logging import logger

from ..domain.models import DirectoryEntry, EntryKind
from .canonical import resolve_candidate, to_fragment
from .events import ResolutionEvent, log_resolution
from .list_file import parse_list_file
from .listing import classify_entry, list_entries
from .ports import FileSystemGateway


def scan_symlinks(directory: Path, fs: FileSystemGateway) -> list[str]:
    """Resolve every symlink in ``directory``; other entries are ignored."""

    fragments: list[str] = []
    for entry in list_entries(directory, fs):
        try:
            is_link = fs.is_symlink(entry.path)
        except OSError:
            is_link = False
        if not is_link:
            _log_skip(entry, "not a symlink")
            continue
        target = _resolve_link(entry, directory, fs)
        if target is not None:
            fragments.append(target)
    return fragments


def scan_mixed(directory: Path, fs: FileSystemGateway) -> list[str]:
    """Resolve symlinks and expand list files found in ``directory``.

    Symlinks contribute their resolved target, regular files contribute the
    existing paths they list, and any other entry kind is ignored. A failure
    on one entry never affects its siblings.
    """

    log_resolution(
        logging.INFO,
        ResolutionEvent.SOURCE_START,
        "Processing directory: %s",
        directory,
        directory=directory,
    )
    fragments: list[str] = []
    for entry in list_entries(directory, fs):
        logger.debug("Found entry: %s", entry.path)
        try:
            kind = classify_entry(entry, fs)
        except OSError as exc:
            _log_skip(entry, str(exc))
            continue

        if kind is EntryKind.SYMLINK:
            target = _resolve_link(entry, directory, fs)
            if target is not None:
                fragments.append(target)
        elif kind is EntryKind.FILE:
            fragments.extend(parse_list_file(entry.path, fs))
        else:
            _log_skip(entry, "neither symlink nor regular file")
    return fragments


def _resolve_link(entry: DirectoryEntry, directory: Path, fs: FileSystemGateway) -> str | None:
    try:
        raw_target = fs.read_link(entry.path)
    except OSError as exc:
        _log_skip(entry, str(exc))
        return None

    target = resolve_candidate(directory, raw_target, fs)
    if target is None:
        _log_skip(entry, f"unresolvable target {raw_target}")
        return None

    log_resolution(
        logging.INFO,
        ResolutionEvent.ENTRY_SYMLINK,
        "%s is symlink to: %s",
        entry.path,
        target,
        entry_path=entry.path,
        target_path=target,
    )
    return to_fragment(target)


def _log_skip(entry: DirectoryEntry, reason: str) -> None:
    log_resolution(
        logging.DEBUG,
        ResolutionEvent.ENTRY_SKIP,
        "Ignoring %s (%s)",
        entry.path,
        reason,
        entry_path=entry.path,
        reason=reason,
    )


__all__ = ["scan_mixed", "scan_symlinks"]
