"""
Summary: Tests for deterministic directory listing and entry classification.
Why: Output order depends entirely on listing order.
"""

from __future__ import annotations

import errno
import os
from typing import TYPE_CHECKING

from pytest_mock import MockerFixture

from rpaths.features.resolution.adapters import LocalFileSystemGateway
from rpaths.features.resolution.domain import DirectoryEntry, EntryKind
from rpaths.features.resolution.usecases import classify_entry, list_entries

if TYPE_CHECKING:
    from conftest import TreeBuilder


def test_entries_are_sorted_by_full_path(tree: TreeBuilder, fs: LocalFileSystemGateway) -> None:
    """Entries come back in lexicographic order regardless of creation order."""

    directory = tree.dir("paths.d")
    for name in ["20-b", "10-a", "30-c", "100-z"]:
        _ = tree.list_file(f"paths.d/{name}", [])

    names = [entry.path.name for entry in list_entries(directory, fs)]

    assert names == ["10-a", "100-z", "20-b", "30-c"]


def test_missing_directory_lists_nothing(tree: TreeBuilder, fs: LocalFileSystemGateway) -> None:
    assert list_entries(tree.root / "missing", fs) == []


def test_regular_file_lists_nothing(tree: TreeBuilder, fs: LocalFileSystemGateway) -> None:
    """Listing a file instead of a directory is absorbed."""

    path = tree.list_file("paths", ["/bin"])

    assert list_entries(path, fs) == []


def test_classify_entry_kinds(tree: TreeBuilder, fs: LocalFileSystemGateway) -> None:
    """Symlinks are detected without following them, even when dangling."""

    plain = tree.list_file("d/plain", [])
    subdir = tree.dir("d/sub")
    dangling = tree.link("d/dangling", tree.root / "missing")
    to_file = tree.link("d/to-file", plain)

    assert classify_entry(DirectoryEntry(plain), fs) is EntryKind.FILE
    assert classify_entry(DirectoryEntry(subdir), fs) is EntryKind.OTHER
    assert classify_entry(DirectoryEntry(dangling), fs) is EntryKind.SYMLINK
    assert classify_entry(DirectoryEntry(to_file), fs) is EntryKind.SYMLINK


class _FailingScandir:
    """``os.scandir`` stand-in whose iteration fails after some entries."""

    def __init__(self, entries: list[os.DirEntry[str]], error: OSError) -> None:
        self._entries = iter(entries)
        self._error = error

    def __enter__(self) -> _FailingScandir:
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None

    def __iter__(self) -> _FailingScandir:
        return self

    def __next__(self) -> os.DirEntry[str]:
        try:
            return next(self._entries)
        except StopIteration:
            raise self._error from None


def test_entry_read_failure_keeps_earlier_entries(
    tree: TreeBuilder, fs: LocalFileSystemGateway, mocker: MockerFixture
) -> None:
    """A failure part-way through a directory does not discard what was read."""

    directory = tree.dir("paths.d")
    _ = tree.dir("paths.d/a")
    _ = tree.dir("paths.d/b")
    with os.scandir(directory) as real:
        first = sorted(real, key=lambda entry: entry.name)[0]
    _ = mocker.patch(
        "rpaths.features.resolution.adapters.filesystem.local.os.scandir",
        return_value=_FailingScandir([first], OSError(errno.EIO, "I/O error")),
    )

    entries = list_entries(directory, fs)

    assert [entry.path for entry in entries] == [directory / "a"]


def test_unopenable_directory_lists_nothing(
    tree: TreeBuilder, fs: LocalFileSystemGateway, mocker: MockerFixture
) -> None:
    directory = tree.dir("paths.d")
    _ = tree.dir("paths.d/a")
    _ = mocker.patch(
        "rpaths.features.resolution.adapters.filesystem.local.os.scandir",
        side_effect=PermissionError(errno.EACCES, "denied"),
    )

    assert list_entries(directory, fs) == []
