"""Data structures that describe search-path sources and directory entries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum
from pathlib import Path
from typing import Final

DEFAULT_USER_DIR: Final[str] = "~/.paths.d"
SYSTEM_DIR: Final[str] = "/etc/paths.d"
SYSTEM_FILE: Final[str] = "/etc/paths"


class SourceKind(StrEnum):
    """Origins of path fragments, listed in output precedence order."""

    EXPLICIT = "explicit"
    ENVIRONMENT = "environment"
    DEFAULT = "default"
    SYSTEM_DIRECTORY = "system_directory"
    SYSTEM_FILE = "system_file"


class EntryKind(Enum):
    """Classification of a directory entry as seen by the scanners."""

    SYMLINK = "symlink"
    FILE = "file"
    OTHER = "other"


@dataclass(slots=True, frozen=True)
class Source:
    """One configured origin of fragments."""

    kind: SourceKind
    location: str

    @property
    def expands_home(self) -> bool:
        """System locations are used verbatim; user-facing ones accept ``~``."""

        return self.kind in {SourceKind.EXPLICIT, SourceKind.ENVIRONMENT, SourceKind.DEFAULT}

    @property
    def is_list_file(self) -> bool:
        return self.kind is SourceKind.SYSTEM_FILE


@dataclass(slots=True, frozen=True)
class DirectoryEntry:
    """An item discovered while listing a directory.

    Only the full path is captured at listing time; the entry kind is
    classified lazily by the scanner through the filesystem port.
    """

    path: Path

    @property
    def sort_key(self) -> str:
        return str(self.path)


@dataclass(slots=True, frozen=True)
class SourceLayout:
    """Filesystem locations of the fixed sources.

    Attributes:
        default_dir: Per-user directory, ``~`` is expanded before scanning.
        system_dir: System directory of symlinks and list files.
        system_file: System list file, one path per line.
        filter_system_file: Drop lines of ``system_file`` naming missing paths.
    """

    default_dir: str = DEFAULT_USER_DIR
    system_dir: str = SYSTEM_DIR
    system_file: str = SYSTEM_FILE
    filter_system_file: bool = False


@dataclass(slots=True, frozen=True)
class ResolutionRequest:
    """Inputs required to assemble one search-path string.

    Attributes:
        include_default: Scan the per-user default directory.
        include_system: Scan the system directory and the system list file.
        explicit_dirs: Directories supplied on the command line.
        env_dirs: Directories supplied through the environment, if any.
    """

    include_default: bool = True
    include_system: bool = False
    explicit_dirs: tuple[str, ...] = ()
    env_dirs: tuple[str, ...] | None = None


__all__ = [
    "DEFAULT_USER_DIR",
    "SYSTEM_DIR",
    "SYSTEM_FILE",
    "DirectoryEntry",
    "EntryKind",
    "ResolutionRequest",
    "Source",
    "SourceKind",
    "SourceLayout",
]
