"""Ports for the resolution feature.

Where: features/resolution/usecases.
What: Protocol describing the read-only filesystem capabilities the scanners need.
Why: Let tests swap in fakes without the scanners touching the disk directly.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystemGateway(Protocol):
    """Abstract filesystem operations needed by the use cases.

    Every method may raise ``OSError``; callers decide whether the failure is
    absorbed. ``read_lines`` may additionally raise ``UnicodeDecodeError``.
    """

    def list_directory(self, path: Path) -> list[Path]:
        """Return the immediate entries of ``path`` as full paths, unordered."""
        ...

    def is_symlink(self, path: Path) -> bool:
        """Return True when ``path`` itself is a symbolic link."""
        ...

    def is_file(self, path: Path) -> bool:
        """Return True when ``path`` resolves to a regular file."""
        ...

    def exists(self, path: Path) -> bool:
        """Return True when ``path`` currently exists, following symlinks."""
        ...

    def read_link(self, path: Path) -> str:
        """Return the target text stored in the symbolic link ``path``, verbatim."""
        ...

    def canonicalize(self, path: Path) -> Path:
        """Return the absolute, symlink-free form of an existing ``path``."""
        ...

    def read_lines(self, path: Path) -> Iterator[str]:
        """Yield the lines of the text file ``path`` without line terminators."""
        ...

    def expand_user(self, raw: str) -> Path:
        """Expand a leading ``~`` or ``~user`` in ``raw``."""
        ...


__all__ = ["FileSystemGateway"]
