"""Filesystem adapter for resolution use cases."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from rpaths.platform.logging import logger

from ...usecases.ports import FileSystemGateway


class LocalFileSystemGateway(FileSystemGateway):
    """Thin read-only wrapper around the local filesystem."""

    def list_directory(self, path: Path) -> list[Path]:
        # Only opening the directory may fail as a whole; a failed read
        # keeps the entries collected so far.
        listed: list[Path] = []
        with os.scandir(path) as entries:
            while True:
                try:
                    entry = next(entries)
                except StopIteration:
                    break
                except OSError as exc:
                    logger.debug("Stopped listing %s: %s", path, exc)
                    break
                listed.append(Path(entry.path))
        return listed

    def is_symlink(self, path: Path) -> bool:
        return path.is_symlink()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def exists(self, path: Path) -> bool:
        return path.exists()

    def read_link(self, path: Path) -> str:
        return os.readlink(path)

    def canonicalize(self, path: Path) -> Path:
        return path.resolve(strict=True)

    def read_lines(self, path: Path) -> Iterator[str]:
        # Decoded per line so a bad line does not discard the ones before it.
        with open(path, "rb") as handle:
            for raw in handle:
                yield raw.removesuffix(b"\n").removesuffix(b"\r").decode("utf-8")

    def expand_user(self, raw: str) -> Path:
        try:
            return Path(raw).expanduser()
        except RuntimeError:
            return Path(raw)


__all__ = ["LocalFileSystemGateway"]
