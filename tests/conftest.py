"""Shared pytest fixtures for rpaths tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from rpaths.config import Config
from rpaths.features.resolution.adapters import LocalFileSystemGateway


@pytest.fixture(autouse=True)
def reset_config_singleton() -> Iterator[None]:
    """Reset cached configuration around every test."""

    original_instance = Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = Config._loaded_from  # pyright: ignore[reportPrivateUsage]
    Config._instance = None  # pyright: ignore[reportPrivateUsage]
    Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield None
    finally:
        Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]


@pytest.fixture
def fs() -> LocalFileSystemGateway:
    """Provide the real, read-only filesystem gateway."""

    return LocalFileSystemGateway()


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``~`` at an empty temporary home directory."""

    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


class TreeBuilder:
    """Create directories, symlinks, and list files under a root."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def dir(self, relative: str) -> Path:
        path = self.root / relative
        path.mkdir(parents=True, exist_ok=True)
        return path

    def link(self, relative: str, target: Path | str) -> Path:
        link = self.root / relative
        link.parent.mkdir(parents=True, exist_ok=True)
        link.symlink_to(target)
        return link

    def list_file(self, relative: str, lines: list[str]) -> Path:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path


@pytest.fixture
def tree(tmp_path: Path) -> TreeBuilder:
    """Provide a builder rooted at ``tmp_path``."""

    return TreeBuilder(tmp_path)
