"""
Summary: Validate symlink targets and turn relative ones into canonical paths.
Why: Both directory scanners share one rule for accepting a link target.
"""

from __future__ import annotations

from pathlib import Path

from .ports import FileSystemGateway


def resolve_candidate(base_dir: Path, candidate: str, fs: FileSystemGateway) -> str | None:
    """Return the usable form of ``candidate`` or ``None`` when it is invalid.

    Absolute candidates are returned as the exact text given when they exist;
    repeated or trailing slashes and ``.`` segments are kept. Relative
    candidates are joined onto ``base_dir`` and fully canonicalized, which
    requires the final target to exist.
    """

    if Path(candidate).is_absolute():
        try:
            return candidate if fs.exists(Path(candidate)) else None
        except OSError:
            return None

    try:
        return str(fs.canonicalize(base_dir / candidate))
    except (OSError, RuntimeError):
        # RuntimeError: symlink loop on interpreters predating OSError(ELOOP).
        return None


def to_fragment(path: Path | str) -> str:
    """Render ``path`` as UTF-8 text, replacing undecodable filename bytes."""

    return str(path).encode("utf-8", "surrogateescape").decode("utf-8", "replace")


__all__ = ["resolve_candidate", "to_fragment"]
