"""Shared path utilities for configuration locations.

Policy:
- Config: ``$XDG_CONFIG_HOME/rpaths/config.toml`` (``~/.config`` when unset),
  unless overridden by ``RPATHS_CONFIG``.
- Nothing is created on disk; a missing file simply means defaults.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

ENV_CONFIG: Final[str] = "RPATHS_CONFIG"
_ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _config_home(env: Mapping[str, str] | None = None) -> Path:
    mapping = env if env is not None else os.environ
    xdg = (mapping.get(_ENV_XDG_CONFIG_HOME) or "").strip()
    if xdg:
        return Path(xdg)
    return Path("~/.config")


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path of the TOML config file, honoring ``RPATHS_CONFIG``."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_CONFIG,
        default_factory=lambda: _config_home(env) / "rpaths" / "config.toml",
    )


__all__ = ["ENV_CONFIG", "default_config_path", "resolve_overridable_path"]
