"""Configuration management for rpaths."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from rpaths.config.paths import default_config_path
from rpaths.features.resolution.domain import (
    DEFAULT_USER_DIR,
    SYSTEM_DIR,
    SYSTEM_FILE,
    ConfigFileError,
    SourceLayout,
)
from rpaths.features.resolution.usecases import PATH_SEPARATOR
from rpaths.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Per-user source directory, "~" is expanded
    default_dir: str = DEFAULT_USER_DIR

    # System sources, used verbatim
    system_dir: str = SYSTEM_DIR
    system_file: str = SYSTEM_FILE
    filter_system_file: bool = False

    # Output joiner
    separator: str = PATH_SEPARATOR

    # Optional log file; no file logging when unset
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def layout(self) -> SourceLayout:
        """Return the source locations this configuration points at."""
        return SourceLayout(
            default_dir=self.default_dir,
            system_dir=self.system_dir,
            system_file=self.system_file,
            filter_system_file=self.filter_system_file,
        )

    def render_toml(self) -> str:
        """Render configuration as TOML with inline guidance."""

        config = asdict(self)
        lines: list[str] = []

        lines.append("# rpaths configuration file")
        lines.append("")

        lines.append("# Per-user directory of symlinks and list files")
        lines.append(f"default_dir = {self._format_toml_value(config['default_dir'])}")
        lines.append("")

        lines.append("# System directory and list file scanned with --system")
        lines.append(f"system_dir = {self._format_toml_value(config['system_dir'])}")
        lines.append(f"system_file = {self._format_toml_value(config['system_file'])}")
        lines.append("# Drop system_file lines naming paths that do not exist")
        lines.append(
            f"filter_system_file = {self._format_toml_value(config['filter_system_file'])}"
        )
        lines.append("")

        lines.append("# String placed between resolved paths")
        lines.append(f"separator = {self._format_toml_value(config['separator'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "~/.cache/rpaths/rpaths.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], source: Path) -> "Config":
        """Build a configuration from parsed TOML, validating keys and types."""

        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ConfigFileError(source, f"unknown key(s): {', '.join(unknown)}")

        for key, value in data.items():
            expected: type = bool if key == "filter_system_file" else str
            if not isinstance(value, expected):
                raise ConfigFileError(
                    source, f"{key} must be a {expected.__name__}, got {type(value).__name__}"
                )

        for key in ("default_dir", "system_dir", "system_file", "separator"):
            if data.get(key) == "":
                raise ConfigFileError(source, f"{key} must not be empty")

        return cls(**data)

    @classmethod
    def load(
        cls,
        config_file: Path | None = None,
        *,
        env: Mapping[str, str] | None = None,
    ) -> "Config":
        """Load configuration from file, falling back to defaults.

        Args:
            config_file: Explicit file to read; defaults to the policy location.
            env: Environment used to locate the default file.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigFileError: If the file exists but cannot be read or parsed.
        """
        target = config_file if config_file is not None else default_config_path(env)

        if cls._instance is not None and cls._loaded_from == target:
            return cls._instance

        try:
            present = target.is_file()
        except OSError as e:
            raise ConfigFileError(target, str(e)) from e

        if not present:
            logger.debug("No configuration at %s, using defaults", target)
            instance = cls()
        else:
            try:
                with open(target, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                raise ConfigFileError(target, str(e)) from e

            instance = cls.from_mapping(config_dict, target)
            logger.debug("Configuration loaded from %s", target)

        cls._instance = instance
        cls._loaded_from = target
        return instance


__all__ = ["Config"]
