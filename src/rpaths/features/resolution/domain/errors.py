"""Failures that are surfaced to the operator instead of being absorbed."""

from __future__ import annotations

from pathlib import Path


class ConfigurationError(Exception):
    """Base class for hard configuration failures."""


class MissingEnvironmentError(ConfigurationError):
    """An environment variable was explicitly requested but is not set."""

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(f"Could not read {variable} environment variable: not set")


class ConfigFileError(ConfigurationError):
    """The configuration file exists but cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid configuration file {path}: {reason}")


__all__ = ["ConfigFileError", "ConfigurationError", "MissingEnvironmentError"]
