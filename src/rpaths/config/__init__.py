"""Configuration loading and location policy."""

from .config import Config
from .paths import ENV_CONFIG, default_config_path, resolve_overridable_path

__all__ = ["Config", "ENV_CONFIG", "default_config_path", "resolve_overridable_path"]
