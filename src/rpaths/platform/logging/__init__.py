"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helpers, and the Rich handler.
Why: Provide a single canonical import path.
"""

from __future__ import annotations

from .config import DEFAULT_CONSOLE_LEVEL, ENV_LOG, level_from_env, logger, setup_logger
from .handlers import ResolutionRichHandler

__all__ = [
    "DEFAULT_CONSOLE_LEVEL",
    "ENV_LOG",
    "ResolutionRichHandler",
    "level_from_env",
    "logger",
    "setup_logger",
]
