"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Configure the shared application logger and derive its level from the environment.
Why: Separate handler formatting from setup so configuration stays concise.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from rich.console import Console

from .handlers import ResolutionRichHandler

ENV_LOG: Final[str] = "RPATHS_LOG"
DEFAULT_CONSOLE_LEVEL: Final[int] = logging.WARNING


def level_from_env(env: Mapping[str, str] | None = None) -> int:
    """Return the console level named by ``RPATHS_LOG``, or the default."""

    mapping = env if env is not None else os.environ
    raw = (mapping.get(ENV_LOG) or "").strip().upper()
    if not raw:
        return DEFAULT_CONSOLE_LEVEL
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else DEFAULT_CONSOLE_LEVEL


def setup_logger(
    log_file: Path | None = None,
    console_level: int = DEFAULT_CONSOLE_LEVEL,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """Set up and configure the application logger.

    Console output always goes to stderr; stdout carries the resolved path.
    """

    logger = logging.getLogger("rpaths")
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console_handler = ResolutionRichHandler(
        console=console or Console(stderr=True, soft_wrap=True)
    )
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        resolved_log_file = Path(log_file).expanduser().resolve()
        os.makedirs(resolved_log_file.parent, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


logger: Final[logging.Logger] = setup_logger(console_level=level_from_env())


__all__ = ["DEFAULT_CONSOLE_LEVEL", "ENV_LOG", "level_from_env", "logger", "setup_logger"]
