"""
Summary: Domain types for search-path resolution.
Why: Keep value objects and error types importable without pulling in use cases.
"""

from .errors import ConfigFileError, ConfigurationError, MissingEnvironmentError
from .models import (
    DEFAULT_USER_DIR,
    SYSTEM_DIR,
    SYSTEM_FILE,
    DirectoryEntry,
    EntryKind,
    ResolutionRequest,
    Source,
    SourceKind,
    SourceLayout,
)

__all__ = [
    "DEFAULT_USER_DIR",
    "SYSTEM_DIR",
    "SYSTEM_FILE",
    "ConfigFileError",
    "ConfigurationError",
    "DirectoryEntry",
    "EntryKind",
    "MissingEnvironmentError",
    "ResolutionRequest",
    "Source",
    "SourceKind",
    "SourceLayout",
]
