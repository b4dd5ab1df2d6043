"""Public surface for the resolution feature."""

from .domain import (
    ConfigFileError,
    ConfigurationError,
    MissingEnvironmentError,
    ResolutionRequest,
    SourceKind,
    SourceLayout,
)
from .usecases import PathAggregator, scan_mixed, scan_symlinks, split_search_path

__all__ = [
    "ConfigFileError",
    "ConfigurationError",
    "MissingEnvironmentError",
    "PathAggregator",
    "ResolutionRequest",
    "SourceKind",
    "SourceLayout",
    "scan_mixed",
    "scan_symlinks",
    "split_search_path",
]
