"""
Summary: Public surface of the resolution use cases.
Why: Let adapters, services, and tests import scanners from one place.
"""

from .aggregator import PATH_SEPARATOR, PathAggregator, split_search_path
from .canonical import resolve_candidate, to_fragment
from .events import ResolutionEvent, log_resolution
from .list_file import parse_list_file
from .listing import classify_entry, list_entries
from .ports import FileSystemGateway
from .scanners import scan_mixed, scan_symlinks

__all__ = [
    "PATH_SEPARATOR",
    "FileSystemGateway",
    "PathAggregator",
    "ResolutionEvent",
    "classify_entry",
    "list_entries",
    "log_resolution",
    "parse_list_file",
    "resolve_candidate",
    "scan_mixed",
    "scan_symlinks",
    "split_search_path",
    "to_fragment",
]
