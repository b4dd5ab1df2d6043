"""
Summary: Merge every enabled source into one ordered search-path string.
Why: Precedence between sources is defined in one place only.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Final, final

from rpaths.platform.logging import logger

from ..domain.models import ResolutionRequest, Source, SourceKind, SourceLayout
from .events import ResolutionEvent, log_resolution
from .list_file import parse_list_file
from .ports import FileSystemGateway
from .scanners import scan_mixed

PATH_SEPARATOR: Final[str] = ":"


@final
class PathAggregator:
    """Resolve configured sources in precedence order.

    Fragments are concatenated exactly as scanned; duplicates are kept.
    """

    def __init__(
        self,
        fs: FileSystemGateway,
        *,
        layout: SourceLayout | None = None,
        separator: str = PATH_SEPARATOR,
    ) -> None:
        self.fs = fs
        self.layout = layout or SourceLayout()
        self.separator = separator

    def plan_sources(self, request: ResolutionRequest) -> list[Source]:
        """Return the sources ``request`` enables, earliest precedence first."""

        sources = [Source(SourceKind.EXPLICIT, raw) for raw in request.explicit_dirs]
        if request.env_dirs is not None:
            sources.extend(Source(SourceKind.ENVIRONMENT, raw) for raw in request.env_dirs)
        if request.include_default:
            sources.append(Source(SourceKind.DEFAULT, self.layout.default_dir))
        if request.include_system:
            sources.append(Source(SourceKind.SYSTEM_DIRECTORY, self.layout.system_dir))
            sources.append(Source(SourceKind.SYSTEM_FILE, self.layout.system_file))
        return sources

    def resolve_source(self, raw: str) -> list[str]:
        """Expand a leading ``~`` in ``raw`` and scan the directory it names.

        An empty ``raw`` names no directory and contributes nothing; it is
        never taken to mean the working directory.
        """

        if not raw:
            logger.debug("Ignoring empty source directory")
            return []
        return scan_mixed(self.fs.expand_user(raw), self.fs)

    def collect(self, request: ResolutionRequest) -> list[str]:
        """Return all fragments for ``request`` in output order."""

        fragments: list[str] = []
        for source in self.plan_sources(request):
            produced = self._scan_source(source)
            log_resolution(
                logging.DEBUG,
                ResolutionEvent.SOURCE_COMPLETE,
                "Source %s (%s) produced %d path(s)",
                source.location,
                source.kind.value,
                len(produced),
                directory=source.location,
                source_kind=source.kind.value,
                count=len(produced),
            )
            fragments.extend(produced)
        return fragments

    def resolve(self, request: ResolutionRequest) -> str:
        """Return the joined search path for ``request``."""

        return self.separator.join(self.collect(request))

    def resolve_paths(
        self,
        include_default: bool,
        include_system: bool,
        explicit_dirs: Sequence[str],
        env_dirs: Sequence[str] | None = None,
    ) -> str:
        """Convenience wrapper building a :class:`ResolutionRequest`."""

        request = ResolutionRequest(
            include_default=include_default,
            include_system=include_system,
            explicit_dirs=tuple(explicit_dirs),
            env_dirs=tuple(env_dirs) if env_dirs is not None else None,
        )
        return self.resolve(request)

    def _scan_source(self, source: Source) -> list[str]:
        if not source.location:
            logger.debug("Ignoring empty %s source", source.kind.value)
            return []
        if source.is_list_file:
            return parse_list_file(
                Path(source.location),
                self.fs,
                filter_existing=self.layout.filter_system_file,
            )
        if source.expands_home:
            return self.resolve_source(source.location)
        return scan_mixed(Path(source.location), self.fs)


def split_search_path(value: str, separator: str = PATH_SEPARATOR) -> tuple[str, ...]:
    """Split a ``PATH``-style ``value`` into directories, dropping empty items."""

    return tuple(part for part in value.split(separator) if part)


__all__ = ["PATH_SEPARATOR", "PathAggregator", "split_search_path"]
