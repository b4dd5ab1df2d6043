"""Application service for resolving search paths.

This layer centralizes construction of the aggregator and the translation of
boundary options (flags, environment) into a resolution request, so the CLI
only deals with argument parsing and output.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping, Sequence
from typing import Final, final

from rpaths.config import Config
from rpaths.features.resolution import (
    MissingEnvironmentError,
    PathAggregator,
    ResolutionRequest,
    split_search_path,
)
from rpaths.features.resolution.adapters import LocalFileSystemGateway
from rpaths.features.resolution.usecases.ports import FileSystemGateway
from rpaths.platform.logging import logger

ENV_PATHS_DIR: Final[str] = "RPATHS_DIR"


@final
class ResolvePathsService:
    """Application service that assembles the final search-path string."""

    def __init__(
        self,
        *,
        config: Config | None = None,
        env: Mapping[str, str] | None = None,
        filesystem_factory: Callable[[], FileSystemGateway] | None = None,
    ) -> None:
        """Create a service with overridable configuration and infrastructure.

        Tests can inject an environment mapping and a fake filesystem while
        production code relies on ``os.environ`` and the local adapter.
        """
        self.config = config or Config()
        self.env = env if env is not None else os.environ
        self._filesystem_factory = filesystem_factory or LocalFileSystemGateway

    def build_aggregator(self) -> PathAggregator:
        return PathAggregator(
            self._filesystem_factory(),
            layout=self.config.layout(),
            separator=self.config.separator,
        )

    def build_request(
        self,
        *,
        paths_dirs: Sequence[str] = (),
        system: bool = False,
        no_default: bool = False,
        use_env: bool = False,
    ) -> ResolutionRequest:
        """Translate boundary options into a :class:`ResolutionRequest`.

        Raises:
            MissingEnvironmentError: ``use_env`` is set but ``RPATHS_DIR`` is not.
        """
        env_dirs: tuple[str, ...] | None = None
        if use_env:
            value = self.env.get(ENV_PATHS_DIR)
            if value is None:
                raise MissingEnvironmentError(ENV_PATHS_DIR)
            env_dirs = split_search_path(value, self.config.separator)
            logger.debug("Using %s=%s", ENV_PATHS_DIR, value)

        return ResolutionRequest(
            include_default=not (no_default or use_env),
            include_system=system,
            explicit_dirs=tuple(paths_dirs),
            env_dirs=env_dirs,
        )

    def resolve(self, request: ResolutionRequest) -> str:
        return self.build_aggregator().resolve(request)


__all__ = ["ENV_PATHS_DIR", "ResolvePathsService"]
