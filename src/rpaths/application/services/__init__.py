"""Application services shared by user interfaces."""

from .resolve_service import ENV_PATHS_DIR, ResolvePathsService

__all__ = ["ENV_PATHS_DIR", "ResolvePathsService"]
