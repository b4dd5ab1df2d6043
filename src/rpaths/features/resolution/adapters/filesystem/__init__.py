"""Filesystem adapters for the resolution feature."""

from .local import LocalFileSystemGateway

__all__ = ["LocalFileSystemGateway"]
