"""
Summary: Package marker for resolution adapters.
Why: Keep adapter exports together for easy discovery.
"""

from .filesystem import LocalFileSystemGateway

__all__ = ["LocalFileSystemGateway"]
