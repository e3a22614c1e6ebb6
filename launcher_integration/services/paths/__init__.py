"""Project path resolution."""

from .service import PathResolver, package_path

__all__ = ["PathResolver", "package_path"]
