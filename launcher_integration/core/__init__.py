"""Core infrastructure components for launcher-integration."""

from .config import Config, get_config
from .exceptions import (
    ActivityNotFoundError,
    FileReadError,
    FileWriteError,
    LauncherIntegrationError,
    ManifestParseError,
    MissingProjectRootError,
    ParentClauseNotFoundError,
    ProjectConfigError,
)
from .logging import get_logger, setup_logging
from .types import HookResult, HookStatus, Lookup

__all__ = [
    "Config",
    "get_config",
    "ActivityNotFoundError",
    "FileReadError",
    "FileWriteError",
    "LauncherIntegrationError",
    "ManifestParseError",
    "MissingProjectRootError",
    "ParentClauseNotFoundError",
    "ProjectConfigError",
    "get_logger",
    "setup_logging",
    "HookResult",
    "HookStatus",
    "Lookup",
]
