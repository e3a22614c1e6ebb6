"""
Custom exception hierarchy for launcher-integration.

All exceptions inherit from LauncherIntegrationError so the hooks can catch,
log and report every failure the same way. Each exception type carries the
path or class name needed to fix the project by hand.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class LauncherIntegrationError(Exception):
    """Base exception for all launcher-integration errors."""

    message: str
    context: dict[str, Any] = field(default_factory=dict)
    cause: Exception | None = None

    def __str__(self) -> str:
        ctx = f" | context: {self.context}" if self.context else ""
        cause = f" | caused by: {self.cause}" if self.cause else ""
        return f"{self.message}{ctx}{cause}"


@dataclass
class MissingProjectRootError(LauncherIntegrationError):
    """Raised when the hook context does not carry a project root."""


@dataclass
class ProjectConfigError(LauncherIntegrationError):
    """Raised when config.xml does not declare a package identifier."""

    config_path: str = ""


@dataclass
class FileReadError(LauncherIntegrationError):
    """Raised when a project or plugin file cannot be read."""

    path: str = ""

    def __str__(self) -> str:
        return f"Error reading file located at: {self.path} | caused by: {self.cause}"


@dataclass
class FileWriteError(LauncherIntegrationError):
    """Raised when copying or patching a file fails."""

    path: str = ""

    def __str__(self) -> str:
        base = super().__str__()
        return f"{base} | file: {self.path}"


@dataclass
class ManifestParseError(LauncherIntegrationError):
    """Raised when an XML file is malformed."""

    path: str = ""

    def __str__(self) -> str:
        return f"Failed to parse XML file located at: {self.path} | caused by: {self.cause}"


@dataclass
class ActivityNotFoundError(LauncherIntegrationError):
    """Raised when no launch activity can be identified in the manifest.

    The message tells the user which intent filter to edit manually.
    """

    manifest_path: str = ""


@dataclass
class ParentClauseNotFoundError(LauncherIntegrationError):
    """Raised when an activity does not carry the expected extends clause."""

    file_path: str = ""
    expected_parent: str | None = None

    def __str__(self) -> str:
        if self.expected_parent:
            detail = f"File located at: {self.file_path} does not extend {self.expected_parent}"
        else:
            detail = f"Could not find parent class of activity located at: {self.file_path}"
        return f"{self.message}\n{detail}"
