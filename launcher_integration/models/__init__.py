"""Data models for launcher-integration."""

from .project import ANDROID_PLATFORM, ProjectContext, parse_version

__all__ = ["ANDROID_PLATFORM", "ProjectContext", "parse_version"]
