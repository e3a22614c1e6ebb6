"""
Project context models.

Describes the Cordova project a hook runs against, as handed over by the
build-lifecycle runner.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

ANDROID_PLATFORM = "android"

_LEADING_NUMBER = re.compile(r"^\s*(\d+(?:\.\d+)?)")


def parse_version(raw: Any) -> float | None:
    """Read the leading major.minor number of a version string ('9.1.0' -> 9.1)."""
    if raw is None:
        return None
    match = _LEADING_NUMBER.match(str(raw))
    return float(match.group(1)) if match else None


def _section(parent: Any, key: str) -> dict[str, Any]:
    """Return the mapping stored under ``key``; an absent key is an empty mapping."""
    if not isinstance(parent, dict):
        raise TypeError(f"hook context holding '{key}' must be an object")
    if key not in parent:
        return {}
    value = parent[key]
    if not isinstance(value, dict):
        raise TypeError(f"hook context '{key}' must be an object, got {type(value).__name__}")
    return value


class ProjectContext(BaseModel):
    """Read-only metadata of the project being built."""

    project_root: Path | None = Field(default=None, description="Absolute root of the Cordova project")
    plugin_dir: Path | None = Field(default=None, description="Installation directory of the plugin")
    cordova_version: float | None = Field(default=None, description="Version of the Cordova CLI")
    platforms: list[str] = Field(default_factory=list, description="Platforms targeted by the project")

    model_config = {"frozen": True}

    @property
    def has_android(self) -> bool:
        """Check whether the Android platform is part of the project."""
        return ANDROID_PLATFORM in self.platforms

    @classmethod
    def from_hook_context(cls, context: dict[str, Any]) -> ProjectContext:
        """Build a context from the runner's hook context mapping.

        The mapping mirrors the runner's ``context.opts`` layout:
        ``projectRoot``, ``plugin.dir``, ``cordova.version`` and
        ``cordova.platforms``. Absent keys fall back to defaults.

        Raises:
            TypeError: If a section is present but is not an object.
        """
        opts = _section(context, "opts")
        cordova = _section(opts, "cordova")
        plugin = _section(opts, "plugin")

        return cls(
            project_root=opts.get("projectRoot"),
            plugin_dir=plugin.get("dir"),
            cordova_version=parse_version(cordova.get("version")),
            platforms=list(cordova.get("platforms") or []),
        )
