"""
Configuration management for launcher-integration.

Provides centralized, type-safe configuration with environment variable overrides
and defaults matching the plugin's shipped activity.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load .env file if it exists (looks in cwd and parent directories)
load_dotenv()


class Config(BaseModel):
    """Root configuration for launcher-integration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    plugin_activity_name: str = Field(
        default="DeepLinkingCordovaActivity",
        description="Class name of the activity copied into the project",
    )
    original_parent_class: str = Field(
        default="CordovaActivity",
        description="Parent class the main activity extends before enabling",
    )
    manifest_indent: int = Field(default=4, ge=0, description="Indent width of the written manifest")
    template_path_parts: tuple[str, ...] = Field(
        default=("src", "com", "amazon", "cordova", "plugins", "launcher"),
        description="Directory of the activity template inside the plugin",
    )

    model_config = {"extra": "ignore"}

    @property
    def template_file_name(self) -> str:
        """File name of the activity template and of its installed copy."""
        return f"{self.plugin_activity_name}.java"

    @classmethod
    def from_env(cls) -> Config:
        """Create configuration from environment variables."""
        return cls(
            log_level=os.environ.get("LAUNCHER_LOG_LEVEL", "INFO"),  # type: ignore
            plugin_activity_name=os.environ.get("LAUNCHER_ACTIVITY_NAME", "DeepLinkingCordovaActivity"),
            original_parent_class=os.environ.get("LAUNCHER_ORIGINAL_PARENT", "CordovaActivity"),
            manifest_indent=int(os.environ.get("LAUNCHER_MANIFEST_INDENT", "4")),
        )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config.from_env()
