"""
Core type definitions for launcher-integration.

Provides the tagged lookup result used by searches that may legitimately find
nothing, and the result model every hook returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Generic, TypeVar

from pydantic import BaseModel, Field


T = TypeVar("T")


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Outcome of a search: either a found value or the reason nothing matched.

    Absence is an expected answer here, so it is returned rather than raised.
    """

    value: T | None = None
    reason: str = ""

    @property
    def found(self) -> bool:
        return self.value is not None

    @classmethod
    def hit(cls, value: T, reason: str = "") -> Lookup[T]:
        """Create a found result."""
        return cls(value=value, reason=reason)

    @classmethod
    def miss(cls, reason: str) -> Lookup[T]:
        """Create a not-found result."""
        return cls(value=None, reason=reason)


class HookStatus(str, Enum):
    """Status of a hook run."""

    COMPLETED = "completed"
    FAILED = "failed"
    SKIPPED = "skipped"


class HookResult(BaseModel):
    """Result of one install/uninstall hook execution."""

    hook_name: str = Field(description="Name of the hook operation")
    status: HookStatus = Field(description="Execution status")
    message: str | None = Field(default=None, description="Failure or skip reason")
    touched_files: list[Path] = Field(default_factory=list, description="Files written or deleted")
    started_at: datetime = Field(default_factory=datetime.now)
    completed_at: datetime | None = Field(default=None)

    @property
    def success(self) -> bool:
        """A skipped hook is not a failure."""
        return self.status != HookStatus.FAILED

    def mark_completed(self, touched_files: list[Path]) -> HookResult:
        """Mark hook as successfully completed."""
        self.status = HookStatus.COMPLETED
        self.touched_files = touched_files
        self.completed_at = datetime.now()
        return self

    def mark_failed(self, error: str) -> HookResult:
        """Mark hook as failed."""
        self.status = HookStatus.FAILED
        self.message = error
        self.completed_at = datetime.now()
        return self

    def mark_skipped(self, reason: str) -> HookResult:
        """Mark hook as skipped."""
        self.status = HookStatus.SKIPPED
        self.message = reason
        self.completed_at = datetime.now()
        return self
