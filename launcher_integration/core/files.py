"""Text file helpers that wrap OS errors with the offending path.

Line endings are passed through untouched in both directions, so a file
written with CRLF keeps CRLF after a read/modify/write cycle.
"""

from __future__ import annotations

from pathlib import Path

from .exceptions import FileReadError, FileWriteError


def read_text(path: Path) -> str:
    """Read a UTF-8 text file, raising FileReadError on any OS error."""
    try:
        with Path(path).open(encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(
            message=f"Error reading file located at: {path}",
            path=str(path),
            cause=exc,
        ) from exc


def write_text(path: Path, content: str, failure_message: str) -> None:
    """Write a UTF-8 text file, raising FileWriteError with ``failure_message``."""
    try:
        Path(path).write_text(content, encoding="utf-8", newline="")
    except OSError as exc:
        raise FileWriteError(message=failure_message, path=str(path), cause=exc) from exc
