"""
Source Service.

Copies the deep-linking activity into a Cordova project and rewrites the
``package`` statement and ``extends`` clause of Java activity sources with
line-oriented regular expressions.
"""

from __future__ import annotations

import re
from pathlib import Path

from ...core.exceptions import FileWriteError, LauncherIntegrationError, ParentClauseNotFoundError
from ...core.files import read_text, write_text
from ...core.logging import get_logger

logger = get_logger(__name__)

PACKAGE_STATEMENT = re.compile(r"package .*;")
PARENT_CLASS = re.compile(r"\bextends\s+([^\s{]+)")


def extends_clause(parent_name: str) -> re.Pattern[str]:
    """Pattern splitting a line around ``extends <parent_name>``.

    Group 1 holds the line up to the parent name, group 2 the rest of it.
    """
    return re.compile(r"(.*\bextends[ \t]+)" + re.escape(parent_name) + r"(?![\w$])(.*)")


class SourceService:
    """Edits Java activity sources in place."""

    def install(self, template_file: Path, destination: Path) -> Path:
        """Copy the activity template to ``destination``."""
        try:
            data = read_text(template_file)
            write_text(destination, data, failure_message="Writing activity copy failed")
        except LauncherIntegrationError as exc:
            raise FileWriteError(
                message="Copy DeepLinkingActivity failed. Please fix error and try again.",
                path=str(destination),
                cause=exc,
            ) from exc
        logger.info("New Activity Extending CordovaActivity created", path=str(destination))
        return destination

    def retarget(self, file_path: Path, package_name: str) -> bool:
        """Replace the first ``package ...;`` statement with ``package_name``.

        A file without a package statement is written back unchanged.

        Returns:
            Whether a package statement was replaced.
        """
        try:
            data = read_text(file_path)
            updated, count = PACKAGE_STATEMENT.subn(
                lambda _: f"package {package_name};", data, count=1
            )
            write_text(file_path, updated, failure_message="Writing activity package failed")
        except LauncherIntegrationError as exc:
            raise FileWriteError(
                message=(
                    "Editing DeepLinkingCordovaActivity package name failed. "
                    "Please do so manually or fix error and try again."
                ),
                path=str(file_path),
                cause=exc,
            ) from exc

        if count:
            logger.info("New Activity package adjusted to match project package", package=package_name)
        else:
            logger.warning("No package statement found, activity left unchanged", path=str(file_path))
        return bool(count)

    def relink(self, file_path: Path, expected_parent: str, new_parent: str) -> None:
        """Make the class in ``file_path`` extend ``new_parent`` instead of ``expected_parent``.

        Nothing is written when the file does not extend ``expected_parent``.

        Raises:
            ParentClauseNotFoundError: If the expected extends clause is missing.
            FileReadError: If the file cannot be read.
            FileWriteError: If the patched file cannot be written.
        """
        data = read_text(file_path)
        pattern = extends_clause(expected_parent)
        if not pattern.search(data):
            raise ParentClauseNotFoundError(
                message=(
                    "Editing MainActivity parent class failed. Please do so manually by "
                    f"changing parent class to {new_parent} or fix error and try again."
                ),
                file_path=str(file_path),
                expected_parent=expected_parent,
            )

        updated = pattern.sub(lambda m: m.group(1) + new_parent + m.group(2), data, count=1)
        write_text(
            file_path,
            updated,
            failure_message=(
                "Editing MainActivity parent class failed. Please do so manually by "
                f"changing parent class to {new_parent} or fix error and try again."
            ),
        )
        logger.info("Parent class changed", path=str(file_path), parent=new_parent)

    def parent_class_of(self, file_path: Path) -> str:
        """Return the class name following the first ``extends`` in the file."""
        data = read_text(file_path)
        match = PARENT_CLASS.search(data)
        if match is None:
            raise ParentClauseNotFoundError(
                message="Recovering the original parent class failed",
                file_path=str(file_path),
            )
        return match.group(1)

    def remove(self, file_path: Path) -> bool:
        """Delete ``file_path``; failures are logged, not raised.

        Returns:
            Whether the file was deleted.
        """
        try:
            Path(file_path).unlink()
        except OSError as exc:
            logger.warning("Failed to delete file", path=str(file_path), error=str(exc))
            return False
        logger.info("Deleted file", path=str(file_path))
        return True
