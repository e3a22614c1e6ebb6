"""
Path Resolution Service.

Locates the AndroidManifest.xml, the package source directory and config.xml
of a Cordova project. Two Android layouts exist: the legacy one with the
manifest and sources directly under ``platforms/android``, and the Gradle one
that nests them under ``platforms/android/app/src/main``.
"""

from __future__ import annotations

from pathlib import Path

from ...core.exceptions import MissingProjectRootError, ProjectConfigError
from ...core.logging import get_logger
from ...models.project import ProjectContext
from ..xml_document import XmlDocumentService

logger = get_logger(__name__)

MANIFEST_NAME = "AndroidManifest.xml"
CONFIG_NAME = "config.xml"

ANDROID_PLATFORM_DIR = ("platforms", "android")
GRADLE_MAIN_DIR = ("app", "src", "main")
LEGACY_SOURCE_DIR = ("src",)
GRADLE_SOURCE_DIR = ("app", "src", "main", "java")


def package_path(package_name: str) -> list[str]:
    """Split a dotted package identifier into directory names."""
    return package_name.split(".")


class PathResolver:
    """Derives project file locations from the hook context.

    Every method re-checks the file system; nothing is cached between calls.
    """

    def __init__(self, xml: XmlDocumentService | None = None) -> None:
        self.xml = xml or XmlDocumentService()

    def project_root(self, project: ProjectContext) -> Path:
        """Return the project root or raise MissingProjectRootError."""
        if not project.project_root:
            raise MissingProjectRootError(message="No project root")
        return Path(project.project_root)

    def android_dir(self, project: ProjectContext) -> Path:
        """Directory of the Android platform inside the project."""
        return self.project_root(project).joinpath(*ANDROID_PLATFORM_DIR)

    def manifest_path(self, project: ProjectContext) -> Path:
        """Locate AndroidManifest.xml.

        The legacy location wins when its manifest exists; otherwise the
        Gradle location is returned without checking that it exists.
        """
        android_dir = self.android_dir(project)
        legacy = android_dir / MANIFEST_NAME
        if legacy.exists():
            logger.debug("Using legacy manifest layout", path=str(legacy))
            return legacy
        return android_dir.joinpath(*GRADLE_MAIN_DIR, MANIFEST_NAME)

    def source_root(self, project: ProjectContext, package_dirs: list[str]) -> Path:
        """Locate the directory holding the sources of ``package_dirs``.

        Uses ``src/<package>`` when that directory exists, else the Gradle
        ``app/src/main/java/<package>`` directory.
        """
        android_dir = self.android_dir(project)
        legacy = android_dir.joinpath(*LEGACY_SOURCE_DIR, *package_dirs)
        if legacy.exists():
            logger.debug("Using legacy source layout", path=str(legacy))
            return legacy
        return android_dir.joinpath(*GRADLE_SOURCE_DIR, *package_dirs)

    def config_path(self, project: ProjectContext) -> Path:
        """Location of the project's config.xml."""
        return self.project_root(project) / CONFIG_NAME

    def package_identifier(self, project: ProjectContext) -> str:
        """Read the package identifier from the ``id`` attribute of config.xml.

        The value is returned verbatim.
        """
        path = self.config_path(project)
        root = self.xml.parse(path).getroot()
        package_name = root.get("id")
        if package_name is None:
            raise ProjectConfigError(
                message=f"No package id declared in {path}",
                config_path=str(path),
            )
        return package_name
