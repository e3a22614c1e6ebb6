"""
Install/uninstall hook orchestration for launcher-integration.

Each hook is a fixed sequence of file edits with no retry and no cleanup of
partially applied changes. The project tree itself is the only state:
deep linking is enabled when the plugin activity file exists and the main
activity extends it.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from ..core.config import Config, get_config
from ..core.exceptions import ActivityNotFoundError, LauncherIntegrationError, ProjectConfigError
from ..core.logging import bind_context, clear_context, get_logger
from ..core.types import HookResult, HookStatus
from ..models.project import ProjectContext
from ..services.manifest import ManifestService
from ..services.paths import PathResolver, package_path
from ..services.source import SourceService
from ..services.xml_document import XmlDocumentService

logger = get_logger(__name__)

ANDROID_ABSENT = "Android not part of cordova app"
MAIN_ACTIVITY_MISSING = (
    "Could not find a Main Activity. Follow online documentation to edit your "
    "launch Activity to enable deep linking."
)


@dataclass(frozen=True)
class ActivityLocations:
    """Where the activity sources of one project live."""

    package_name: str
    source_root: Path
    main_activity: Path
    plugin_activity: Path


def simple_class_name(activity_name: str) -> str:
    """Reduce '.MainActivity' or 'com.example.MainActivity' to 'MainActivity'."""
    return activity_name.rsplit(".", 1)[-1]


class DeepLinkingHooks:
    """Enables and disables deep linking in a Cordova Android project."""

    def __init__(
        self,
        config: Config | None = None,
        paths: PathResolver | None = None,
        manifest: ManifestService | None = None,
        source: SourceService | None = None,
    ) -> None:
        self.config = config or get_config()
        xml = XmlDocumentService(indent=self.config.manifest_indent)
        self.paths = paths or PathResolver(xml)
        self.manifest = manifest or ManifestService(xml)
        self.source = source or SourceService()

    def _run(
        self,
        hook_name: str,
        project: ProjectContext,
        body: Callable[[ProjectContext], list[Path]],
    ) -> HookResult:
        """Run ``body`` behind the Android platform guard and report the outcome."""
        result = HookResult(hook_name=hook_name, status=HookStatus.COMPLETED)
        bind_context(hook=hook_name)
        try:
            if not project.has_android:
                logger.error(ANDROID_ABSENT, platforms=project.platforms)
                return result.mark_skipped(ANDROID_ABSENT)
            try:
                touched = body(project)
            except LauncherIntegrationError as exc:
                logger.error("Hook failed", error=str(exc))
                return result.mark_failed(str(exc))
            logger.info("Hook completed", files=[str(p) for p in touched])
            return result.mark_completed(touched)
        finally:
            clear_context()

    def locate_activities(self, project: ProjectContext) -> ActivityLocations:
        """Resolve the package, source directory and activity files of ``project``."""
        lookup = self.manifest.launch_activity_name(self.paths.manifest_path(project))
        if not lookup.found:
            raise ActivityNotFoundError(message=MAIN_ACTIVITY_MISSING, context={"reason": lookup.reason})
        main_activity_name = simple_class_name(lookup.value)

        package_name = self.paths.package_identifier(project)
        source_root = self.paths.source_root(project, package_path(package_name))
        return ActivityLocations(
            package_name=package_name,
            source_root=source_root,
            main_activity=source_root / f"{main_activity_name}.java",
            plugin_activity=source_root / self.config.template_file_name,
        )

    def template_path(self, project: ProjectContext) -> Path:
        """Location of the activity template shipped with the plugin."""
        if not project.plugin_dir:
            raise ProjectConfigError(message="No plugin directory in hook context")
        return Path(project.plugin_dir).joinpath(
            *self.config.template_path_parts, self.config.template_file_name
        )

    def enable(self, project: ProjectContext) -> HookResult:
        """Copy the plugin activity into the project and make the main activity extend it."""

        def body(project: ProjectContext) -> list[Path]:
            locations = self.locate_activities(project)
            template = self.template_path(project)

            self.source.install(template, locations.plugin_activity)
            self.source.retarget(locations.plugin_activity, locations.package_name)
            self.source.relink(
                locations.main_activity,
                self.config.original_parent_class,
                self.config.plugin_activity_name,
            )
            return [locations.plugin_activity, locations.main_activity]

        return self._run("enable", project, body)

    def disable(self, project: ProjectContext) -> HookResult:
        """Delete the plugin activity and restore the main activity's parent class.

        The original parent class is read from the plugin activity before it
        is deleted, so a missing plugin activity stops the hook before the
        main activity is touched.
        """

        def body(project: ProjectContext) -> list[Path]:
            locations = self.locate_activities(project)

            original_parent = self.source.parent_class_of(locations.plugin_activity)
            self.source.remove(locations.plugin_activity)
            self.source.relink(
                locations.main_activity,
                self.config.plugin_activity_name,
                original_parent,
            )
            return [locations.plugin_activity, locations.main_activity]

        return self._run("disable", project, body)

    def add_intent_filter(self, project: ProjectContext) -> HookResult:
        """Add the deep-linking intent filter to the launch activity."""

        def body(project: ProjectContext) -> list[Path]:
            manifest_path = self.paths.manifest_path(project)
            self.manifest.add_intent_filter(manifest_path)
            return [manifest_path]

        return self._run("add_intent_filter", project, body)

    def remove_intent_filter(self, project: ProjectContext) -> HookResult:
        """Remove deep-linking shaped intent filters from the launch activity."""

        def body(project: ProjectContext) -> list[Path]:
            manifest_path = self.paths.manifest_path(project)
            self.manifest.remove_intent_filter(manifest_path)
            return [manifest_path]

        return self._run("remove_intent_filter", project, body)


def enable_deep_linking(project: ProjectContext, config: Config | None = None) -> HookResult:
    """Run the enable hook with default services."""
    return DeepLinkingHooks(config).enable(project)


def disable_deep_linking(project: ProjectContext, config: Config | None = None) -> HookResult:
    """Run the disable hook with default services."""
    return DeepLinkingHooks(config).disable(project)


def add_intent_filter(project: ProjectContext, config: Config | None = None) -> HookResult:
    return DeepLinkingHooks(config).add_intent_filter(project)


def remove_intent_filter(project: ProjectContext, config: Config | None = None) -> HookResult:
    return DeepLinkingHooks(config).remove_intent_filter(project)
