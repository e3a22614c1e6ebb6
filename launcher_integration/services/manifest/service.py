"""
Manifest Service.

Adds and removes the deep-linking intent filter (VIEW action, DEFAULT category,
no data element) on the launch activity of AndroidManifest.xml.

Removal matches filters by shape only: every VIEW/DEFAULT filter without a data
element is removed, including ones the plugin did not add.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from ...core.exceptions import ActivityNotFoundError
from ...core.logging import get_logger
from ...core.types import Lookup
from ..xml_document import ANDROID_NAME, XmlDocumentService
from .locator import ACTION_VIEW, CATEGORY_DEFAULT, filter_matches, find_launch_activity

logger = get_logger(__name__)

ADD_REMEDIATION = (
    "Could not find MainActivity, please add an intent filter with action "
    f"{ACTION_VIEW} and category {CATEGORY_DEFAULT} to the launch activity"
)
REMOVE_REMEDIATION = (
    "Could not find MainActivity, to finish removal process please remove the intent "
    f"filter with action {ACTION_VIEW} and category {CATEGORY_DEFAULT} from the launch activity"
)


def create_intent_filter() -> ET.Element:
    """Build the deep-linking intent filter element."""
    intent_filter = ET.Element("intent-filter")
    action = ET.SubElement(intent_filter, "action")
    action.set(ANDROID_NAME, ACTION_VIEW)
    category = ET.SubElement(intent_filter, "category")
    category.set(ANDROID_NAME, CATEGORY_DEFAULT)
    return intent_filter


def is_deep_link_filter(intent_filter: ET.Element) -> bool:
    return filter_matches(intent_filter, ACTION_VIEW, CATEGORY_DEFAULT)


class ManifestService:
    """Edits the launch activity of an AndroidManifest.xml file.

    Each call parses the file, mutates the tree in memory and writes the file
    once at the end, so a failure leaves the file untouched.
    """

    def __init__(self, xml: XmlDocumentService | None = None) -> None:
        self.xml = xml or XmlDocumentService()

    def launch_activity_name(self, manifest_path: Path) -> Lookup[str]:
        """Look up the android:name of the launch activity."""
        lookup = find_launch_activity(self.xml.parse(manifest_path))
        if not lookup.found:
            return Lookup.miss(lookup.reason)
        name = lookup.value.get(ANDROID_NAME)
        if not name:
            return Lookup.miss("Launch activity has no android:name attribute")
        return Lookup.hit(name, reason=lookup.reason)

    def _require_launch_activity(
        self, tree: ET.ElementTree, manifest_path: Path, remediation: str
    ) -> ET.Element:
        lookup = find_launch_activity(tree)
        if not lookup.found:
            raise ActivityNotFoundError(
                message=remediation,
                context={"reason": lookup.reason},
                manifest_path=str(manifest_path),
            )
        logger.debug("Launch activity found", rule=lookup.reason, name=lookup.value.get(ANDROID_NAME))
        return lookup.value

    def add_intent_filter(self, manifest_path: Path) -> ET.Element:
        """Append the deep-linking intent filter to the launch activity.

        No duplicate check is made; calling this twice adds two filters.

        Returns:
            The appended intent-filter element.
        """
        tree = self.xml.parse(manifest_path)
        activity = self._require_launch_activity(tree, manifest_path, ADD_REMEDIATION)

        intent_filter = create_intent_filter()
        logger.info("Adding intent-filter to Android Manifest", manifest=str(manifest_path))
        activity.append(intent_filter)

        self.xml.write(tree, manifest_path)
        return intent_filter

    def remove_intent_filter(self, manifest_path: Path) -> int:
        """Remove every deep-linking shaped intent filter from the launch activity.

        Returns:
            Number of intent filters removed.
        """
        tree = self.xml.parse(manifest_path)
        activity = self._require_launch_activity(tree, manifest_path, REMOVE_REMEDIATION)

        removed = 0
        for intent_filter in activity.findall("intent-filter"):
            if is_deep_link_filter(intent_filter):
                logger.info("Removing intent-filter from Android Manifest", manifest=str(manifest_path))
                activity.remove(intent_filter)
                removed += 1

        self.xml.write(tree, manifest_path)
        return removed
