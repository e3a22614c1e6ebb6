"""Launch activity lookup in a parsed AndroidManifest.xml."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from ...core.types import Lookup
from ..xml_document import ANDROID_NAME

MAIN_ACTIVITY_NAME = "MainActivity"

ACTION_MAIN = "android.intent.action.MAIN"
ACTION_VIEW = "android.intent.action.VIEW"
CATEGORY_LAUNCHER = "android.intent.category.LAUNCHER"
CATEGORY_DEFAULT = "android.intent.category.DEFAULT"


def find_named(parent: ET.Element, tag: str, name: str) -> ET.Element | None:
    """Return the first ``tag`` child of ``parent`` whose android:name is ``name``."""
    for child in parent.findall(tag):
        if child.get(ANDROID_NAME) == name:
            return child
    return None


def filter_matches(intent_filter: ET.Element, action: str, category: str) -> bool:
    """Check that an intent filter has ``action`` and ``category`` and no data element."""
    return (
        find_named(intent_filter, "action", action) is not None
        and find_named(intent_filter, "category", category) is not None
        and intent_filter.find("data") is None
    )


def find_launch_activity(manifest: ET.ElementTree) -> Lookup[ET.Element]:
    """Find the activity the application is launched with.

    Rules, first match wins:

    1. the activity named ``MainActivity``;
    2. the only activity, when the manifest declares exactly one;
    3. the first activity (document order) with a MAIN/LAUNCHER intent
       filter that has no data element.

    The returned element is a live node of ``manifest``.
    """
    activities = manifest.findall("*/activity")

    named = next((a for a in activities if a.get(ANDROID_NAME) == MAIN_ACTIVITY_NAME), None)
    if named is not None:
        return Lookup.hit(named, reason=f"activity named {MAIN_ACTIVITY_NAME}")

    if len(activities) == 1:
        return Lookup.hit(activities[0], reason="only activity in manifest")

    for activity in activities:
        for intent_filter in activity.findall("intent-filter"):
            if filter_matches(intent_filter, ACTION_MAIN, CATEGORY_LAUNCHER):
                return Lookup.hit(activity, reason="activity with launcher intent filter")

    return Lookup.miss(
        f"No activity named {MAIN_ACTIVITY_NAME}, no single activity and no activity "
        f"with a {ACTION_MAIN}/{CATEGORY_LAUNCHER} intent filter among {len(activities)} activities"
    )
