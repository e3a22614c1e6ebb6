"""AndroidManifest.xml lookup and editing."""

from .locator import (
    ACTION_MAIN,
    ACTION_VIEW,
    CATEGORY_DEFAULT,
    CATEGORY_LAUNCHER,
    MAIN_ACTIVITY_NAME,
    filter_matches,
    find_launch_activity,
)
from .service import ManifestService, create_intent_filter, is_deep_link_filter

__all__ = [
    "ACTION_MAIN",
    "ACTION_VIEW",
    "CATEGORY_DEFAULT",
    "CATEGORY_LAUNCHER",
    "MAIN_ACTIVITY_NAME",
    "filter_matches",
    "find_launch_activity",
    "ManifestService",
    "create_intent_filter",
    "is_deep_link_filter",
]
