"""Hook orchestration for launcher-integration."""

from .hooks import (
    ActivityLocations,
    DeepLinkingHooks,
    add_intent_filter,
    disable_deep_linking,
    enable_deep_linking,
    remove_intent_filter,
)

__all__ = [
    "ActivityLocations",
    "DeepLinkingHooks",
    "add_intent_filter",
    "disable_deep_linking",
    "enable_deep_linking",
    "remove_intent_filter",
]
