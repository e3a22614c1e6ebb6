"""
Companion runtime bridge.

Application-side access to the signed-in flag stored by the native launcher
integration plugin. Calls are handed to the platform's native ``exec`` by
service and action name; results arrive through the callbacks.
"""

from __future__ import annotations

from typing import Any, Callable

Callback = Callable[..., Any]
NativeExec = Callable[[Callback, Callback, str, str, list[Any]], Any]

SERVICE_NAME = "LauncherIntegrationPlugin"
IS_SIGNED_IN = "isSignedIn"
SET_SIGNED_IN_STATUS = "setSignedInStatus"


class LauncherIntegrationBridge:
    """Thin pass-through to the native launcher integration plugin."""

    def __init__(self, native_exec: NativeExec) -> None:
        self._exec = native_exec

    def is_signed_in(self, success: Callback, failure: Callback) -> Any:
        """Ask for the stored signed-in status; ``success`` receives a bool."""
        return self._exec(success, failure, SERVICE_NAME, IS_SIGNED_IN, [])

    def set_signed_in_status(self, status: bool, success: Callback, failure: Callback) -> Any:
        """Store the signed-in status that decides which intent the launcher sends."""
        return self._exec(success, failure, SERVICE_NAME, SET_SIGNED_IN_STATUS, [status])
