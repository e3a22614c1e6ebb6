"""
launcher-integration: deep-linking support for Cordova Android projects.

Toggles the launcher deep-linking hooks of a Cordova application by patching
its AndroidManifest.xml and the generated Java activity sources.
"""

__version__ = "1.0.0"
__author__ = "Launcher Integration Team"
