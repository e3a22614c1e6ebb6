"""Test configuration for launcher-integration."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from launcher_integration.models.project import ProjectContext

ANDROID_NS = "http://schemas.android.com/apk/res/android"

LAUNCHER_FILTER = """            <intent-filter>
                <action android:name="android.intent.action.MAIN" />
                <category android:name="android.intent.category.LAUNCHER" />
            </intent-filter>"""

PLUGIN_ACTIVITY_TEMPLATE = """package com.amazon.cordova.plugins.launcher;

import android.os.Bundle;

import org.apache.cordova.CordovaActivity;

public class DeepLinkingCordovaActivity extends CordovaActivity {
    static final String TAG = "DeepLinkingCordovaActivity";

    @Override
    public void onCreate(Bundle savedInstanceState) {
        super.onCreate(savedInstanceState);
    }
}
"""

MAIN_ACTIVITY_TEMPLATE = """package {package};

import android.os.Bundle;
import org.apache.cordova.*;

public class {name} extends CordovaActivity
{{
    @Override
    public void onCreate(Bundle savedInstanceState)
    {{
        super.onCreate(savedInstanceState);
        loadUrl(launchUrl);
    }}
}}
"""


def activity_xml(name: str, body: str = LAUNCHER_FILTER) -> str:
    """Render one <activity> element for a manifest."""
    return f'        <activity android:name="{name}">\n{body}\n        </activity>'


def manifest_xml(*activities: str, package: str = "com.example.app") -> str:
    """Render an AndroidManifest.xml with the given <activity> elements."""
    body = "\n".join(activities)
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        f'<manifest xmlns:android="{ANDROID_NS}" package="{package}" android:versionCode="1">\n'
        '    <application android:label="@string/app_name">\n'
        f"{body}\n"
        "    </application>\n"
        "</manifest>\n"
    )


def config_xml(package: str = "com.example.app") -> str:
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        f'<widget id="{package}" version="1.0.0" xmlns="http://www.w3.org/ns/widgets">\n'
        "    <name>Example</name>\n"
        "</widget>\n"
    )


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests.

    Yields:
        Path: A Path object pointing to the temporary directory.
            The directory is automatically cleaned up after the test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


class CordovaProject:
    """Synthetic Cordova project on disk.

    Lays out config.xml, the Android manifest and the main activity source in
    either the legacy or the Gradle layout, plus a plugin directory holding the
    deep-linking activity template.
    """

    def __init__(
        self,
        root: Path,
        layout: str = "gradle",
        package: str = "com.example.app",
        manifest: str | None = None,
        main_activity: str = "MainActivity",
        platforms: tuple[str, ...] = ("android", "ios"),
    ) -> None:
        self.root = root / "project"
        self.plugin_dir = root / "plugin"
        self.package = package
        self.platforms = list(platforms)

        android_dir = self.root / "platforms" / "android"
        package_dirs = package.split(".")
        if layout == "legacy":
            self.manifest_path = android_dir / "AndroidManifest.xml"
            self.source_dir = android_dir.joinpath("src", *package_dirs)
        else:
            self.manifest_path = android_dir / "app" / "src" / "main" / "AndroidManifest.xml"
            self.source_dir = android_dir.joinpath("app", "src", "main", "java", *package_dirs)

        self.manifest_path.parent.mkdir(parents=True, exist_ok=True)
        self.source_dir.mkdir(parents=True, exist_ok=True)

        (self.root / "config.xml").write_text(config_xml(package), encoding="utf-8")
        self.manifest_path.write_text(
            manifest if manifest is not None else manifest_xml(activity_xml(main_activity), package=package),
            encoding="utf-8",
        )
        self.main_activity_path = self.source_dir / f"{main_activity}.java"
        self.main_activity_path.write_text(
            MAIN_ACTIVITY_TEMPLATE.format(package=package, name=main_activity), encoding="utf-8"
        )

        template_dir = self.plugin_dir.joinpath("src", "com", "amazon", "cordova", "plugins", "launcher")
        template_dir.mkdir(parents=True, exist_ok=True)
        self.template_path = template_dir / "DeepLinkingCordovaActivity.java"
        self.template_path.write_text(PLUGIN_ACTIVITY_TEMPLATE, encoding="utf-8")

        self.installed_activity_path = self.source_dir / "DeepLinkingCordovaActivity.java"

    @property
    def context(self) -> ProjectContext:
        return ProjectContext(
            project_root=self.root,
            plugin_dir=self.plugin_dir,
            cordova_version=9.0,
            platforms=self.platforms,
        )

    def snapshot(self) -> dict[str, str]:
        """Map every file under the project root to its content."""
        return {
            str(path.relative_to(self.root)): path.read_text(encoding="utf-8")
            for path in sorted(self.root.rglob("*"))
            if path.is_file()
        }


@pytest.fixture
def make_project(temp_dir):
    """Factory fixture building a CordovaProject inside ``temp_dir``."""

    def factory(**kwargs) -> CordovaProject:
        return CordovaProject(temp_dir, **kwargs)

    return factory


@pytest.fixture
def project(make_project) -> CordovaProject:
    """Gradle-layout project with a single MainActivity."""
    return make_project()
