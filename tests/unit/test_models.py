"""Unit tests for core models, configuration and result types."""

import pytest
from pathlib import Path

from launcher_integration.core.config import Config
from launcher_integration.core.exceptions import FileWriteError, LauncherIntegrationError
from launcher_integration.core.types import HookResult, HookStatus, Lookup
from launcher_integration.models.project import ProjectContext, parse_version


class TestProjectContext:
    """Tests for the project context model."""

    def test_from_hook_context(self):
        """Test building a context from the runner's hook context.

        Verifies that root, plugin directory, version and platforms are
        read from their nested locations.
        """
        context = ProjectContext.from_hook_context({
            "opts": {
                "projectRoot": "/work/app",
                "plugin": {"dir": "/work/app/plugins/launcher"},
                "cordova": {"version": "9.1.0", "platforms": ["android", "ios"]},
            }
        })
        assert context.project_root == Path("/work/app")
        assert context.plugin_dir == Path("/work/app/plugins/launcher")
        assert context.cordova_version == 9.1
        assert context.platforms == ["android", "ios"]
        assert context.has_android

    def test_from_empty_hook_context(self):
        context = ProjectContext.from_hook_context({})
        assert context.project_root is None
        assert context.plugin_dir is None
        assert context.cordova_version is None
        assert not context.has_android

    @pytest.mark.parametrize("context", [
        {"opts": None},
        {"opts": {"cordova": None}},
        {"opts": {"plugin": "/work/app/plugins/launcher"}},
        ["opts"],
    ])
    def test_from_malformed_hook_context(self, context):
        """Test that sections present with the wrong type are rejected."""
        with pytest.raises(TypeError):
            ProjectContext.from_hook_context(context)

    def test_has_android(self):
        assert not ProjectContext(platforms=["ios"]).has_android
        assert ProjectContext(platforms=["android"]).has_android

    @pytest.mark.parametrize(
        "raw, expected",
        [("9.0.0", 9.0), ("10", 10.0), (8.1, 8.1), ("v9", None), (None, None), ("", None)],
    )
    def test_parse_version(self, raw, expected):
        assert parse_version(raw) == expected


class TestConfig:
    """Tests for configuration defaults and environment overrides."""

    def test_defaults(self):
        config = Config()
        assert config.plugin_activity_name == "DeepLinkingCordovaActivity"
        assert config.original_parent_class == "CordovaActivity"
        assert config.manifest_indent == 4
        assert config.template_file_name == "DeepLinkingCordovaActivity.java"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("LAUNCHER_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LAUNCHER_MANIFEST_INDENT", "2")
        config = Config.from_env()
        assert config.log_level == "DEBUG"
        assert config.manifest_indent == 2

    def test_rejects_negative_indent(self):
        with pytest.raises(ValueError):
            Config(manifest_indent=-1)


class TestLookup:
    """Tests for the tagged lookup result."""

    def test_hit(self):
        lookup = Lookup.hit("MainActivity", reason="named")
        assert lookup.found
        assert lookup.value == "MainActivity"

    def test_miss(self):
        lookup = Lookup.miss("nothing matched")
        assert not lookup.found
        assert lookup.value is None
        assert lookup.reason == "nothing matched"


class TestHookResult:
    """Tests for hook result transitions."""

    def test_mark_completed(self):
        result = HookResult(hook_name="enable", status=HookStatus.COMPLETED)
        result.mark_completed([Path("a.java")])
        assert result.success
        assert result.touched_files == [Path("a.java")]
        assert result.completed_at is not None

    def test_mark_failed(self):
        result = HookResult(hook_name="enable", status=HookStatus.COMPLETED).mark_failed("boom")
        assert not result.success
        assert result.message == "boom"

    def test_mark_skipped_is_success(self):
        result = HookResult(hook_name="enable", status=HookStatus.COMPLETED).mark_skipped("no android")
        assert result.status == HookStatus.SKIPPED
        assert result.success


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_base_str_includes_context_and_cause(self):
        error = LauncherIntegrationError(message="failed", context={"k": "v"}, cause=OSError("disk"))
        text = str(error)
        assert "failed" in text
        assert "'k': 'v'" in text
        assert "disk" in text

    def test_write_error_names_file(self):
        error = FileWriteError(message="copy failed", path="/tmp/x.java")
        assert isinstance(error, LauncherIntegrationError)
        assert "/tmp/x.java" in str(error)
