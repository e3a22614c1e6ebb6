"""Unit tests for the command line entry points."""

import json

import pytest
from typer.testing import CliRunner

from launcher_integration import cli
from launcher_integration.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep the CLI from reconfiguring global logging during tests."""
    monkeypatch.setattr(cli, "setup_logging", lambda config=None: None)


def project_args(project):
    return [
        "--project-root", str(project.root),
        "--plugin-dir", str(project.plugin_dir),
        "--platform", "android",
    ]


class TestCli:
    """Tests for the CLI commands."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "launcher-integration v" in result.output

    def test_enable_and_disable(self, project):
        result = runner.invoke(app, ["enable", *project_args(project)])
        assert result.exit_code == 0, result.output
        assert project.installed_activity_path.exists()

        result = runner.invoke(app, ["disable", *project_args(project)])
        assert result.exit_code == 0, result.output
        assert not project.installed_activity_path.exists()

    def test_context_file(self, project, temp_dir):
        """Test reading the project from a runner hook context file."""
        context_file = temp_dir / "context.json"
        context_file.write_text(json.dumps({
            "opts": {
                "projectRoot": str(project.root),
                "plugin": {"dir": str(project.plugin_dir)},
                "cordova": {"version": "9.0.0", "platforms": ["android"]},
            }
        }), encoding="utf-8")

        result = runner.invoke(app, ["add-filter", "--context-file", str(context_file)])

        assert result.exit_code == 0, result.output
        assert "android.intent.action.VIEW" in project.manifest_path.read_text(encoding="utf-8")

    def test_remove_filter(self, project):
        runner.invoke(app, ["add-filter", *project_args(project)])
        result = runner.invoke(app, ["remove-filter", *project_args(project)])
        assert result.exit_code == 0, result.output
        assert "android.intent.action.VIEW" not in project.manifest_path.read_text(encoding="utf-8")

    def test_failure_exits_non_zero(self, project):
        result = runner.invoke(app, ["disable", *project_args(project)])
        assert result.exit_code == 1
        assert "failed" in result.output

    def test_android_absent_exits_zero(self, project):
        result = runner.invoke(app, [
            "enable", "--project-root", str(project.root), "--platform", "ios",
        ])
        assert result.exit_code == 0
        assert "skipped" in result.output
        assert not project.installed_activity_path.exists()

    def test_config(self):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "DeepLinkingCordovaActivity" in result.output

    @pytest.mark.parametrize("content", [
        "{not json",
        json.dumps({"opts": None}),
        json.dumps(["opts"]),
        json.dumps({"opts": {"cordova": {"platforms": "android", "version": "9"}, "plugin": "dir"}}),
    ])
    def test_malformed_context_file(self, temp_dir, content):
        """Test that a bad context file is a usage error, not a traceback."""
        context_file = temp_dir / "context.json"
        context_file.write_text(content, encoding="utf-8")

        result = runner.invoke(app, ["enable", "--context-file", str(context_file)])

        assert result.exit_code == 2
        assert isinstance(result.exception, SystemExit)
        assert "Traceback" not in result.output
