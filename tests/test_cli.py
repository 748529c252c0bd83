"""
Unit tests for CLI commands.

Tests cover:
- validate command
- run command
"""

import textwrap

from typer.testing import CliRunner

from entity_attribute.cli.app import app

runner = CliRunner()


def _definitions(tmp_path) -> str:
    fp = tmp_path / "attributes.yaml"
    fp.write_text(
        textwrap.dedent(
            """
            attributes:
              - name: health
                value: 100
                update_type: set
                update_value: 100
                update_speed: 5
              - name: title
                value: Wanderer
            """
        ),
        encoding="utf-8",
    )
    return str(fp)


class TestValidateCommand:
    """Tests for validate command."""

    def test_validate_lists_attributes(self, tmp_path):
        result = runner.invoke(app, ["validate", _definitions(tmp_path)])

        assert result.exit_code == 0
        assert "Loaded 2 attribute(s)" in result.stdout
        assert "health" in result.stdout
        assert "title" in result.stdout

    def test_validate_bad_file(self, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("attributes:\n  - name: health\n    value: 1\n    update_type: 9\n", encoding="utf-8")

        result = runner.invoke(app, ["validate", str(bad)])

        assert result.exit_code == 1
        assert "Failed to load data" in result.stdout

    def test_validate_missing_path(self, tmp_path):
        result = runner.invoke(app, ["validate", str(tmp_path / "nope")])

        assert result.exit_code == 1
        assert "Path not found" in result.stdout


class TestRunCommand:
    """Tests for run command."""

    def test_run_prints_timeline(self, tmp_path):
        result = runner.invoke(
            app,
            ["run", "health", "--path", _definitions(tmp_path), "--set-value", "40", "--duration", "0.1", "--sample", "0.02"],
        )

        assert result.exit_code == 0
        assert "Running" in result.stdout
        assert "start" in result.stdout
        assert "stop" in result.stdout
        assert "100" in result.stdout

    def test_run_unknown_attribute(self, tmp_path):
        result = runner.invoke(app, ["run", "mana", "--path", _definitions(tmp_path)])

        assert result.exit_code == 2
        assert "Attribute not found" in result.stdout

    def test_run_rejects_mismatched_override(self, tmp_path):
        result = runner.invoke(app, ["run", "health", "--path", _definitions(tmp_path), "--set-value", "full"])

        assert result.exit_code == 2
        assert "Bad --set-value" in result.stdout

    def test_run_without_recharge(self, tmp_path):
        result = runner.invoke(app, ["run", "title", "--path", _definitions(tmp_path), "--set-value", "Hero"])

        assert result.exit_code == 0
        assert "does not recharge" in result.stdout
        assert "'Hero'" in result.stdout
