"""Integration tests for the cgf-converter command line."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from cgfconverter.__main__ import main
from cgfconverter.cli.app import app
from cgfconverter.core.usage import USAGE_HEADER

runner = CliRunner()


@pytest.mark.integration
class TestCli:
    """Run the Typer application end to end."""

    def test_convert_model(self, model_dir: Path):
        result = runner.invoke(app, ["model.cgf", "-obj", "-group"])

        assert result.exit_code == 0
        assert "Input file set to model.cgf" in result.output
        assert "Output format set to Wavefront (.obj)" in result.output
        assert "Grouping set to True" in result.output

    def test_usage(self):
        result = runner.invoke(app, ["-usage"])

        assert result.exit_code == 1
        assert USAGE_HEADER in result.output

    def test_no_arguments(self):
        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert USAGE_HEADER in result.output

    def test_missing_value(self):
        result = runner.invoke(app, ["-datadir"])

        assert result.exit_code == 1
        assert USAGE_HEADER in result.output

    def test_single_dash_flags_are_forwarded_in_order(self, model_dir: Path):
        result = runner.invoke(app, ["-out", "export", "-infile", "*.cgf", "-dae"])

        assert result.exit_code == 0
        assert "Output directory set to export" in result.output
        assert "Input file set to *.cgf" in result.output

    def test_verbose_prints_summary(self, model_dir: Path):
        result = runner.invoke(app, ["--verbose", "model.cgf", "-fbx"])

        assert result.exit_code == 0
        assert "Submitted args" in result.output
        assert "model.cgf" in result.output

    def test_settings_file(self, model_dir: Path):
        settings = model_dir / "settings.toml"
        settings.write_text('[logging]\nlevel = "ERROR"\n', encoding="utf-8")

        result = runner.invoke(app, ["--settings", str(settings), "model.cgf"])

        assert result.exit_code == 0

    def test_missing_settings_file(self, model_dir: Path):
        result = runner.invoke(app, ["--settings", "missing.toml", "model.cgf"])

        assert result.exit_code == 1
        assert "Error: Settings file not found" in result.output

    def test_invalid_settings_file(self, model_dir: Path):
        settings = model_dir / "settings.toml"
        settings.write_text('[logging]\nformat = "xml"\n', encoding="utf-8")

        result = runner.invoke(app, ["--settings", str(settings), "model.cgf"])

        assert result.exit_code == 1
        assert "Invalid settings" in result.output

    def test_unreadable_input_reports_error(self, model_dir: Path, monkeypatch):
        def denied(self):
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "is_file", denied)

        result = runner.invoke(app, ["model.cgf"])

        assert result.exit_code == 1
        assert "Error: Failed to expand file filter" in result.output


@pytest.mark.integration
class TestMain:
    """Test the module entry point."""

    def test_success(self, model_dir: Path, capsys):
        assert main(["model.cgf"]) == 0
        assert "Input file set to model.cgf" in capsys.readouterr().out

    def test_failure(self, model_dir: Path, capsys):
        assert main(["nothing.cgf"]) == 1
        assert USAGE_HEADER in capsys.readouterr().out

    def test_usage(self, capsys):
        assert main(["-usage"]) == 1
