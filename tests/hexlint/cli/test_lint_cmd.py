"""Tests for hexlint.cli.commands.lint_cmd."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from hexlint.cli.main import app
from hexlint.kernel.config.loader import clear_config_cache


@pytest.fixture
def runner():
    """Fixture providing a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def project(tmp_path, monkeypatch) -> Path:
    """An isolated project directory used as the working directory."""
    monkeypatch.delenv("HEXLINT_CONFIG_PATH", raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / "src").mkdir()
    clear_config_cache()
    yield tmp_path
    clear_config_cache()


def _write(project: Path, name: str, text: str) -> None:
    (project / "src" / name).write_text(text, encoding="utf-8")


class TestLintCommand:
    def test_clean_project(self, runner, project) -> None:
        _write(project, "a.css", "a {}\n")

        result = runner.invoke(app, ["lint", "src"])

        assert result.exit_code == 0
        assert "No problems found" in result.output

    def test_errors_fail(self, runner, project) -> None:
        _write(project, "a.css", "\ta {}\n")

        result = runner.invoke(app, ["lint", "src"])

        assert result.exit_code == 1
        assert "no-tabs" in result.output

    def test_warnings_do_not_fail_by_default(self, runner, project) -> None:
        _write(project, "a.css", "a {}")

        result = runner.invoke(app, ["lint", "src"])

        assert result.exit_code == 0
        assert "final-newline" in result.output

    def test_fail_on_warning_from_config(self, runner, project) -> None:
        _write(project, "a.css", "a {}")
        (project / "pyproject.toml").write_text("[tool.hexlint.linter]\nfail_on_warning = true\n")

        result = runner.invoke(app, ["lint", "src"])

        assert result.exit_code == 1

    def test_no_errors_flag(self, runner, project) -> None:
        _write(project, "a.css", "\ta {}\n")

        result = runner.invoke(app, ["lint", "src", "--no-errors"])

        assert result.exit_code == 0
        assert "no-tabs" not in result.output

    def test_no_warnings_flag(self, runner, project) -> None:
        _write(project, "a.css", "a {}")

        result = runner.invoke(app, ["lint", "src", "--no-warnings"])

        assert result.exit_code == 0
        assert "final-newline" not in result.output

    def test_compact_format(self, runner, project) -> None:
        _write(project, "a.css", "\ta {}\n")

        result = runner.invoke(app, ["lint", "src", "--format", "compact", "--ext", "css"])

        assert "line 1, col 1, error" in result.output

    def test_output_report(self, runner, project) -> None:
        _write(project, "a.css", "a {}\n")
        _write(project, "b.css", "\tb {}\n")

        result = runner.invoke(
            app,
            ["lint", "src", "-o", "reports/lint.json", "--report-format", "json", "--batch-size", "1"],
        )

        assert result.exit_code == 1
        payload = json.loads((project / "reports" / "lint.json").read_text())
        assert sorted(Path(entry["source"]).name for entry in payload) == ["a.css", "b.css"]

    def test_report_printed_when_asset_write_fails(self, runner, project) -> None:
        _write(project, "a.css", "\ta {}\n")
        (project / "reports").write_text("not a directory")

        result = runner.invoke(app, ["lint", "src", "-o", "reports/lint.txt"])

        assert result.exit_code == 2
        assert "no-tabs" in result.output
        assert "Cannot write report" in result.output

    def test_extension_filter(self, runner, project) -> None:
        _write(project, "a.txt", "\tignored by extension\n")

        result = runner.invoke(app, ["lint", "src", "--ext", "css"])

        assert result.exit_code == 0
        assert "No files to lint" in result.output

    def test_missing_config_file(self, runner, project) -> None:
        _write(project, "a.css", "a {}\n")

        result = runner.invoke(app, ["lint", "src", "--config", "missing.toml"])

        assert result.exit_code == 2
        assert "Configuration error" in result.output

    def test_engine_setup_failure(self, runner, project) -> None:
        _write(project, "a.css", "a {}\n")
        (project / "pyproject.toml").write_text(
            "[tool.hexlint.linter.engine_options]\nunknown_option = 1\n"
        )

        result = runner.invoke(app, ["lint", "src"])

        assert result.exit_code == 2
        assert "Engine setup failed" in result.output

    def test_failed_job_is_reported(self, runner, project) -> None:
        _write(project, "a.css", "a {}\n")
        (project / "src" / "broken.css").write_bytes(b"\xff\xfe\x00bad")

        result = runner.invoke(app, ["lint", "src"])

        assert result.exit_code == 1
        assert "Lint job failed" in result.output


class TestMainCallback:
    def test_version(self, runner) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "hexlint" in result.output

    def test_help_without_command(self, runner) -> None:
        result = runner.invoke(app, [])
        assert "lint" in result.output
        assert "formatters" in result.output


class TestLoggingConfig:
    def test_logging_section_is_applied(self, runner, project) -> None:
        _write(project, "a.css", "a {}\n")
        (project / "pyproject.toml").write_text(
            '[tool.hexlint.logging]\nlevel = "DEBUG"\nformat = "console"\n'
            'output_file = "logs/hexlint.log"\n'
        )

        result = runner.invoke(app, ["lint", "src"])

        assert result.exit_code == 0
        assert "Lint report" in (project / "logs" / "hexlint.log").read_text()

    def test_log_level_flag_overrides_config(self, runner, project) -> None:
        _write(project, "a.css", "a {}\n")
        (project / "pyproject.toml").write_text(
            '[tool.hexlint.logging]\nlevel = "DEBUG"\noutput_file = "logs/hexlint.log"\n'
        )

        result = runner.invoke(app, ["--log-level", "error", "lint", "src"])

        assert result.exit_code == 0
        assert "Lint report" not in (project / "logs" / "hexlint.log").read_text()
