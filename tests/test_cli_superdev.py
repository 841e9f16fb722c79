"""Tests for the superdev command orchestration."""

from pathlib import Path
from unittest.mock import patch

import pytest

from args import parse_args
from superdev.launcher import LaunchError
from superdev.settings import LogLevel


def _write_config(tmp_path, body):
    cfg = tmp_path / "gwtbuild.yml"
    cfg.write_text(body, encoding="utf-8")
    return cfg


class TestSettingsFromArgs:
    """CLI overrides."""

    def test_unset_options_stay_none(self):
        from cli_superdev import settings_from_args
        settings = settings_from_args(parse_args(["superdev"]))
        assert settings.src is None
        assert settings.port is None
        assert settings.fail_on_error is None
        assert settings.log_level is None

    def test_values_converted(self):
        from cli_superdev import settings_from_args
        ns = parse_args([
            "superdev", "--src", "a", "--work-dir", "w", "--log-level", "spam", "--no-compile-test",
        ])
        settings = settings_from_args(ns)
        assert settings.src == [Path("a")]
        assert settings.work_dir == Path("w")
        assert settings.log_level is LogLevel.SPAM
        assert settings.compile_test is False


class TestRunSuperdev:
    """run_superdev end to end with the process mocked."""

    @patch("cli_superdev.setup_logging")
    def test_dry_run_prints_command(self, _mock_logging, tmp_path, capsys):
        (tmp_path / "src" / "main" / "java").mkdir(parents=True)
        _write_config(
            tmp_path,
            "gwt:\n"
            "  gwtVersion: '2.8.2'\n"
            "  devModules: [com.example.AppDev]\n"
            "  logLevel: INFO\n"
            "  superDev:\n"
            "    port: 9876\n"
            "    failOnError: true\n",
        )
        ns = parse_args([
            "superdev", "--project-dir", str(tmp_path), "--port", "1234", "--no-fail-on-error", "--dry-run",
        ])
        from cli_superdev import run_superdev
        with pytest.raises(SystemExit) as exc_info:
            run_superdev(ns)
        assert exc_info.value.code == 0

        out = capsys.readouterr().out.strip()
        assert out.startswith("java com.google.gwt.dev.codeserver.CodeServer -src ")
        assert "-port 1234" in out
        assert "-nofailOnError" in out
        assert "-logLevel INFO" in out
        assert out.endswith("com.example.AppDev")
        assert (tmp_path / "build" / "gwt" / "work").is_dir()

    @patch("cli_superdev.run_code_server", return_value=0)
    @patch("cli_superdev.setup_logging")
    def test_runs_code_server(self, _mock_logging, mock_run, tmp_path):
        _write_config(tmp_path, "gwt:\n  gwtVersion: '2.8.2'\n  modules: [com.example.App]\n")
        ns = parse_args(["superdev", "--project-dir", str(tmp_path)])
        from cli_superdev import run_superdev
        with pytest.raises(SystemExit) as exc_info:
            run_superdev(ns)
        assert exc_info.value.code == 0
        cmd = mock_run.call_args[0][0]
        assert cmd[0] == "java"
        assert "-workDir" in cmd
        assert cmd[-1] == "com.example.App"
        assert mock_run.call_args[1]["cwd"] == str(tmp_path)

    @patch("cli_superdev.run_code_server", return_value=-15)
    @patch("cli_superdev.setup_logging")
    def test_signal_exit_code(self, _mock_logging, _mock_run, tmp_path):
        ns = parse_args(["superdev", "--project-dir", str(tmp_path)])
        from cli_superdev import run_superdev
        with pytest.raises(SystemExit) as exc_info:
            run_superdev(ns)
        assert exc_info.value.code == 143

    @patch("cli_superdev.run_code_server", side_effect=LaunchError("Java executable not found: java"))
    @patch("cli_superdev.setup_logging")
    def test_launch_error(self, _mock_logging, _mock_run, tmp_path):
        ns = parse_args(["superdev", "--project-dir", str(tmp_path)])
        from cli_superdev import run_superdev
        with pytest.raises(SystemExit) as exc_info:
            run_superdev(ns)
        assert exc_info.value.code == 1

    @patch("cli_superdev.run_code_server")
    @patch("cli_superdev.setup_logging")
    def test_unavailable_below_floor(self, _mock_logging, mock_run, tmp_path):
        _write_config(tmp_path, "gwt:\n  gwtVersion: '2.4.0'\n")
        ns = parse_args(["superdev", "--project-dir", str(tmp_path)])
        from cli_superdev import run_superdev
        with pytest.raises(SystemExit) as exc_info:
            run_superdev(ns)
        assert exc_info.value.code == 4
        mock_run.assert_not_called()

    @patch("cli_superdev.setup_logging")
    def test_invalid_config_exits(self, _mock_logging, tmp_path):
        _write_config(tmp_path, "gwt:\n  codeserver: sometimes\n")
        ns = parse_args(["superdev", "--project-dir", str(tmp_path)])
        from cli_superdev import run_superdev
        with pytest.raises(SystemExit) as exc_info:
            run_superdev(ns)
        assert exc_info.value.code == 1
