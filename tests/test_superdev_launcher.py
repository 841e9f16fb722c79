"""Tests for Code Server command assembly and launching."""

import os
from unittest.mock import MagicMock, patch

import pytest

from extension import GwtExtension
from superdev.launcher import LaunchError, build_classpath, build_command, run_code_server
from superdev.settings import DevServerSettings

MAIN_CLASS = "com.google.gwt.dev.codeserver.CodeServer"


class TestBuildCommand:
    """java command line layout."""

    def test_minimal(self):
        ext = GwtExtension(modules=["com.example.App"])
        assert build_command(ext, DevServerSettings()) == ["java", MAIN_CLASS, "com.example.App"]

    def test_heap_classpath_and_args(self, tmp_path):
        ext = GwtExtension(
            modules=["com.example.App"],
            dev_modules=["com.example.AppDev"],
            classpath=[tmp_path / "gwt-dev.jar", tmp_path / "gwt-codeserver.jar"],
            min_heap_size="256M",
            max_heap_size="1G",
        )
        cmd = build_command(ext, DevServerSettings(port=9876), java="/opt/jdk/bin/java")
        assert cmd == [
            "/opt/jdk/bin/java",
            "-Xms256M",
            "-Xmx1G",
            "-cp",
            os.pathsep.join([str(tmp_path / "gwt-dev.jar"), str(tmp_path / "gwt-codeserver.jar")]),
            MAIN_CLASS,
            "-port",
            "9876",
            "com.example.AppDev",
        ]

    def test_explicit_modules_replace_configured(self):
        ext = GwtExtension(modules=["com.example.App"])
        cmd = build_command(ext, DevServerSettings(), modules=["com.example.Other"])
        assert cmd[-1] == "com.example.Other"
        assert "com.example.App" not in cmd

    def test_src_prepended_when_using_classpath(self, tmp_path):
        ext = GwtExtension(classpath=[tmp_path / "gwt-dev.jar"])
        settings = DevServerSettings(src=[tmp_path / "src"], use_classpath_for_src=True)
        assert build_classpath(ext, settings) == [str(tmp_path / "src"), str(tmp_path / "gwt-dev.jar")]
        assert "-src" not in build_command(ext, settings)

    def test_src_not_on_classpath_by_default(self, tmp_path):
        ext = GwtExtension(classpath=[tmp_path / "gwt-dev.jar"])
        settings = DevServerSettings(src=[tmp_path / "src"])
        assert build_classpath(ext, settings) == [str(tmp_path / "gwt-dev.jar")]


class TestRunCodeServer:
    """Subprocess handling."""

    @patch("superdev.launcher.subprocess.run")
    def test_returns_exit_code(self, mock_run):
        mock_run.return_value = MagicMock(returncode=3)
        assert run_code_server(["java", MAIN_CLASS], cwd="/tmp") == 3
        mock_run.assert_called_once_with(["java", MAIN_CLASS], cwd="/tmp", check=False)

    @patch("superdev.launcher.subprocess.run", side_effect=FileNotFoundError("java"))
    def test_missing_java(self, _mock_run):
        with pytest.raises(LaunchError) as exc_info:
            run_code_server(["no-such-java", MAIN_CLASS])
        assert "no-such-java" in str(exc_info.value)

    @patch("superdev.launcher.subprocess.run", side_effect=PermissionError("denied"))
    def test_os_error(self, _mock_run):
        with pytest.raises(LaunchError):
            run_code_server(["java", MAIN_CLASS])
