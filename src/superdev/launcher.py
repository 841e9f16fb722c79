"""Assembles and runs the Code Server java process."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from typing import List, Optional

from constants import Constants
from extension import GwtExtension

from .arguments import build_args
from .settings import DevServerSettings

logger = logging.getLogger(__name__)


class LaunchError(Exception):
    """Raised when the Code Server process cannot be started."""


def build_classpath(extension: GwtExtension, settings: DevServerSettings) -> List[str]:
    """Classpath entries for the Code Server, sources first when requested."""
    entries: List[str] = []
    if settings.use_classpath_for_src is True:
        entries.extend(str(p) for p in settings.src or [])
    entries.extend(str(p) for p in extension.classpath)
    return entries


def build_command(
    extension: GwtExtension,
    settings: DevServerSettings,
    java: Optional[str] = None,
    modules: Optional[List[str]] = None,
) -> List[str]:
    """Build the full command line for the Code Server.

    Args:
        extension: Supplies heap sizes, classpath and default modules.
        settings: Effective dev server settings (already merged).
        java: Java executable; defaults to "java" on PATH.
        modules: Module names; defaults to the extension's dev modules.

    Returns:
        The argument vector, executable first.
    """
    cmd = [java or Constants.JAVA_EXECUTABLE]
    if extension.min_heap_size:
        cmd.append(f"-Xms{extension.min_heap_size}")
    if extension.max_heap_size:
        cmd.append(f"-Xmx{extension.max_heap_size}")

    classpath = build_classpath(extension, settings)
    if classpath:
        cmd.extend(["-cp", os.pathsep.join(classpath)])

    cmd.append(Constants.CODE_SERVER_MAIN_CLASS)
    cmd.extend(build_args(settings))
    cmd.extend(modules if modules else extension.effective_modules(dev_task=True))
    return cmd


def format_command(cmd: List[str]) -> str:
    return " ".join(shlex.quote(part) for part in cmd)


def run_code_server(cmd: List[str], cwd: Optional[str] = None) -> int:
    """Run the Code Server and wait for it to exit.

    Returns:
        The process exit code.

    Raises:
        LaunchError: If the executable cannot be started.
    """
    logger.info("Running: %s", format_command(cmd))
    try:
        result = subprocess.run(cmd, cwd=cwd, check=False)  # noqa: S603
    except FileNotFoundError as exc:
        raise LaunchError(f"Java executable not found: {cmd[0]}") from exc
    except OSError as exc:
        raise LaunchError(f"Failed to start Code Server: {exc}") from exc
    return result.returncode
