"""CLI entry point for Super Dev Mode.

Merges command-line overrides over the project's configured defaults, builds
the Code Server command and runs it, propagating its exit code.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

from cli_common import load_project, setup_logging
from constants import Constants, ExitCodes
from dependencies import has_task, plan_tasks
from superdev.launcher import LaunchError, build_command, format_command, run_code_server
from superdev.settings import DevServerSettings, LogLevel, merge_settings, settings_from_extension

logger = logging.getLogger(__name__)


def _optional_path(value: Any):
    return Path(value) if value is not None else None


def settings_from_args(args: Any) -> DevServerSettings:
    """Per-invocation overrides; options not given on the command line stay None."""
    src = getattr(args, "SRC", None)
    level = getattr(args, "GWT_LOG_LEVEL", None)
    return DevServerSettings(
        src=[Path(s) for s in src] if src else None,
        use_classpath_for_src=getattr(args, "USE_CLASSPATH_FOR_SRC", None),
        work_dir=_optional_path(getattr(args, "WORK_DIR", None)),
        bind_address=getattr(args, "BIND_ADDRESS", None),
        port=getattr(args, "PORT", None),
        no_precompile=getattr(args, "NO_PRECOMPILE", None),
        allow_missing_src=getattr(args, "ALLOW_MISSING_SRC", None),
        fail_on_error=getattr(args, "FAIL_ON_ERROR", None),
        compile_test=getattr(args, "COMPILE_TEST", None),
        compile_test_recompiles=getattr(args, "COMPILE_TEST_RECOMPILES", None),
        launcher_dir=_optional_path(getattr(args, "LAUNCHER_DIR", None)),
        log_level=LogLevel.parse(level) if level else None,
        closure_formatted_output=getattr(args, "CLOSURE_FORMATTED_OUTPUT", None),
    )


def run_superdev(args: Any) -> None:
    """Entry point for the superdev command.

    Args:
        args: Parsed CLI arguments namespace.
    """
    setup_logging(args)
    extension = load_project(args)

    if not has_task(plan_tasks(extension), Constants.TASK_GWT_SUPER_DEV):
        logger.error(
            "Super Dev Mode is not available: it requires codeserver enabled and GWT >= %d.%d (configured: %s)",
            Constants.SUPER_DEV_MIN_MAJOR,
            Constants.SUPER_DEV_MIN_MINOR,
            extension.gwt_version,
        )
        sys.exit(ExitCodes.TASK_UNAVAILABLE.value)

    settings = merge_settings(settings_from_args(args), settings_from_extension(extension))
    cmd = build_command(
        extension,
        settings,
        java=getattr(args, "JAVA", None),
        modules=getattr(args, "modules", None),
    )

    if getattr(args, "DRY_RUN", False):
        print(format_command(cmd))
        sys.exit(ExitCodes.SUCCESS.value)

    if not extension.effective_modules(dev_task=True) and not getattr(args, "modules", None):
        logger.warning("No GWT modules configured; the Code Server will refuse to start.")

    try:
        exit_code = run_code_server(cmd, cwd=str(extension.project_dir) if extension.project_dir else None)
    except LaunchError as exc:
        logger.error("%s", exc)
        sys.exit(ExitCodes.FILE_ERROR.value)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        exit_code = 130  # Standard SIGINT exit code

    # Negative return codes mean the child died from a signal
    if exit_code < 0:
        exit_code = 128 + (-exit_code)
    sys.exit(exit_code)
