"""Helpers shared by the gwtbuild CLI commands."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

from common.logging_utils import configure_logging
from constants import ExitCodes
from extension import ConfigError, GwtExtension, load_extension

logger = logging.getLogger(__name__)


def setup_logging(args: Any) -> None:
    """Configure logging based on CLI arguments.

    Args:
        args: Parsed CLI arguments.
    """
    level_name = getattr(args, "LOG_LEVEL", None)
    configure_logging(str(level_name).upper() if level_name else None)

    log_file = getattr(args, "LOG_FILE", None)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s"
        )
        file_handler.setFormatter(formatter)
        logging.getLogger().addHandler(file_handler)
        logger.info("Logging to file: %s", log_file)


def load_project(args: Any) -> GwtExtension:
    """Load the extension for the CLI's project dir, exiting on config errors."""
    project_dir = os.path.abspath(getattr(args, "PROJECT_DIR", None) or ".")
    if not os.path.isdir(project_dir):
        logger.error("Project directory not found: %s", project_dir)
        sys.exit(ExitCodes.FILE_ERROR.value)
    try:
        return load_extension(getattr(args, "CONFIG", None), project_dir)
    except ConfigError as exc:
        logger.error("%s", exc)
        sys.exit(ExitCodes.FILE_ERROR.value)
