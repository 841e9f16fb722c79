"""Command-line arguments for the GWT Code Server.

The Code Server parses flags by exact name, so spellings and ordering here are
part of the contract with the external tool.
"""

from __future__ import annotations

import logging
import os
from typing import Any, List, Optional

from common.logging_utils import extra_context, is_debug_enabled

from .settings import DevServerSettings

logger = logging.getLogger(__name__)

# (attribute, positive spelling, negative spelling)
ON_OFF_FLAGS = [
    ("allow_missing_src", "-allowMissingSrc", "-noallowMissingSrc"),
    ("fail_on_error", "-failOnError", "-nofailOnError"),
    ("compile_test", "-compileTest", "-nocompileTest"),
    ("closure_formatted_output", "-XclosureFormattedOutput", "-XnoclosureFormattedOutput"),
]


def arg_if_set(args: List[str], flag: str, value: Any) -> None:
    """Append ``flag value`` when value is not None."""
    if value is not None:
        args.extend([flag, str(value)])


def arg_if_enabled(args: List[str], value: Optional[bool], flag: str) -> None:
    """Append ``flag`` only when value is explicitly True."""
    if value is True:
        args.append(flag)


def arg_on_off(args: List[str], value: Optional[bool], on_flag: str, off_flag: str) -> None:
    """Append the on spelling for True, the off spelling for False, nothing for None."""
    if value is True:
        args.append(on_flag)
    elif value is False:
        args.append(off_flag)


def dir_arg_if_set(args: List[str], flag: str, directory: Optional[os.PathLike]) -> None:
    """Like arg_if_set, but creates the directory before emitting it."""
    if directory is not None:
        os.makedirs(directory, exist_ok=True)
        args.extend([flag, str(directory)])


def build_args(settings: DevServerSettings) -> List[str]:
    """Translate settings into the ordered Code Server argument list.

    Source dirs that are missing or not directories are skipped silently, as
    are all unset options. The only side effect is creating the work dir.
    """
    args: List[str] = []

    if settings.use_classpath_for_src is not True:
        for src_dir in settings.src or []:
            if os.path.isdir(src_dir):
                arg_if_set(args, "-src", src_dir)
            elif is_debug_enabled(logger):
                logger.debug(
                    "Skipping missing source dir",
                    extra=extra_context(
                        event="decision",
                        component="superdev",
                        action="build_args",
                        outcome="skip_src",
                        target=str(src_dir),
                    ),
                )

    dir_arg_if_set(args, "-workDir", settings.work_dir)
    arg_if_set(args, "-bindAddress", settings.bind_address)
    arg_if_set(args, "-port", settings.port)
    arg_if_enabled(args, settings.no_precompile, "-noprecompile")
    for attr, on_flag, off_flag in ON_OFF_FLAGS:
        arg_on_off(args, getattr(settings, attr), on_flag, off_flag)
    arg_if_set(args, "-compileTestRecompiles", settings.compile_test_recompiles)
    arg_if_set(args, "-launcherDir", settings.launcher_dir)
    arg_if_set(args, "-logLevel", settings.log_level)

    return args
