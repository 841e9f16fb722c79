"""Argument parsing functionality for gwtbuild."""

import argparse

from superdev.settings import LogLevel


def _add_common_options(parser):
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)
    parser.add_argument("--project-dir",
                        dest="PROJECT_DIR",
                        help="Project root directory (default: current directory)",
                        action="store",
                        type=str,
                        default=".")


def _add_superdev_parser(subparsers):
    superdev = subparsers.add_parser(
        "superdev",
        help="Run the GWT Code Server (Super Dev Mode)",
    )
    _add_common_options(superdev)
    superdev.add_argument("modules",
                          metavar="MODULE",
                          help="GWT modules to serve (default: configured dev modules)",
                          nargs="*")
    superdev.add_argument("--src",
                          dest="SRC",
                          help="Source directory; may be repeated, replaces the configured list",
                          action="append",
                          type=str)
    superdev.add_argument("--work-dir",
                          dest="WORK_DIR",
                          help="Code Server work directory",
                          action="store",
                          type=str)
    superdev.add_argument("--bind-address",
                          dest="BIND_ADDRESS",
                          help="Address the Code Server listens on",
                          action="store",
                          type=str)
    superdev.add_argument("--port",
                          dest="PORT",
                          help="Port the Code Server listens on",
                          action="store",
                          type=int)
    superdev.add_argument("--launcher-dir",
                          dest="LAUNCHER_DIR",
                          help="Directory for the generated launcher files",
                          action="store",
                          type=str)
    superdev.add_argument("--log-level",
                          dest="GWT_LOG_LEVEL",
                          help="Code Server log level",
                          action="store",
                          type=str.upper,
                          choices=[level.name for level in LogLevel])
    superdev.add_argument("--compile-test-recompiles",
                          dest="COMPILE_TEST_RECOMPILES",
                          help="Number of times to recompile when compiling a test",
                          action="store",
                          type=int)
    superdev.add_argument("--no-precompile",
                          dest="NO_PRECOMPILE",
                          help="Do not precompile modules on startup",
                          action="store_const",
                          const=True,
                          default=None)
    # Tri-state switches: absent leaves the configured value untouched
    superdev.add_argument("--use-classpath-for-src",
                          dest="USE_CLASSPATH_FOR_SRC",
                          help="Put sources on the classpath instead of passing -src",
                          action=argparse.BooleanOptionalAction,
                          default=None)
    superdev.add_argument("--allow-missing-src",
                          dest="ALLOW_MISSING_SRC",
                          help="Allow missing source directories",
                          action=argparse.BooleanOptionalAction,
                          default=None)
    superdev.add_argument("--fail-on-error",
                          dest="FAIL_ON_ERROR",
                          help="Stop compiling on the first error",
                          action=argparse.BooleanOptionalAction,
                          default=None)
    superdev.add_argument("--compile-test",
                          dest="COMPILE_TEST",
                          help="Compile a test module on startup",
                          action=argparse.BooleanOptionalAction,
                          default=None)
    superdev.add_argument("--closure-formatted-output",
                          dest="CLOSURE_FORMATTED_OUTPUT",
                          help="Emit Closure formatted JavaScript",
                          action=argparse.BooleanOptionalAction,
                          default=None)
    superdev.add_argument("--java",
                          dest="JAVA",
                          help="Java executable (default: java on PATH)",
                          action="store",
                          type=str)
    superdev.add_argument("--dry-run",
                          dest="DRY_RUN",
                          help="Print the Code Server command instead of running it",
                          action="store_true")


def _add_deps_parser(subparsers):
    deps = subparsers.add_parser(
        "deps",
        help="Show the GWT dependencies requested for the configured version",
    )
    _add_common_options(deps)
    deps.add_argument("--gwt-version",
                      dest="GWT_VERSION",
                      help="Override the configured GWT version",
                      action="store",
                      type=str)
    deps.add_argument("-f", "--format",
                      dest="OUTPUT_FORMAT",
                      help="Output format (default: text)",
                      action="store",
                      type=str.lower,
                      choices=["text", "json"],
                      default="text")
    deps.add_argument("--strict",
                      dest="STRICT",
                      help="Fail instead of warning when the GWT version cannot be parsed",
                      action="store_true")
    deps.add_argument("--verify",
                      dest="VERIFY",
                      help="Check that every coordinate is published in the Maven repository",
                      action="store_true")
    deps.add_argument("--latest",
                      dest="LATEST",
                      help="Also report the latest published GWT version",
                      action="store_true")
    deps.add_argument("--repository",
                      dest="REPOSITORY",
                      help="Maven repository base URL (default: Maven Central)",
                      action="store",
                      type=str)


def _add_tasks_parser(subparsers):
    tasks = subparsers.add_parser(
        "tasks",
        help="List the GWT tasks contributed to the build",
    )
    _add_common_options(tasks)


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="gwtbuild",
        description="gwtbuild - GWT toolchain integration for builds",
        add_help=True,
    )
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default=None)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    subparsers = parser.add_subparsers(dest="action", metavar="COMMAND")
    subparsers.required = True
    _add_superdev_parser(subparsers)
    _add_deps_parser(subparsers)
    _add_tasks_parser(subparsers)

    return parser.parse_args(argv)
