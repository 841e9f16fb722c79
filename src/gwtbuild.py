"""gwtbuild - GWT toolchain integration for builds.

    Dispatches to the command handlers; each handler exits with one of the
    ExitCodes values (or the Code Server's own exit code for superdev).
"""
import logging

from args import parse_args


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    logging.getLogger(__name__).debug("Arguments parsed: %s", args)

    # Command modules are imported lazily to keep --help fast
    if args.action == "superdev":
        from cli_superdev import run_superdev  # pylint: disable=import-outside-toplevel
        run_superdev(args)
    elif args.action == "deps":
        from cli_deps import run_deps  # pylint: disable=import-outside-toplevel
        run_deps(args)
    elif args.action == "tasks":
        from cli_deps import run_tasks  # pylint: disable=import-outside-toplevel
        run_tasks(args)


if __name__ == "__main__":
    main()
