"""CLI entry points for inspecting dependency and task planning."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

from cli_common import load_project, setup_logging
from constants import Constants, ExitCodes
from dependencies import DependencyPlan, plan_dependencies, plan_tasks
from versioning.parser import GwtVersionParseError

logger = logging.getLogger(__name__)


def _print_plan(plan: DependencyPlan, fmt: str, extra: dict) -> None:
    if fmt == "json":
        data = plan.to_dict()
        data.update(extra)
        print(json.dumps(data, indent=2))
        return

    if plan.version_error is not None:
        print(f"GWT version {plan.requested_version} is invalid; no dependencies are added.")
    elif plan.version is None:
        print("No GWT version configured; no dependencies are added.")
    for dep in plan.dependencies:
        print(f"{dep.configuration}: {dep.coordinate}")
    if extra.get("missing"):
        for coordinate in extra["missing"]:
            print(f"not published: {coordinate}")
    if extra.get("latest"):
        print(f"latest published GWT version: {extra['latest']}")


def run_deps(args: Any) -> None:
    """Entry point for the deps command.

    Args:
        args: Parsed CLI arguments namespace.
    """
    setup_logging(args)
    extension = load_project(args)
    if getattr(args, "GWT_VERSION", None) is not None:
        extension.gwt_version = args.GWT_VERSION

    try:
        plan = plan_dependencies(extension, strict=getattr(args, "STRICT", False))
    except GwtVersionParseError as exc:
        logger.error("%s", exc)
        sys.exit(ExitCodes.VERSION_ERROR.value)

    extra: dict = {}
    if getattr(args, "VERIFY", False) or getattr(args, "LATEST", False):
        # Lazy import so plain planning never loads the HTTP stack
        from versioning.resolvers.maven import (  # pylint: disable=import-outside-toplevel
            MavenMetadataResolver,
            pick_latest,
            verify_plan,
        )

        resolver = MavenMetadataResolver(getattr(args, "REPOSITORY", None))
        if getattr(args, "VERIFY", False):
            extra["missing"] = verify_plan(plan, resolver)
        if getattr(args, "LATEST", False):
            candidates = resolver.fetch_candidates(Constants.GWT_GROUP, Constants.GWT_DEV)
            if not candidates:
                logger.error("Could not determine published GWT versions")
                sys.exit(ExitCodes.CONNECTION_ERROR.value)
            extra["latest"] = pick_latest(candidates)

    _print_plan(plan, getattr(args, "OUTPUT_FORMAT", "text"), extra)

    if extra.get("missing"):
        logger.error("%d coordinate(s) are not published in the repository", len(extra["missing"]))
        sys.exit(ExitCodes.VERSION_ERROR.value)
    sys.exit(ExitCodes.SUCCESS.value)


def run_tasks(args: Any) -> None:
    """Entry point for the tasks command."""
    setup_logging(args)
    extension = load_project(args)
    for task in plan_tasks(extension):
        line = f"{task.name} - {task.description}"
        if task.depends_on:
            line += f" (depends on: {', '.join(task.depends_on)})"
        print(line)
    sys.exit(ExitCodes.SUCCESS.value)
