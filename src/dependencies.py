"""Version-gated dependency and task planning.

Decides which GWT artifacts a project needs and whether the Super Dev Mode
task can exist, both driven by the configured GWT version. An absent version
and a malformed version are handled differently: the former is skipped
silently, the latter is reported.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from constants import Configurations, Constants
from extension import GwtExtension
from versioning.models import GwtVersion
from versioning.parser import GwtVersionParseError, parse_gwt_version

logger = logging.getLogger(__name__)

BELOW_FLOOR_MESSAGE = "GWT version is <2.5 -> additional dependencies are not added."


@dataclass(frozen=True)
class Dependency:
    """A Maven artifact requested into a dependency configuration."""
    configuration: str
    group: str
    artifact: str
    version: str

    @property
    def coordinate(self) -> str:
        return f"{self.group}:{self.artifact}:{self.version}"


@dataclass
class DependencyPlan:
    """Outcome of dependency planning for one project."""
    requested_version: Optional[str]
    version: Optional[GwtVersion]
    dependencies: List[Dependency] = field(default_factory=list)
    version_error: Optional[str] = None

    def for_configuration(self, configuration: str) -> List[Dependency]:
        return [d for d in self.dependencies if d.configuration == configuration]

    def to_dict(self) -> dict:
        return {
            "requested_version": self.requested_version,
            "version": str(self.version) if self.version is not None else None,
            "version_error": self.version_error,
            "dependencies": [
                {"configuration": d.configuration, "coordinate": d.coordinate}
                for d in self.dependencies
            ],
        }


@dataclass
class TaskSpec:
    """A task the plugin contributes to the build."""
    name: str
    description: str
    depends_on: List[str] = field(default_factory=list)
    war: Optional[Path] = None


def supports_super_dev(version: GwtVersion) -> bool:
    return version.is_at_least(Constants.SUPER_DEV_MIN_MAJOR, Constants.SUPER_DEV_MIN_MINOR)


def plan_dependencies(extension: GwtExtension, strict: bool = False) -> DependencyPlan:
    """Compute the GWT artifacts to request for the configured version.

    Args:
        extension: Project configuration.
        strict: Re-raise a malformed version instead of warning and skipping.

    Returns:
        DependencyPlan; empty when no version is configured or it is malformed.

    Raises:
        GwtVersionParseError: If strict and the version cannot be parsed.
    """
    raw = extension.gwt_version
    try:
        version = parse_gwt_version(raw)
    except GwtVersionParseError as exc:
        if strict:
            raise
        logger.warning("%s", exc)
        return DependencyPlan(requested_version=raw, version=None, version_error=str(exc))

    plan = DependencyPlan(requested_version=raw, version=version)
    if version is None:
        logger.debug("No GWT version configured, skipping dependencies")
        return plan

    def add(configuration: Configurations, artifact: str) -> None:
        plan.dependencies.append(
            Dependency(configuration.value, Constants.GWT_GROUP, artifact, raw)
        )

    add(Configurations.GWT_SDK, Constants.GWT_DEV)
    add(Configurations.GWT_SDK, Constants.GWT_USER)
    add(Configurations.RUNTIME, Constants.GWT_SERVLET)

    if supports_super_dev(version):
        if extension.codeserver:
            add(Configurations.GWT, Constants.GWT_CODESERVER)
        if extension.elemental:
            add(Configurations.GWT, Constants.GWT_ELEMENTAL)
    else:
        logger.warning(BELOW_FLOOR_MESSAGE)

    return plan


def _version_floor(extension: GwtExtension) -> Tuple[int, int]:
    """(major, minor) used for task gating; 2.5 unless a valid version says otherwise."""
    try:
        version = parse_gwt_version(extension.gwt_version)
    except GwtVersionParseError:
        version = None
    if version is None:
        return Constants.SUPER_DEV_MIN_MAJOR, Constants.SUPER_DEV_MIN_MINOR
    return version.major, version.minor


def plan_tasks(extension: GwtExtension) -> List[TaskSpec]:
    """List the tasks contributed for this project."""
    gwt_build = extension.gwt_build_dir
    tasks = [
        TaskSpec(
            name=Constants.TASK_COMPILE_GWT,
            description="Runs the GWT compiler to translate Java sources to JavaScript for production ready output",
            war=gwt_build / Constants.OUT_DIR if gwt_build is not None else None,
        ),
        TaskSpec(
            name=Constants.TASK_DRAFT_COMPILE_GWT,
            description="Runs the GWT compiler to produce draft quality output used for development",
            war=gwt_build / Constants.DRAFT_OUT_DIR if gwt_build is not None else None,
        ),
    ]

    major, minor = _version_floor(extension)
    floor = GwtVersion(major, minor, "0")
    if extension.codeserver and supports_super_dev(floor):
        tasks.append(
            TaskSpec(
                name=Constants.TASK_GWT_SUPER_DEV,
                description="Runs the GWT super dev mode",
                depends_on=[Constants.TASK_COMPILE_JAVA, Constants.TASK_PROCESS_RESOURCES],
            )
        )
    return tasks


def has_task(tasks: List[TaskSpec], name: str) -> bool:
    return any(t.name == name for t in tasks)
