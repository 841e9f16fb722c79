"""Project-level GWT configuration ("the gwt extension").

Holds the values shared by every GWT task and the Super Dev Mode defaults.
Values are loaded from a YAML or JSON file and overlaid on layout defaults
derived from the project and build directories.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from constants import Constants
from superdev.settings import LogLevel

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or has invalid values."""


@dataclass
class SuperDevOptions:  # pylint: disable=too-many-instance-attributes
    """Extension-level defaults for the Super Dev Mode task."""

    bind_address: Optional[str] = None
    port: Optional[int] = None
    no_precompile: Optional[bool] = None
    use_classpath_for_src: Optional[bool] = None
    allow_missing_src: Optional[bool] = None
    fail_on_error: Optional[bool] = None
    compile_test: Optional[bool] = None
    compile_test_recompiles: Optional[int] = None
    launcher_dir: Optional[Path] = None
    closure_formatted_output: Optional[bool] = None


@dataclass
class GwtExtension:  # pylint: disable=too-many-instance-attributes
    """Shared GWT configuration of a project."""

    gwt_version: Optional[str] = None
    codeserver: bool = True
    elemental: bool = False
    modules: List[str] = field(default_factory=list)
    dev_modules: List[str] = field(default_factory=list)
    src: List[Path] = field(default_factory=list)
    classpath: List[Path] = field(default_factory=list)
    project_dir: Optional[Path] = None
    build_dir: Optional[Path] = None
    dev_war: Optional[Path] = None
    extra_dir: Optional[Path] = None
    work_dir: Optional[Path] = None
    gen_dir: Optional[Path] = None
    cache_dir: Optional[Path] = None
    log_dir: Optional[Path] = None
    log_level: Optional[LogLevel] = None
    min_heap_size: Optional[str] = None
    max_heap_size: Optional[str] = None
    super_dev: SuperDevOptions = field(default_factory=SuperDevOptions)

    @property
    def gwt_build_dir(self) -> Optional[Path]:
        if self.build_dir is None:
            return None
        return self.build_dir / Constants.BUILD_DIR

    @classmethod
    def defaults(cls, project_dir: os.PathLike, build_dir: Optional[os.PathLike] = None) -> "GwtExtension":
        """Create an extension with the conventional directory layout."""
        project = Path(project_dir)
        build = Path(build_dir) if build_dir is not None else project / "build"
        gwt_build = build / Constants.BUILD_DIR
        return cls(
            src=[project / Constants.MAIN_JAVA_DIR, build / Constants.MAIN_RESOURCES_OUTPUT_DIR],
            project_dir=project,
            build_dir=build,
            dev_war=project / Constants.DEV_WAR,
            extra_dir=gwt_build / Constants.EXTRA_DIR,
            work_dir=gwt_build / Constants.WORK_DIR,
            gen_dir=gwt_build / Constants.GEN_DIR,
            cache_dir=gwt_build / Constants.CACHE_DIR,
            log_dir=gwt_build / Constants.LOG_DIR,
            log_level=log_level_for(logging.getLogger("gwtbuild")),
        )

    def effective_modules(self, dev_task: bool = False) -> List[str]:
        """Dev tasks prefer dev_modules when any are configured."""
        if dev_task and self.dev_modules:
            return list(self.dev_modules)
        return list(self.modules)


def log_level_for(log: logging.Logger) -> LogLevel:
    """Map the effective level of a Python logger onto a GWT log level."""
    if log.isEnabledFor(logging.DEBUG):
        return LogLevel.DEBUG
    if log.isEnabledFor(logging.INFO):
        return LogLevel.INFO
    if log.isEnabledFor(logging.WARNING):
        return LogLevel.WARN
    return LogLevel.ERROR


_PATH_KEYS = {"project_dir", "build_dir", "dev_war", "extra_dir", "work_dir", "gen_dir", "cache_dir", "log_dir"}
_PATH_LIST_KEYS = {"src", "classpath"}
_STRING_LIST_KEYS = {"modules", "dev_modules"}
_BOOL_KEYS = {"codeserver", "elemental"}

_SUPER_DEV_PATH_KEYS = {"launcher_dir"}
_SUPER_DEV_INT_KEYS = {"port", "compile_test_recompiles"}
_SUPER_DEV_BOOL_KEYS = {
    "no_precompile",
    "use_classpath_for_src",
    "allow_missing_src",
    "fail_on_error",
    "compile_test",
    "closure_formatted_output",
}


def _normalize_key(key: str) -> str:
    """Accept both snake_case and the camelCase spelling of the build DSL."""
    out = []
    for ch in str(key).strip():
        if ch.isupper():
            out.append("_")
            out.append(ch.lower())
        elif ch == "-":
            out.append("_")
        else:
            out.append(ch)
    return "".join(out)


def _resolve_path(value: Any, base: Path) -> Path:
    path = Path(os.path.expanduser(str(value)))
    return path if path.is_absolute() else base / path


def _as_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    raise ConfigError(f"'{key}' must be true or false, got {value!r}")


def _as_int(key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{key}' must be an integer, got {value!r}")
    return value


def _as_list(key: str, value: Any) -> List[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, str):
        return [value]
    raise ConfigError(f"'{key}' must be a list, got {value!r}")


def _apply_super_dev(options: SuperDevOptions, data: Dict[str, Any], base: Path) -> None:
    known = {f.name for f in fields(SuperDevOptions)}
    for raw_key, value in data.items():
        key = _normalize_key(raw_key)
        if key not in known:
            logger.warning("Ignoring unknown superDev option: %s", raw_key)
            continue
        if value is None:
            setattr(options, key, None)
        elif key in _SUPER_DEV_PATH_KEYS:
            setattr(options, key, _resolve_path(value, base))
        elif key in _SUPER_DEV_INT_KEYS:
            setattr(options, key, _as_int(raw_key, value))
        elif key in _SUPER_DEV_BOOL_KEYS:
            setattr(options, key, _as_bool(raw_key, value))
        else:
            setattr(options, key, str(value))


def apply_config(extension: GwtExtension, data: Dict[str, Any], base: Path) -> GwtExtension:
    """Overlay a configuration mapping onto an extension in place.

    Raises:
        ConfigError: If a value has the wrong type.
    """
    known = {f.name for f in fields(GwtExtension)}
    for raw_key, value in data.items():
        key = _normalize_key(raw_key)
        if key not in known:
            logger.warning("Ignoring unknown gwt option: %s", raw_key)
            continue
        if key == "super_dev":
            if not isinstance(value, dict):
                raise ConfigError(f"'{raw_key}' must be a mapping")
            _apply_super_dev(extension.super_dev, value, base)
        elif key == "gwt_version":
            if isinstance(value, float):
                # YAML reads 2.10 as the float 2.1
                logger.warning("'%s' was read as a number (%s); quote it to keep it verbatim", raw_key, value)
            extension.gwt_version = None if value is None else str(value)
        elif key == "log_level":
            try:
                extension.log_level = None if value is None else LogLevel.parse(value)
            except ValueError as exc:
                raise ConfigError(str(exc)) from exc
        elif key in _BOOL_KEYS:
            setattr(extension, key, _as_bool(raw_key, value))
        elif key in _PATH_KEYS:
            setattr(extension, key, None if value is None else _resolve_path(value, base))
        elif key in _PATH_LIST_KEYS:
            setattr(extension, key, [_resolve_path(v, base) for v in _as_list(raw_key, value or [])])
        elif key in _STRING_LIST_KEYS:
            setattr(extension, key, [str(v) for v in _as_list(raw_key, value or [])])
        else:
            setattr(extension, key, None if value is None else str(value))
    return extension


def _read_config_file(config_path: str) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as fh:
            if config_path.lower().endswith(".json"):
                data = json.load(fh)
            else:
                data = yaml.safe_load(fh)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {config_path}: {exc}") from exc
    except (ValueError, yaml.YAMLError) as exc:
        raise ConfigError(f"Invalid config file {config_path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")
    section = data.get(Constants.EXTENSION_NAME, data)
    if not isinstance(section, dict):
        raise ConfigError(f"'{Constants.EXTENSION_NAME}' section of {config_path} must be a mapping")
    return section


def find_config(project_dir: os.PathLike) -> Optional[str]:
    """Return the first default config file present in the project dir."""
    for name in Constants.CONFIG_FILES:
        candidate = os.path.join(project_dir, name)
        if os.path.isfile(candidate):
            return candidate
    return None


def load_extension(config_path: Optional[str], project_dir: os.PathLike) -> GwtExtension:
    """Load the extension for a project.

    Args:
        config_path: Explicit YAML/JSON file; when None the default file names
            are looked up in project_dir.
        project_dir: Project root; relative paths resolve against it.

    Returns:
        GwtExtension with file values overlaid on the layout defaults.

    Raises:
        ConfigError: If the file cannot be parsed or has invalid values.
    """
    project = Path(project_dir)
    if config_path is None:
        config_path = find_config(project)
        if config_path is None:
            logger.debug("No config file found in %s, using defaults", project)
            return GwtExtension.defaults(project)

    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return GwtExtension.defaults(project)

    data = _read_config_file(config_path)

    # build_dir shifts every derived default, so it is applied first
    normalized = {_normalize_key(str(key)): value for key, value in data.items()}
    build_dir = normalized.get("build_dir")
    extension = GwtExtension.defaults(
        project, _resolve_path(build_dir, project) if build_dir is not None else None
    )
    apply_config(extension, data, project)
    logger.info("Loaded GWT configuration from: %s", config_path)
    return extension
