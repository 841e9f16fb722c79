"""Settings consumed by the Super Dev Mode argument builder.

Every field is optional: ``None`` means "not configured" and suppresses the
corresponding Code Server argument. Booleans are tri-state, so ``False`` is a
real value (it emits the negative flag) and is never used as a stand-in for
"unset".
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from extension import GwtExtension


class LogLevel(Enum):
    """Log levels understood by the GWT tools."""
    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    SPAM = "SPAM"
    ALL = "ALL"

    @classmethod
    def parse(cls, text: str) -> "LogLevel":
        """Case-insensitive lookup by name; raises ValueError when unknown."""
        try:
            return cls[str(text).strip().upper()]
        except KeyError:
            valid = ", ".join(m.name for m in cls)
            raise ValueError(f"Unknown GWT log level '{text}' (expected one of: {valid})") from None

    def __str__(self) -> str:
        return self.value


@dataclass
class DevServerSettings:  # pylint: disable=too-many-instance-attributes
    """Options for one Code Server invocation."""

    src: Optional[List[Path]] = None
    use_classpath_for_src: Optional[bool] = None
    work_dir: Optional[Path] = None
    bind_address: Optional[str] = None
    port: Optional[int] = None
    no_precompile: Optional[bool] = None
    allow_missing_src: Optional[bool] = None
    fail_on_error: Optional[bool] = None
    compile_test: Optional[bool] = None
    compile_test_recompiles: Optional[int] = None
    launcher_dir: Optional[Path] = None
    log_level: Optional[LogLevel] = None
    closure_formatted_output: Optional[bool] = None


def merge_settings(overrides: DevServerSettings, defaults: DevServerSettings) -> DevServerSettings:
    """Overlay per-invocation overrides on extension defaults.

    A field of ``overrides`` wins whenever it is not None; otherwise the
    default is kept. Neither input is modified.
    """
    changes = {}
    for f in fields(DevServerSettings):
        value = getattr(overrides, f.name)
        if value is not None:
            changes[f.name] = value
    return replace(defaults, **changes)


def settings_from_extension(extension: "GwtExtension") -> DevServerSettings:
    """Build the defaults layer from the project-level extension.

    Super Dev options come from ``extension.super_dev``; the source dirs, the
    work dir and the log level are shared with the other GWT tasks and come
    from the extension itself.
    """
    options = extension.super_dev
    return DevServerSettings(
        src=list(extension.src) if extension.src is not None else None,
        use_classpath_for_src=options.use_classpath_for_src,
        work_dir=extension.work_dir,
        bind_address=options.bind_address,
        port=options.port,
        no_precompile=options.no_precompile,
        allow_missing_src=options.allow_missing_src,
        fail_on_error=options.fail_on_error,
        compile_test=options.compile_test,
        compile_test_recompiles=options.compile_test_recompiles,
        launcher_dir=options.launcher_dir,
        log_level=extension.log_level,
        closure_formatted_output=options.closure_formatted_output,
    )
