"""GWT Super Dev Mode: settings, Code Server arguments and launching."""

from .arguments import arg_on_off, build_args
from .settings import DevServerSettings, LogLevel, merge_settings

__all__ = [
    "DevServerSettings",
    "LogLevel",
    "arg_on_off",
    "build_args",
    "merge_settings",
]
