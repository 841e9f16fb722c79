"""Parsing of user supplied GWT version strings."""

import re
from typing import Optional

from .models import GwtVersion

PARSING_ERROR_MESSAGE_FORMAT = (
    "GWT version {} can not be parsed. Valid versions must have "
    "the format major.minor.patch where major and minor "
    "are positive integer numbers."
)

_UNSIGNED_INT_RE = re.compile(r"\+?[0-9]+")
_UNSIGNED_INT_MAX = 0xFFFFFFFF


class GwtVersionParseError(ValueError):
    """Raised when a version string is present but malformed."""

    def __init__(self, version: str):
        super().__init__(PARSING_ERROR_MESSAGE_FORMAT.format(version))
        self.version = version


def _parse_unsigned_int(text: str) -> int:
    """Parse a strict unsigned 32-bit integer (digits, optional leading '+')."""
    if not _UNSIGNED_INT_RE.fullmatch(text):
        raise ValueError(f"not an unsigned integer: {text!r}")
    value = int(text)
    if value > _UNSIGNED_INT_MAX:
        raise ValueError(f"unsigned integer out of range: {text!r}")
    return value


def parse_gwt_version(raw: Optional[str]) -> Optional[GwtVersion]:
    """Parse a GWT version string.

    Args:
        raw: Version string such as "2.8.2", "2.8" or "2.8.1-rc1".

    Returns:
        GwtVersion, or None when no version was given (None or blank).

    Raises:
        GwtVersionParseError: If the string is present but not parseable.
    """
    if raw is None or not raw.strip():
        return None

    parts = raw.split(".", 2)
    if len(parts) < 2:
        raise GwtVersionParseError(raw)
    try:
        major = _parse_unsigned_int(parts[0])
        minor = _parse_unsigned_int(parts[1])
    except ValueError as exc:
        raise GwtVersionParseError(raw) from exc

    patch = parts[2] if len(parts) == 3 else "0"
    return GwtVersion(major=major, minor=minor, patch=patch)
