"""GWT version parsing and Maven metadata lookup."""

from .models import GwtVersion
from .parser import GwtVersionParseError, parse_gwt_version

__all__ = [
    "GwtVersion",
    "GwtVersionParseError",
    "parse_gwt_version",
]
