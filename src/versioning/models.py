"""Data models for GWT toolchain versions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GwtVersion:
    """A parsed ``major.minor[.patch]`` GWT version.

    The patch component stays a string because release identifiers such as
    ``0-rc1`` are not numeric.
    """
    major: int
    minor: int
    patch: str

    def is_at_least(self, major_min: int, minor_min: int) -> bool:
        """Return True if (major, minor) is at or above the given floor.

        The patch component never takes part in the comparison.
        """
        return self.major > major_min or (self.major == major_min and self.minor >= minor_min)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"
