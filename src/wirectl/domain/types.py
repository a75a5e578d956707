"""Port directions and shared model constants."""

from __future__ import annotations

from enum import StrEnum

# Type label given to ports whose type was never specified.
UNKNOWN_TYPE = "unknown"

# Names, types and destinations longer than this are truncated.
MAX_FIELD_LENGTH = 63


class Direction(StrEnum):
    """Which side of a link a port sits on.

    ``NONE`` marks a port that was created but is not (or no longer)
    the source of a link.
    """

    NONE = "none"
    IN = "in"
    OUT = "out"

    @classmethod
    def parse(cls, value: str | None) -> Direction:
        """Map a stored string to a direction; anything unrecognised is NONE."""
        try:
            return cls(value or "none")
        except ValueError:
            return cls.NONE


def truncate(value: str, limit: int = MAX_FIELD_LENGTH) -> str:
    """Clip *value* to *limit* characters."""
    return value[:limit]
