"""Core enumerations."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Side color.  Black advances toward increasing y."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def sign(self) -> int:
        """+1 for white, -1 for black."""
        return 1 if self == Side.WHITE else -1

    @property
    def file_desc(self) -> str:
        return "W" if self == Side.WHITE else "B"

    def __str__(self) -> str:
        return self.name.lower()


class TravelKind(IntEnum):
    """Whether a travel point is reached by moving or by capturing."""

    MOVE = 0
    CAPTURE = 1
