"""Read-only views handed to the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from rotchess.core.enums import Side, TravelKind
from rotchess.core.kinds import PieceKind
from rotchess.core.piece import Piece, PieceId


class Navigation(IntEnum):
    """Turn-navigation requests."""

    FIRST = auto()
    PREV = auto()
    NEXT = auto()
    LAST = auto()


@dataclass(frozen=True, slots=True)
class PieceInfo:
    """One row of the piece listing."""

    id: PieceId
    x: float
    y: float
    angle: float
    side: Side
    kind: PieceKind
    alive: bool

    @classmethod
    def from_piece(cls, piece: Piece, alive: bool = True) -> PieceInfo:
        return cls(piece.id, piece.x, piece.y, piece.angle, piece.side, piece.kind, alive)


@dataclass(frozen=True, slots=True)
class TravelPoint:
    """A candidate destination of the selected piece."""

    x: float
    y: float
    kind: TravelKind
    travelable: bool
