"""Move value objects: a travel phase plus a rotation phase."""

from __future__ import annotations

from dataclasses import dataclass

from rotchess.config import MAX_CAPTURES
from rotchess.core.errors import TooManyCapturesError
from rotchess.core.piece import PieceId, Point


@dataclass(frozen=True, slots=True)
class TravelPhase:
    """A piece travelling from ``src`` to ``dest``, capturing ``captures``."""

    piece: PieceId
    src: Point
    dest: Point
    captures: tuple[PieceId, ...] = ()

    def __post_init__(self) -> None:
        if len(self.captures) > MAX_CAPTURES:
            raise TooManyCapturesError(
                f"Travel of piece {self.piece} captures {len(self.captures)} pieces"
            )


@dataclass(frozen=True, slots=True)
class RotationPhase:
    """A piece rotating from angle ``src`` to angle ``dest``."""

    piece: PieceId
    src: float
    dest: float

    @property
    def is_noop(self) -> bool:
        return self.src == self.dest


@dataclass(frozen=True, slots=True)
class Move:
    """One ply: always a travel followed by a rotation.

    Both phases carry their source state so the move can be undone.
    """

    travel: TravelPhase
    rotate: RotationPhase

    @property
    def is_capture(self) -> bool:
        return bool(self.travel.captures)

    def __str__(self) -> str:
        sx, sy = self.travel.src
        dx, dy = self.travel.dest
        text = f"#{self.travel.piece} ({sx:g}, {sy:g})->({dx:g}, {dy:g})"
        if self.travel.captures:
            text += " x" + ",".join(f"#{pid}" for pid in self.travel.captures)
        if not self.rotate.is_noop:
            text += f" @{self.rotate.dest:.3f}"
        return text
