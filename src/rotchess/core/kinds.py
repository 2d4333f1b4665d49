"""Piece kinds and their movement catalog."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from rotchess.core.rays import Ray

_SQRT2 = math.sqrt(2.0)

# Distance formula with legs 1 and 2.
KNIGHT_DISTANCE = math.sqrt(5.0)

_NARROW = math.atan2(1.0, 2.0)
_WIDE = math.atan2(2.0, 1.0)
KNIGHT_ANGLES: tuple[float, ...] = (
    _NARROW,
    -_NARROW,
    -_WIDE,
    -(math.pi - _WIDE),
    -(math.pi - _NARROW),
    math.pi - _NARROW,
    math.pi - _WIDE,
    _WIDE,
)


class PieceKind(IntEnum):
    """Chess piece kinds."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def material(self) -> float:
        """Material value in pawns."""
        return _CATALOG[self].material

    @property
    def can_jump(self) -> bool:
        """Whether travel ignores pieces along the path."""
        return _CATALOG[self].can_jump

    @property
    def can_promote(self) -> bool:
        return _CATALOG[self].can_promote

    @property
    def move_rays(self) -> tuple[Ray, ...]:
        return _CATALOG[self].move_rays

    @property
    def capture_rays(self) -> tuple[Ray, ...]:
        return _CATALOG[self].capture_rays

    @property
    def file_desc(self) -> str:
        """Lower-case name, e.g. ``"knight"``."""
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class KindSpec:
    """Static description of how one kind of piece travels."""

    material: float
    can_jump: bool
    can_promote: bool
    move_rays: tuple[Ray, ...]
    capture_rays: tuple[Ray, ...]


def _level_rays() -> tuple[Ray, ...]:
    return tuple(Ray.range(1.0, 1.0, math.inf, i * math.pi / 2) for i in range(4))


def _diagonal_rays() -> tuple[Ray, ...]:
    return tuple(
        Ray.range(_SQRT2, _SQRT2, math.inf, i * math.pi / 2 + math.pi / 4)
        for i in range(4)
    )


def _king_rays() -> tuple[Ray, ...]:
    return tuple(
        Ray.single(1.0 if i % 2 == 0 else _SQRT2, i * math.pi / 4) for i in range(8)
    )


def _knight_rays() -> tuple[Ray, ...]:
    return tuple(Ray.single(KNIGHT_DISTANCE, angle) for angle in KNIGHT_ANGLES)


def _build_catalog() -> dict[PieceKind, KindSpec]:
    level = _level_rays()
    diagonal = _diagonal_rays()
    king = _king_rays()
    knight = _knight_rays()
    return {
        PieceKind.PAWN: KindSpec(
            material=1.0,
            can_jump=True,
            can_promote=True,
            move_rays=(Ray.repeated(1.0, 1.0, 2, 0.0),),
            capture_rays=(
                Ray.single(_SQRT2, math.pi / 4),
                Ray.single(_SQRT2, -math.pi / 4),
            ),
        ),
        PieceKind.KNIGHT: KindSpec(3.0, True, False, knight, knight),
        PieceKind.BISHOP: KindSpec(3.0, False, False, diagonal, diagonal),
        PieceKind.ROOK: KindSpec(5.0, False, False, level, level),
        PieceKind.QUEEN: KindSpec(9.0, False, False, level + diagonal, level + diagonal),
        PieceKind.KING: KindSpec(1000.0, True, False, king, king),
    }


_CATALOG: dict[PieceKind, KindSpec] = _build_catalog()


def kind_spec(kind: PieceKind) -> KindSpec:
    """Catalog entry for *kind*."""
    return _CATALOG[kind]


# Back rank in file order for the standard layout.
BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)
