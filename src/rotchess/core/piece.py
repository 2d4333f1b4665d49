"""Piece: mutable position/angle/kind plus lazily cached travel points."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from rotchess.config import BOARD_SIZE, PIECE_RADIUS
from rotchess.core.enums import Side, TravelKind
from rotchess.core.errors import StaleTravelPointsError
from rotchess.core.kinds import PieceKind
from rotchess.core.rays import Ray

Point = tuple[float, float]
PieceId = int


@dataclass(frozen=True, slots=True)
class _TravelPointCache:
    """Points computed for one (center, angle, kind) state of a piece."""

    center: Point
    angle: float
    kind: PieceKind
    move_points: tuple[Point, ...]
    capture_points: tuple[Point, ...]


def collidepoint_generic(x1: float, y1: float, x2: float, y2: float) -> bool:
    """If one coordinate is a piece center and the other a point, do they collide?"""
    return (x1 - x2) ** 2 + (y1 - y2) ** 2 < PIECE_RADIUS**2


def on_board(x: float, y: float) -> bool:
    """Whether a piece centered at (x, y) is on the board, one radius of slack."""
    margin = PIECE_RADIUS
    return not (
        x < -margin
        or x > BOARD_SIZE + margin
        or y < -margin
        or y > BOARD_SIZE + margin
    )


def should_promote(kind: PieceKind, side: Side, y: float) -> bool:
    """Whether a piece of *kind* and *side* promotes with its center at height *y*."""
    if not kind.can_promote:
        return False
    if side == Side.BLACK:
        return y + PIECE_RADIUS > BOARD_SIZE - 1
    return y - PIECE_RADIUS < 1


class Piece:
    """A piece on the continuous board.

    The travel-point cache must be initialised with
    :meth:`init_travel_points` and refreshed after every change to the
    center, angle or kind.  Reading it otherwise raises
    :class:`StaleTravelPointsError`.
    """

    __slots__ = ("_id", "_center", "_angle", "_side", "_kind", "_cache")

    def __init__(
        self,
        piece_id: PieceId,
        center: Point,
        angle: float,
        side: Side,
        kind: PieceKind,
    ) -> None:
        self._id = piece_id
        self._center = (float(center[0]), float(center[1]))
        self._angle = float(angle)
        self._side = side
        self._kind = kind
        self._cache: _TravelPointCache | None = None

    @classmethod
    def from_tile(
        cls,
        piece_id: PieceId,
        tile: tuple[int, int],
        angle: float,
        side: Side,
        kind: PieceKind,
    ) -> Piece:
        """Piece centered on a tile, i.e. tile (0, 0) has center (0.5, 0.5)."""
        file_idx, rank_idx = tile
        return cls(piece_id, (file_idx + 0.5, rank_idx + 0.5), angle, side, kind)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def id(self) -> PieceId:
        return self._id

    @property
    def center(self) -> Point:
        return self._center

    @center.setter
    def center(self, value: Point) -> None:
        self._center = (float(value[0]), float(value[1]))

    @property
    def x(self) -> float:
        return self._center[0]

    @x.setter
    def x(self, value: float) -> None:
        self._center = (float(value), self._center[1])

    @property
    def y(self) -> float:
        return self._center[1]

    @y.setter
    def y(self, value: float) -> None:
        self._center = (self._center[0], float(value))

    @property
    def angle(self) -> float:
        return self._angle

    @angle.setter
    def angle(self, value: float) -> None:
        self._angle = float(value)

    @property
    def side(self) -> Side:
        return self._side

    @property
    def kind(self) -> PieceKind:
        return self._kind

    @kind.setter
    def kind(self, value: PieceKind) -> None:
        self._kind = value

    # ── Geometry ─────────────────────────────────────────────────────────

    def forward_distance(self) -> float:
        """Distance travelled away from this piece's home edge."""
        if self._side == Side.BLACK:
            return self.y
        return BOARD_SIZE - self.y

    def collidepoint(self, x: float, y: float) -> bool:
        """Whether the point (x, y) lies inside this piece."""
        return collidepoint_generic(x, y, self._center[0], self._center[1])

    def collidepiece(self, x: float, y: float) -> bool:
        """Whether a piece centered at (x, y) would overlap this piece."""
        cx, cy = self._center
        return (x - cx) ** 2 + (y - cy) ** 2 < (PIECE_RADIUS * 2) ** 2

    def should_promote(self) -> bool:
        return should_promote(self._kind, self._side, self.y)

    # ── Travel points ────────────────────────────────────────────────────

    @property
    def needs_init(self) -> bool:
        """Whether the cache is missing or no longer matches this piece."""
        cache = self._cache
        return (
            cache is None
            or cache.center != self._center
            or cache.angle != self._angle
            or cache.kind != self._kind
        )

    def init_travel_points(self) -> None:
        """(Re)compute the cached move and capture points."""
        self._cache = _TravelPointCache(
            center=self._center,
            angle=self._angle,
            kind=self._kind,
            move_points=tuple(self._drawable_points(self._kind.move_rays)),
            capture_points=tuple(self._drawable_points(self._kind.capture_rays)),
        )

    @property
    def move_points(self) -> tuple[Point, ...]:
        return self._checked_cache().move_points

    @property
    def capture_points(self) -> tuple[Point, ...]:
        return self._checked_cache().capture_points

    def travel_points(self) -> Iterator[tuple[TravelKind, float, float]]:
        """Move points then capture points, tagged with their kind.

        These ignore every other piece; :meth:`Board.travelable` decides
        legality.
        """
        cache = self._checked_cache()
        for x, y in cache.move_points:
            yield TravelKind.MOVE, x, y
        for x, y in cache.capture_points:
            yield TravelKind.CAPTURE, x, y

    def _checked_cache(self) -> _TravelPointCache:
        if self.needs_init:
            raise StaleTravelPointsError(
                f"Travel points of piece {self._id} read before initialisation"
            )
        assert self._cache is not None
        return self._cache

    def _drawable_points(self, rays: Iterable[Ray]) -> Iterator[Point]:
        # Local angle 0 is the piece's forward: -y for angle 0.
        world_angle = self._angle + math.pi / 2
        cx, cy = self._center
        for ray in rays:
            for dx, dy in ray.offsets(world_angle):
                x, y = dx + cx, dy + cy
                # Rays only advance, so nothing further along is on the board.
                if not on_board(x, y):
                    break
                yield x, y

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Piece:
        """Copy sharing the (immutable) travel-point cache."""
        clone = Piece(self._id, self._center, self._angle, self._side, self._kind)
        clone._cache = self._cache
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return (
            self._id == other._id
            and self._center == other._center
            and self._angle == other._angle
            and self._side == other._side
            and self._kind == other._kind
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Piece(id={self._id}, x={self.x}, y={self.y}, angle={self._angle}, "
            f"side={self._side.name}, kind={self._kind.name})"
        )
