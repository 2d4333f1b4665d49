"""Board: a stable-identity arena of pieces plus the legality oracle."""

from __future__ import annotations

import math
import random
from collections.abc import Iterator, Sequence

from rotchess.config import MAX_CAPTURES, PIECE_RADIUS
from rotchess.core.enums import Side, TravelKind
from rotchess.core.errors import (
    InvalidLayoutError,
    TooManyCapturesError,
    UnknownPieceError,
)
from rotchess.core.kinds import BACK_RANK, PieceKind
from rotchess.core.move import Move, TravelPhase
from rotchess.core.piece import Piece, PieceId

_BLACK_ANGLE = -math.pi
_WHITE_ANGLE = 0.0


class Board:
    """Fixed-capacity table of ``(alive, piece)`` slots indexed by piece id.

    Ids are assigned once at construction and never reused.  Captured pieces
    are marked dead rather than removed, so an id stays a valid reference for
    the whole game, including across search recursion and history rewinds.
    """

    __slots__ = ("_alive", "_pieces")

    def __init__(self, pieces: Sequence[Piece] = ()) -> None:
        for idx, piece in enumerate(pieces):
            if piece.id != idx:
                raise InvalidLayoutError(
                    f"Piece ids must equal their index, got id {piece.id} at {idx}"
                )
        self._pieces: list[Piece] = list(pieces)
        self._alive: list[bool] = [True] * len(self._pieces)

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def standard(cls) -> Board:
        """Standard starting layout."""
        return cls._with_back_rank(BACK_RANK)

    @classmethod
    def shuffled(cls, ordering: Sequence[int]) -> Board:
        """Layout with a shuffled back rank (the "960" setup).

        *ordering* must be a permutation of ``0..8``; file ``i`` receives the
        piece at ``BACK_RANK[ordering[i]]``.
        """
        if sorted(ordering) != list(range(len(BACK_RANK))):
            raise InvalidLayoutError(
                f"Back-rank ordering must be a permutation of 0..7, got {list(ordering)}"
            )
        return cls._with_back_rank(tuple(BACK_RANK[i] for i in ordering))

    @classmethod
    def random_shuffled(cls, rng: random.Random | None = None) -> Board:
        """Shuffled layout drawn from *rng* (module-level RNG by default)."""
        ordering = list(range(len(BACK_RANK)))
        (rng or random).shuffle(ordering)
        return cls.shuffled(ordering)

    @classmethod
    def _with_back_rank(cls, back_rank: Sequence[PieceKind]) -> Board:
        # Black sits on ranks 0-1 facing +y, white on ranks 6-7 facing -y.
        pieces: list[Piece] = []
        for f in range(8):
            pieces.append(
                Piece.from_tile(2 * f, (f, 1), _BLACK_ANGLE, Side.BLACK, PieceKind.PAWN)
            )
            pieces.append(
                Piece.from_tile(
                    2 * f + 1, (f, 6), _WHITE_ANGLE, Side.WHITE, PieceKind.PAWN
                )
            )
        for f, kind in enumerate(back_rank):
            pieces.append(
                Piece.from_tile(16 + 2 * f, (f, 0), _BLACK_ANGLE, Side.BLACK, kind)
            )
            pieces.append(
                Piece.from_tile(17 + 2 * f, (f, 7), _WHITE_ANGLE, Side.WHITE, kind)
            )
        return cls(pieces)

    # ── Element access ───────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._pieces)

    def is_alive(self, piece_id: PieceId) -> bool:
        return 0 <= piece_id < len(self._pieces) and self._alive[piece_id]

    def get(self, piece_id: PieceId) -> Piece | None:
        """The alive piece with *piece_id*, or ``None``."""
        if self.is_alive(piece_id):
            return self._pieces[piece_id]
        return None

    def piece(self, piece_id: PieceId) -> Piece:
        """The alive piece with *piece_id*; the caller guarantees it exists."""
        if not self.is_alive(piece_id):
            raise UnknownPieceError(f"No alive piece with id {piece_id}")
        return self._pieces[piece_id]

    def slots(self) -> Iterator[tuple[bool, Piece]]:
        """Every slot in id order, dead ones included."""
        return zip(self._alive, self._pieces)

    def alive_pieces(self, side: Side | None = None) -> Iterator[Piece]:
        for alive, piece in zip(self._alive, self._pieces):
            if alive and (side is None or piece.side == side):
                yield piece

    def piece_at(self, x: float, y: float) -> PieceId | None:
        """Id of the alive piece containing the point (x, y), if any."""
        for piece in self.alive_pieces():
            if piece.collidepoint(x, y):
                return piece.id
        return None

    def init_all_travel_points(self) -> None:
        """(Re)initialise the travel-point cache of every alive piece."""
        for piece in self.alive_pieces():
            piece.init_travel_points()

    # ── Legality ─────────────────────────────────────────────────────────

    def travelable(
        self,
        piece: Piece,
        x: float,
        y: float,
        kind: TravelKind,
    ) -> TravelPhase | None:
        """The travel of *piece* to (x, y) as *kind*, or ``None`` if illegal.

        A travel is illegal when it lands on a friendly piece, when a
        non-jumping piece's path is blocked, when a capture lands on nothing,
        or when a move lands on an enemy.  All comparisons are strict, so
        exactly tangent or collinear pieces neither block nor overlap.
        """
        overlapping: list[PieceId] = []
        for other in self.alive_pieces():
            if other.id == piece.id:
                continue
            if other.collidepiece(x, y):
                if other.side == piece.side:
                    return None
                overlapping.append(other.id)

        if not piece.kind.can_jump and self._is_blocked(piece, x, y, overlapping):
            return None

        if kind == TravelKind.CAPTURE:
            if not overlapping:
                return None
        elif overlapping:
            return None

        if len(overlapping) > MAX_CAPTURES:
            raise TooManyCapturesError(
                f"Travel of piece {piece.id} to ({x}, {y}) captures "
                f"{len(overlapping)} pieces"
            )
        return TravelPhase(piece.id, piece.center, (x, y), tuple(overlapping))

    def _is_blocked(
        self,
        piece: Piece,
        x: float,
        y: float,
        overlapping: Sequence[PieceId],
    ) -> bool:
        px, py = piece.center
        dx, dy = x - px, y - py
        length = math.hypot(dx, dy)
        if length == 0.0:
            return False
        reach = length + PIECE_RADIUS
        for other in self.alive_pieces():
            if other.id == piece.id or other.id in overlapping:
                continue
            vx, vy = other.x - px, other.y - py
            along = (dx * vx + dy * vy) / length
            if not 0.0 < along < reach:
                continue
            if abs(dx * vy - vx * dy) / length < 2 * PIECE_RADIUS:
                return True
        return False

    # ── Mutation ─────────────────────────────────────────────────────────

    def make_move(self, move: Move) -> None:
        """Apply a validated *move*.  No legality checks are made."""
        travel = move.travel
        self.piece(travel.piece).center = travel.dest
        for pid in travel.captures:
            self._alive[pid] = False
        self.piece(move.rotate.piece).angle = move.rotate.dest

    def unmake_move(self, move: Move) -> None:
        """Reverse :meth:`make_move`."""
        self.piece(move.rotate.piece).angle = move.rotate.src
        travel = move.travel
        self.piece(travel.piece).center = travel.src
        for pid in travel.captures:
            self._alive[pid] = True

    def travel(self, piece_id: PieceId, x: float, y: float) -> None:
        """Move a piece directly, capturing whatever it lands on.

        Promotion to queen happens here and reinitialises the travel points.
        """
        piece = self.piece(piece_id)
        for pid, other in enumerate(self._pieces):
            if pid != piece_id and self._alive[pid] and other.collidepiece(x, y):
                self._alive[pid] = False

        piece.center = (x, y)
        if piece.should_promote():
            piece.kind = PieceKind.QUEEN
            piece.init_travel_points()

    # ── Copying / dunders ────────────────────────────────────────────────

    def copy(self) -> Board:
        b = Board.__new__(Board)
        b._pieces = [p.copy() for p in self._pieces]
        b._alive = self._alive.copy()
        return b

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._alive == other._alive and self._pieces == other._pieces

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        alive = sum(self._alive)
        return f"Board({alive}/{len(self._pieces)} alive)"
