"""Core domain layer: continuous-board chess logic with zero external dependencies.

Quick start::

    from rotchess.core import Board, Turns, TravelKind

    turns = Turns(Board.standard())
    board = turns.working_board
    board.init_all_travel_points()
    knight = board.piece(19)
    for kind, x, y in knight.travel_points():
        print(kind, x, y, board.travelable(knight, x, y, kind) is not None)
"""

from rotchess.core.board import Board
from rotchess.core.drift import drift_adjust
from rotchess.core.enums import Side, TravelKind
from rotchess.core.errors import (
    ContractViolation,
    InvalidLayoutError,
    NoLegalMoveError,
    RotchessError,
    StaleTravelPointsError,
    TooManyCapturesError,
    UnknownPieceError,
)
from rotchess.core.kinds import BACK_RANK, KindSpec, PieceKind, kind_spec
from rotchess.core.move import Move, RotationPhase, TravelPhase
from rotchess.core.piece import (
    Piece,
    PieceId,
    Point,
    collidepoint_generic,
    on_board,
    should_promote,
)
from rotchess.core.rays import Ray
from rotchess.core.turns import Turns

__all__ = [
    # Enums / catalog
    "BACK_RANK",
    "KindSpec",
    "PieceKind",
    "Side",
    "TravelKind",
    "kind_spec",
    # Geometry
    "Point",
    "Ray",
    "collidepoint_generic",
    "drift_adjust",
    "on_board",
    "should_promote",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    "PieceId",
    "RotationPhase",
    "TravelPhase",
    "Turns",
    # Errors
    "ContractViolation",
    "InvalidLayoutError",
    "NoLegalMoveError",
    "RotchessError",
    "StaleTravelPointsError",
    "TooManyCapturesError",
    "UnknownPieceError",
]
