"""Static evaluation.

The score is always from the perspective of the side to move: the search
maximises it and negates it when recursing.  Swapping the side to move on an
identical board negates the score exactly.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from rotchess.config import BOARD_CENTER

if TYPE_CHECKING:
    from rotchess.core.piece import Piece
    from rotchess.core.turns import Turns
    from rotchess.engine.search import Score

MATERIAL_SCALE = 100.0
CENTERING_BASE = 5.0


def piece_score(piece: Piece) -> Score:
    """Material plus a bonus for standing near the center, unsigned."""
    cx, cy = BOARD_CENTER
    center_distance = math.hypot(piece.x - cx, piece.y - cy)
    return piece.kind.material * MATERIAL_SCALE + (CENTERING_BASE - center_distance)


def evaluate(turns: Turns) -> Score:
    """Score of the working board for ``turns.side_to_move``."""
    perspective = turns.side_to_move.sign
    score = 0.0
    for piece in turns.working_board.alive_pieces():
        score += perspective * piece.side.sign * piece_score(piece)
    return score
