"""Engine-wide constants.

All lengths are in board units (1/8 of the board side), all angles in radians.
"""

from __future__ import annotations

BOARD_SIZE = 8.0

# 17/50: a 50 px tile with a 17 px piece radius.
PIECE_RADIUS = 17.0 / 50.0

DRIFT_EPSILON = 1e-4

MAX_CAPTURES = 4

# Plies searched below each root move.  SearchLimits(max_depth=3) searches
# one ply deeper at roughly ten times the cost from the opening.
DEFAULT_SEARCH_DEPTH = 2

BOARD_CENTER: tuple[float, float] = (BOARD_SIZE / 2, BOARD_SIZE / 2)
