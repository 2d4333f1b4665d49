"""Negamax + alpha-beta search over the turn history."""

from __future__ import annotations

import logging
import math

from rotchess.core.errors import NoLegalMoveError
from rotchess.core.move import Move, RotationPhase
from rotchess.core.turns import Turns
from rotchess.engine.evaluate import evaluate
from rotchess.engine.search import IEngine, Score, SearchLimits, SearchResult

_LOGGER = logging.getLogger(__name__)

_INF_SCORE = math.inf


class NegamaxEngine(IEngine):
    """Fixed-depth fail-soft negamax with alpha-beta pruning.

    Moves are applied through :meth:`Turns.apply` and undone with
    :meth:`Turns.unapply`, so every ply of the search is a real (temporary)
    history commit.  Rotation is never searched: every generated move keeps
    the piece's current angle.
    """

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes = 0

    @property
    def nodes(self) -> int:
        """Nodes visited by the last search."""
        return self._nodes

    def search(self, turns: Turns, limits: SearchLimits) -> SearchResult:
        """Score every root move and return the best one.

        Leaves the history exactly as it found it, including redo snapshots
        and uncommitted edits to the working board.
        """
        self._nodes = 0
        # Captures and promotions since the last search may have left caches stale.
        turns.working_board.init_all_travel_points()
        turns.current_snapshot.init_all_travel_points()

        root_moves = self.generate_moves(turns)
        if not root_moves:
            raise NoLegalMoveError(f"{turns.side_to_move} has no legal move")

        stashed = turns.stash()
        best_score = -_INF_SCORE
        best_move = root_moves[0]
        for move in root_moves:
            turns.apply(move)
            try:
                score = -self._negamax(
                    turns, limits.max_depth, -_INF_SCORE, _INF_SCORE
                )
            finally:
                turns.unapply()
                turns.restore(stashed)

            # Ties go to the later move.
            if score >= best_score:
                best_score = score
                best_move = move

        _LOGGER.debug(
            "Searched %d root moves, %d nodes at depth %d",
            len(root_moves),
            self._nodes,
            limits.max_depth,
        )
        return SearchResult(best_move, best_score, limits.max_depth, self._nodes)

    def pick_best_move(
        self, turns: Turns, limits: SearchLimits | None = None
    ) -> SearchResult:
        """Search, then commit the chosen move for the side to move."""
        result = self.search(turns, limits or SearchLimits())
        mover = turns.side_to_move
        turns.apply(result.best_move)
        _LOGGER.info(
            "%s plays %s (score %.2f, %d nodes)",
            mover,
            result.best_move,
            result.score,
            result.nodes,
        )
        return result

    def generate_moves(self, turns: Turns) -> list[Move]:
        """Every legal translation for the side to move, rotation unchanged."""
        board = turns.working_board
        board.init_all_travel_points()

        moves: list[Move] = []
        for piece in board.alive_pieces(turns.side_to_move):
            rotation = RotationPhase(piece.id, piece.angle, piece.angle)
            for kind, x, y in piece.travel_points():
                travel = board.travelable(piece, x, y, kind)
                if travel is not None:
                    moves.append(Move(travel, rotation))
        return moves

    def _negamax(self, turns: Turns, depth: int, alpha: Score, beta: Score) -> Score:
        self._nodes += 1
        if depth == 0:
            return evaluate(turns)

        best_score = -_INF_SCORE
        for move in self.generate_moves(turns):
            turns.apply(move)
            score = -self._negamax(turns, depth - 1, -beta, -alpha)
            turns.unapply()

            if score > best_score:
                best_score = score
                if score > alpha:
                    alpha = score
            if score >= beta:
                break

        return best_score
