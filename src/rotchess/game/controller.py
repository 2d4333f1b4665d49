"""GameController: the entry point a presentation layer drives.

Holds the turn history, the current selection and its travel points.  Emits
events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from rotchess.core.board import Board
from rotchess.core.enums import Side
from rotchess.core.errors import ContractViolation
from rotchess.core.piece import PieceId
from rotchess.core.turns import Turns
from rotchess.engine.negamax import NegamaxEngine
from rotchess.engine.search import IEngine, SearchLimits
from rotchess.game.interfaces import Navigation, PieceInfo, TravelPoint

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[PieceId, float, float], None]  # piece, x, y
RotateCallback = Callable[[PieceId, float], None]  # piece, angle
NavigateCallback = Callable[[Navigation, int], None]  # request, turn index


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rotate: list[RotateCallback] = field(default_factory=list)
    on_navigate: list[NavigateCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a rotchess game: selection, manual travel, rotation,
    turn navigation and the automated player.

    Turn order is not enforced for manual play; after every committed action
    the side to move becomes the opponent of the piece that acted.

    Thread-safety: methods are designed to be called from a single thread.
    """

    __slots__ = (
        "_turns",
        "_engine",
        "_limits",
        "_selected",
        "_travel_points",
        "events",
    )

    def __init__(
        self,
        board: Board | None = None,
        *,
        side_to_move: Side = Side.WHITE,
        engine: IEngine | None = None,
        limits: SearchLimits | None = None,
    ) -> None:
        self._turns = Turns(board if board is not None else Board.standard(), side_to_move)
        self._engine: IEngine = engine if engine is not None else NegamaxEngine()
        self._limits = limits or SearchLimits()
        self._selected: PieceId | None = None
        self._travel_points: list[TravelPoint] = []
        self.events = GameEvents()

    def new_game(self, board: Board | None = None, side_to_move: Side = Side.WHITE) -> None:
        """Discard the history and start again from *board*."""
        self._turns = Turns(board if board is not None else Board.standard(), side_to_move)
        self.deselect()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def turns(self) -> Turns:
        return self._turns

    @property
    def board(self) -> Board:
        return self._turns.working_board

    @property
    def side_to_move(self) -> Side:
        return self._turns.side_to_move

    @property
    def selected_id(self) -> PieceId | None:
        return self._selected

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    @limits.setter
    def limits(self, value: SearchLimits) -> None:
        self._limits = value

    # ── Queries ──────────────────────────────────────────────────────────

    def pieces(self) -> list[PieceInfo]:
        """Every piece in id order, dead ones flagged."""
        return [PieceInfo.from_piece(p, alive) for alive, p in self.board.slots()]

    def selected(self) -> tuple[PieceInfo, list[TravelPoint]] | None:
        """The selected piece and its travel points, if a piece is selected."""
        if self._selected is None:
            return None
        piece = self.board.piece(self._selected)
        return PieceInfo.from_piece(piece), list(self._travel_points)

    # ── Selection ────────────────────────────────────────────────────────

    def select(self, piece_id: PieceId) -> bool:
        """Select an alive piece.  Returns ``False`` for a dead or unknown id."""
        if not self.board.is_alive(piece_id):
            return False
        self._selected = piece_id
        self._refresh_travel_points()
        return True

    def select_at(self, x: float, y: float) -> PieceId | None:
        """Click-style selection at a point.

        Clicking the selected piece or empty space deselects; clicking another
        piece selects it.  Returns the new selection.
        """
        piece_id = self.board.piece_at(x, y)
        if piece_id is None or piece_id == self._selected:
            self.deselect()
        else:
            self.select(piece_id)
        return self._selected

    def deselect(self) -> None:
        self._selected = None
        self._travel_points = []

    # ── Manual play ──────────────────────────────────────────────────────

    def travel_to(self, index: int) -> bool:
        """Travel the selected piece to its travel point *index*.

        Returns ``False`` when nothing is selected or the point is not
        currently travelable.
        """
        if self._selected is None or not 0 <= index < len(self._travel_points):
            return False
        point = self._travel_points[index]
        if not point.travelable:
            return False

        piece_id = self._selected
        self._commit_travel(piece_id, point.x, point.y)
        self.deselect()
        self._emit_move(piece_id, point.x, point.y)
        return True

    def rotate_selected(self, angle: float) -> None:
        """Turn the selected piece on the working board without committing."""
        if self._selected is None:
            raise ContractViolation("No piece is selected")
        self.board.piece(self._selected).angle = angle
        self._refresh_travel_points()

    def commit_rotation(self) -> bool:
        """Commit the selected piece's current angle as a turn."""
        if self._selected is None:
            return False
        piece = self.board.piece(self._selected)
        self._turns.save_turn()
        self._turns.side_to_move = piece.side.opposite
        self.deselect()
        self._emit_rotate(piece.id, piece.angle)
        return True

    # ── Automated player ─────────────────────────────────────────────────

    def make_best_move(self) -> None:
        """Let the engine move for the side to move and commit the result."""
        self.deselect()
        result = self._engine.pick_best_move(self._turns, self._limits)
        dest_x, dest_y = result.best_move.travel.dest
        self._emit_move(result.best_move.travel.piece, dest_x, dest_y)

    # ── Unchecked administration ─────────────────────────────────────────

    def move_unchecked(self, piece_id: PieceId, x: float, y: float) -> None:
        """Travel a piece without any legality check and commit it."""
        self._require_no_selection()
        self._commit_travel(piece_id, x, y)
        self._emit_move(piece_id, x, y)

    def rotate_unchecked(self, piece_id: PieceId, angle: float) -> None:
        """Rotate a piece without any legality check and commit it."""
        self._require_no_selection()
        piece = self.board.piece(piece_id)
        piece.angle = angle
        self._turns.save_turn()
        self._turns.side_to_move = piece.side.opposite
        self._emit_rotate(piece_id, angle)

    # ── Navigation ───────────────────────────────────────────────────────

    def first_turn(self) -> None:
        self._turns.first()
        self._after_navigation(Navigation.FIRST)

    def last_turn(self) -> None:
        self._turns.last()
        self._after_navigation(Navigation.LAST)

    def prev_turn(self) -> bool:
        moved = self._turns.prev()
        self._after_navigation(Navigation.PREV)
        return moved

    def next_turn(self) -> bool:
        moved = self._turns.next()
        self._after_navigation(Navigation.NEXT)
        return moved

    # ── Internal helpers ─────────────────────────────────────────────────

    def _commit_travel(self, piece_id: PieceId, x: float, y: float) -> None:
        board = self.board
        board.travel(piece_id, x, y)
        piece = board.piece(piece_id)
        piece.init_travel_points()
        self._turns.save_turn()
        self._turns.side_to_move = piece.side.opposite

    def _refresh_travel_points(self) -> None:
        board = self.board
        piece = board.piece(self._selected)  # type: ignore[arg-type]
        piece.init_travel_points()
        points: list[TravelPoint] = []
        for kind, x, y in piece.travel_points():
            legal = board.travelable(piece, x, y, kind) is not None
            points.append(TravelPoint(x, y, kind, legal))
        self._travel_points = points

    def _require_no_selection(self) -> None:
        if self._selected is not None:
            raise ContractViolation(
                "Unchecked changes require that no piece is selected"
            )

    def _after_navigation(self, request: Navigation) -> None:
        self.deselect()
        for cb in self.events.on_navigate:
            cb(request, self._turns.curr_turn)

    def _emit_move(self, piece_id: PieceId, x: float, y: float) -> None:
        for cb in self.events.on_move:
            cb(piece_id, x, y)

    def _emit_rotate(self, piece_id: PieceId, angle: float) -> None:
        for cb in self.events.on_rotate:
            cb(piece_id, angle)
