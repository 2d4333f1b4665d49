"""Turn history: branchable snapshots plus a mutable working board."""

from __future__ import annotations

from rotchess.core.board import Board
from rotchess.core.enums import Side
from rotchess.core.errors import ContractViolation
from rotchess.core.move import Move


class Turns:
    """Ordered board snapshots, a cursor and a working board.

    The working board mirrors the snapshot at the cursor until it is
    committed with :meth:`save_turn`.  Committing after rewinding discards
    every snapshot past the cursor.
    """

    __slots__ = ("_working", "_cursor", "_snapshots", "side_to_move")

    def __init__(self, board: Board, side_to_move: Side = Side.WHITE) -> None:
        self._working = board.copy()
        self._cursor = 0
        self._snapshots: list[Board] = [board.copy()]
        self.side_to_move = side_to_move

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def working_board(self) -> Board:
        """The only board callers may edit directly."""
        return self._working

    @property
    def current_snapshot(self) -> Board:
        """Stored snapshot at the cursor."""
        return self._snapshots[self._cursor]

    @property
    def curr_turn(self) -> int:
        return self._cursor

    @property
    def turn_count(self) -> int:
        return len(self._snapshots)

    def snapshot(self, turn: int) -> Board:
        return self._snapshots[turn]

    # ── Commit / navigation ──────────────────────────────────────────────

    def save_turn(self) -> None:
        """Store the working board right after the cursor and advance."""
        del self._snapshots[self._cursor + 1 :]
        self._snapshots.append(self._working.copy())
        self._cursor += 1

    def first(self) -> None:
        self._load_turn(0)

    def last(self) -> None:
        self._load_turn(len(self._snapshots) - 1)

    def prev(self) -> bool:
        """Step back one turn.  Returns ``False`` at the first turn."""
        if self._cursor == 0:
            return False
        self._load_turn(self._cursor - 1)
        return True

    def next(self) -> bool:
        """Step forward one turn.  Returns ``False`` at the last turn."""
        if self._cursor + 1 >= len(self._snapshots):
            return False
        self._load_turn(self._cursor + 1)
        return True

    def _load_turn(self, turn: int) -> None:
        self._working = self._snapshots[turn].copy()
        self._cursor = turn

    # ── Engine plies ─────────────────────────────────────────────────────

    def apply(self, move: Move) -> None:
        """Make *move* on the working board, commit it and flip the mover.

        The move is trusted apart from ownership: both phases must move a
        piece of the side to move.
        """
        board = self._working
        for pid in (move.travel.piece, move.rotate.piece):
            if board.piece(pid).side != self.side_to_move:
                raise ContractViolation(
                    f"Piece {pid} does not belong to {self.side_to_move}"
                )
        board.make_move(move)
        self.save_turn()
        self.side_to_move = self.side_to_move.opposite

    def unapply(self) -> None:
        """Undo the last :meth:`apply`, dropping the snapshot it committed."""
        if not self.prev():
            raise ContractViolation("No applied turn to undo")
        del self._snapshots[self._cursor + 1 :]
        self.side_to_move = self.side_to_move.opposite

    def stash(self) -> tuple[Board, list[Board]]:
        """Working board and redo snapshots, to hand back to :meth:`restore`."""
        return self._working.copy(), self._snapshots[self._cursor + 1 :]

    def restore(self, stashed: tuple[Board, list[Board]]) -> None:
        """Reinstate a :meth:`stash` taken at the current cursor.

        The stash stays reusable: the working board is copied out of it.
        """
        working, future = stashed
        del self._snapshots[self._cursor + 1 :]
        self._snapshots.extend(future)
        self._working = working.copy()

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Turns:
        """Independent copy, history included."""
        turns = Turns.__new__(Turns)
        turns._working = self._working.copy()
        turns._cursor = self._cursor
        turns._snapshots = [b.copy() for b in self._snapshots]
        turns.side_to_move = self.side_to_move
        return turns

    def __repr__(self) -> str:
        return (
            f"Turns(turn={self._cursor}/{len(self._snapshots) - 1}, "
            f"to_move={self.side_to_move.name})"
        )
