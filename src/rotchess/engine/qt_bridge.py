"""Qt bridge to run the automated player's search in a worker thread."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from rotchess.core.errors import NoLegalMoveError
from rotchess.core.turns import Turns
from rotchess.engine.negamax import NegamaxEngine
from rotchess.engine.search import SearchLimits

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    The search runs on a private copy of the history, so the owning thread
    keeps exclusive access to its own :class:`Turns` and commits the emitted
    move itself.
    """

    best_move_ready = pyqtSignal(int, object, float, int)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_engine", "_limits")

    def __init__(self, *, max_depth: int | None = None) -> None:
        super().__init__()
        self._engine = NegamaxEngine()
        self._limits = (
            SearchLimits() if max_depth is None else SearchLimits(max_depth=max_depth)
        )

    @pyqtSlot(object, int)
    def request_move(self, turns_obj: object, request_id: int) -> None:
        """Search for the best move in *turns_obj* and emit the result."""
        if not isinstance(turns_obj, Turns):
            self.search_error.emit(request_id, "Engine received invalid turns")
            return

        try:
            result = self._engine.search(turns_obj.copy(), self._limits)
        except NoLegalMoveError:
            self.search_no_move.emit(request_id)
            return
        except Exception as exc:
            _LOGGER.exception("Engine search %d failed", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.nodes,
        )

    @pyqtSlot(int)
    def set_limits(self, max_depth: int) -> None:
        """Update the search depth (takes effect on the next search)."""
        self._limits = SearchLimits(max_depth=max_depth)
