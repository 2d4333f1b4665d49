"""Tests for Qt engine bridge worker."""

from __future__ import annotations

from PyQt6.QtTest import QSignalSpy

from rotchess.core.board import Board
from rotchess.core.move import Move
from rotchess.core.turns import Turns
from rotchess.engine.qt_bridge import EngineWorker


class _FailingEngine:
    def search(self, _turns: Turns, _limits: object) -> None:
        raise RuntimeError("boom")


class TestEngineWorker:
    def test_emits_best_move(self, qapp: object, standard_turns: Turns) -> None:
        del qapp
        worker = EngineWorker(max_depth=0)

        best_moves = QSignalSpy(worker.best_move_ready)
        errors = QSignalSpy(worker.search_error)

        worker.request_move(standard_turns, 3)

        assert len(best_moves) == 1
        assert best_moves[0][0] == 3
        assert isinstance(best_moves[0][1], Move)
        assert len(errors) == 0
        assert standard_turns.turn_count == 1
        assert standard_turns.working_board == Board.standard()

    def test_emits_no_move_on_empty_board(self, qapp: object) -> None:
        del qapp
        worker = EngineWorker(max_depth=1)

        no_move = QSignalSpy(worker.search_no_move)
        best_moves = QSignalSpy(worker.best_move_ready)

        worker.request_move(Turns(Board([])), 11)

        assert len(no_move) == 1
        assert no_move[0][0] == 11
        assert len(best_moves) == 0

    def test_rejects_non_turns_payload(self, qapp: object) -> None:
        del qapp
        worker = EngineWorker()
        errors = QSignalSpy(worker.search_error)

        worker.request_move("not turns", 5)

        assert len(errors) == 1
        assert errors[0][0] == 5

    def test_reports_engine_failure(self, qapp: object, standard_turns: Turns) -> None:
        del qapp
        worker = EngineWorker()
        worker._engine = _FailingEngine()
        errors = QSignalSpy(worker.search_error)

        worker.request_move(standard_turns, 9)

        assert len(errors) == 1
        assert errors[0] == [9, "boom"]

    def test_set_limits_updates_depth(self, qapp: object) -> None:
        del qapp
        worker = EngineWorker()
        worker.set_limits(0)
        assert worker._limits.max_depth == 0
