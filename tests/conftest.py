"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

from rotchess.core.board import Board
from rotchess.core.enums import Side
from rotchess.core.kinds import PieceKind
from rotchess.core.piece import Piece
from rotchess.core.turns import Turns

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for Qt bridge tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def standard_turns() -> Turns:
    return Turns(Board.standard())


@pytest.fixture
def lone_rook() -> Board:
    """A white rook at (4, 4) facing forward on an otherwise empty board."""
    return Board([Piece(0, (4.0, 4.0), 0.0, Side.WHITE, PieceKind.ROOK)])
