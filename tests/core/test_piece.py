"""Tests for Piece geometry and travel-point caching."""

import math

import pytest

from rotchess.config import PIECE_RADIUS
from rotchess.core.enums import Side, TravelKind
from rotchess.core.errors import StaleTravelPointsError
from rotchess.core.kinds import PieceKind
from rotchess.core.piece import Piece, on_board, should_promote


def _piece(kind: PieceKind = PieceKind.ROOK, x: float = 4.0, y: float = 4.0) -> Piece:
    return Piece(0, (x, y), 0.0, Side.WHITE, kind)


class TestCollision:
    def test_point_at_own_center(self) -> None:
        assert _piece().collidepoint(4.0, 4.0)
        assert _piece().collidepiece(4.0, 4.0)

    def test_point_threshold_is_one_radius(self) -> None:
        p = _piece(x=0.0, y=0.0)
        assert p.collidepoint(0.99 * PIECE_RADIUS, 0.0)
        assert not p.collidepoint(PIECE_RADIUS, 0.0)

    def test_piece_threshold_is_two_radii(self) -> None:
        p = _piece(x=0.0, y=0.0)
        assert p.collidepiece(1.99 * PIECE_RADIUS, 0.0)
        assert not p.collidepiece(2 * PIECE_RADIUS, 0.0)
        assert not p.collidepoint(1.99 * PIECE_RADIUS, 0.0)


class TestBoardExtent:
    def test_on_board_with_margin(self) -> None:
        assert on_board(0.0, 8.0)
        assert on_board(-PIECE_RADIUS, 8 + PIECE_RADIUS)
        assert not on_board(-0.5, 4.0)
        assert not on_board(4.0, 8.5)


class TestPromotion:
    def test_white_promotes_near_y_zero(self) -> None:
        assert should_promote(PieceKind.PAWN, Side.WHITE, 0.5)
        assert not should_promote(PieceKind.PAWN, Side.WHITE, 1.5)

    def test_black_promotes_near_y_eight(self) -> None:
        assert should_promote(PieceKind.PAWN, Side.BLACK, 7.5)
        assert not should_promote(PieceKind.PAWN, Side.BLACK, 6.5)

    def test_only_pawns_promote(self) -> None:
        assert not should_promote(PieceKind.KNIGHT, Side.WHITE, 0.5)


class TestTravelPoints:
    def test_reading_before_init_is_a_contract_violation(self) -> None:
        p = _piece()
        assert p.needs_init
        with pytest.raises(StaleTravelPointsError):
            _ = p.move_points

    def test_mutation_makes_cache_stale(self) -> None:
        p = _piece()
        p.init_travel_points()
        assert not p.needs_init
        p.center = (3.0, 3.0)
        with pytest.raises(StaleTravelPointsError):
            list(p.travel_points())
        p.init_travel_points()
        p.angle = 1.0
        assert p.needs_init

    def test_rook_points_on_empty_board(self) -> None:
        p = _piece()
        p.init_travel_points()
        points = set(p.move_points)
        assert {(5.0, 4.0), (6.0, 4.0), (7.0, 4.0), (8.0, 4.0)} <= points
        assert {(4.0, 3.0), (4.0, 0.0), (0.0, 4.0), (4.0, 8.0)} <= points
        assert len(points) == 16
        assert (9.0, 4.0) not in points

    def test_white_pawn_moves_toward_decreasing_y(self) -> None:
        p = Piece.from_tile(0, (3, 6), 0.0, Side.WHITE, PieceKind.PAWN)
        p.init_travel_points()
        assert p.move_points == ((3.5, 5.5), (3.5, 4.5))
        assert set(p.capture_points) == {(2.5, 5.5), (4.5, 5.5)}

    def test_black_pawn_moves_toward_increasing_y(self) -> None:
        p = Piece.from_tile(0, (3, 1), -math.pi, Side.BLACK, PieceKind.PAWN)
        p.init_travel_points()
        assert p.move_points == ((3.5, 2.5), (3.5, 3.5))

    def test_rays_stop_at_board_edge(self) -> None:
        p = Piece.from_tile(0, (0, 6), 0.0, Side.WHITE, PieceKind.PAWN)
        p.init_travel_points()
        assert p.capture_points == ((1.5, 5.5),)

    def test_travel_points_lists_moves_before_captures(self) -> None:
        p = Piece.from_tile(0, (3, 6), 0.0, Side.WHITE, PieceKind.PAWN)
        p.init_travel_points()
        kinds = [kind for kind, _, _ in p.travel_points()]
        assert kinds == [TravelKind.MOVE] * 2 + [TravelKind.CAPTURE] * 2

    def test_quarter_turn_rook_keeps_grid_points(self) -> None:
        p = _piece()
        p.init_travel_points()
        before = set(p.move_points)
        p.angle = math.pi / 2
        p.init_travel_points()
        assert set(p.move_points) == before
        assert p.move_points[0] == (3.0, 4.0)

    def test_copy_is_independent(self) -> None:
        p = _piece()
        p.init_travel_points()
        clone = p.copy()
        assert clone == p
        clone.center = (1.0, 1.0)
        assert p.center == (4.0, 4.0)
        assert not p.needs_init
        assert clone.needs_init

    def test_forward_distance(self) -> None:
        assert Piece(0, (1.0, 2.0), 0.0, Side.WHITE, PieceKind.PAWN).forward_distance() == 6.0
        assert Piece(0, (1.0, 2.0), 0.0, Side.BLACK, PieceKind.PAWN).forward_distance() == 2.0
