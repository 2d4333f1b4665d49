"""Game management layer: the API a presentation layer drives.

Quick start::

    from rotchess.game import GameController

    ctrl = GameController()
    ctrl.select(19)  # white knight on the b-file
    _, points = ctrl.selected()
    ctrl.travel_to(next(i for i, p in enumerate(points) if p.travelable))
    ctrl.make_best_move()
"""

from rotchess.game.controller import GameController, GameEvents
from rotchess.game.interfaces import Navigation, PieceInfo, TravelPoint

__all__ = [
    "GameController",
    "GameEvents",
    "Navigation",
    "PieceInfo",
    "TravelPoint",
]
