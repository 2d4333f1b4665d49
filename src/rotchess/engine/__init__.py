"""Search engine: static evaluation and negamax move selection.

The Qt worker bridge lives in :mod:`rotchess.engine.qt_bridge` and is not
imported here, so headless users never load Qt.
"""

from rotchess.engine.evaluate import evaluate, piece_score
from rotchess.engine.negamax import NegamaxEngine
from rotchess.engine.search import IEngine, Score, SearchLimits, SearchResult

__all__ = [
    "IEngine",
    "NegamaxEngine",
    "Score",
    "SearchLimits",
    "SearchResult",
    "evaluate",
    "piece_score",
]
