"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from rotchess.config import DEFAULT_SEARCH_DEPTH

if TYPE_CHECKING:
    from rotchess.core.move import Move
    from rotchess.core.turns import Turns

Score = float


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation.

    ``max_depth`` counts the plies searched below each root move, so a root
    move at depth 0 is scored by static evaluation alone.
    """

    max_depth: int = DEFAULT_SEARCH_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"Search depth must be >= 0, got {self.max_depth}")


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    best_move: Move
    score: Score
    depth: int
    nodes: int


class IEngine(Protocol):
    """Protocol for engines used by the game layer."""

    def search(self, turns: Turns, limits: SearchLimits) -> SearchResult: ...

    def pick_best_move(
        self, turns: Turns, limits: SearchLimits | None = None
    ) -> SearchResult: ...
