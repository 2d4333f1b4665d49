"""Rays: parametrised distance sequences along one local direction."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

from rotchess.core.drift import drift_adjust


@dataclass(frozen=True, slots=True)
class Ray:
    """Distances ``start, start + step, ...`` up to an inclusive bound.

    ``angle`` is relative to the piece: 0 is the piece's forward direction.
    The bound may be ``math.inf`` for sliding pieces; callers must stop
    iterating once points leave the board.
    """

    start: float
    step: float
    upper_bound: float
    angle: float

    # ── Constructors ─────────────────────────────────────────────────────

    @classmethod
    def single(cls, distance: float, angle: float) -> Ray:
        """Exactly one point at *distance*."""
        return cls(distance, 1.0, distance, angle)

    @classmethod
    def repeated(cls, start: float, step: float, n: int, angle: float) -> Ray:
        """*n* evenly spaced points beginning at *start*."""
        return cls(start, step, start + step * (n - 1), angle)

    @classmethod
    def range(
        cls,
        start: float,
        step: float,
        upper_bound: float = math.inf,
        angle: float = 0.0,
    ) -> Ray:
        """Evenly spaced points up to *upper_bound* (unbounded by default)."""
        return cls(start, step, upper_bound, angle)

    # ── Iteration ────────────────────────────────────────────────────────

    def __iter__(self) -> Iterator[float]:
        distance = self.start
        while distance <= self.upper_bound:
            yield distance
            distance += self.step

    def offset(self, distance: float, world_angle: float) -> tuple[float, float]:
        """Offset of the point *distance* along this ray, drift-corrected."""
        angle = self.angle - world_angle
        x, y = drift_adjust(distance * math.cos(angle), distance * math.sin(angle))
        return x, y

    def offsets(self, world_angle: float) -> Iterator[tuple[float, float]]:
        """Offsets for every distance, with the piece facing *world_angle*."""
        for distance in self:
            yield self.offset(distance, world_angle)
