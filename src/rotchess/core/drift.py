"""Floating-point drift correction for trigonometric offsets."""

from __future__ import annotations

from typing import overload

from rotchess.config import DRIFT_EPSILON


def _snap(value: float) -> float:
    nearest = round(value)
    if abs(value - nearest) < DRIFT_EPSILON:
        return float(nearest)
    return float(value)


@overload
def drift_adjust(value: float, /) -> float: ...


@overload
def drift_adjust(
    first: float, second: float, /, *rest: float
) -> tuple[float, ...]: ...


def drift_adjust(*values: float) -> float | tuple[float, ...]:
    """Snap each value that is essentially an integer to that integer.

    ``drift_adjust(1.000001, 2.5) == (1.0, 2.5)`` and ``drift_adjust(4.000001)
    == 4.0``.  Values further than ``DRIFT_EPSILON`` from an integer are left
    untouched.
    """
    if not values:
        raise TypeError("drift_adjust() needs at least one value")
    if len(values) == 1:
        return _snap(values[0])
    return tuple(_snap(v) for v in values)
