"""Exception hierarchy.

Only caller/programming errors are exceptions.  Ordinary negative outcomes
(an illegal travel, navigating past the last turn) are plain return values.
"""

from __future__ import annotations


class RotchessError(Exception):
    """Base class for every error raised by rotchess."""


class ContractViolation(RotchessError):
    """A caller broke a precondition it was responsible for."""


class StaleTravelPointsError(ContractViolation):
    """Cached travel points were read before (re)initialisation."""


class UnknownPieceError(ContractViolation, LookupError):
    """A piece id does not name an alive piece on the board."""


class TooManyCapturesError(ContractViolation):
    """A single travel would capture more pieces than a move can record."""


class NoLegalMoveError(ContractViolation):
    """The automated player was asked to move without any legal move."""


class InvalidLayoutError(RotchessError, ValueError):
    """A starting layout was built from invalid input."""
