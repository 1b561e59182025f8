"""Exception types raised by the GF(2) matrix and polynomial engines."""

from __future__ import annotations


class DimensionMismatchError(ValueError):
    """Shapes or lengths of the operands are incompatible."""


class SingularMatrixError(ValueError):
    """The rank condition required by an inversion does not hold.

    Recoverable: the matrix that failed to invert is left untouched, so callers
    may simply draw another one.
    """


class DuplicateMonomialError(ValueError, KeyError):
    """A monomial was added to a builder twice."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return ValueError.__str__(self)


__all__ = ["DimensionMismatchError", "SingularMatrixError", "DuplicateMonomialError"]
