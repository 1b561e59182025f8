"""Monomials over GF(2): products of distinct input variables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List

from .bitvector import BitVector
from .gf2 import bit_indices

if TYPE_CHECKING:
    from .render import PolynomialLabeling


@dataclass(frozen=True, order=True)
class Monomial:
    """Set of variable indices encoded as an int bitset (bit i = variable i)."""

    mask: int = 0

    def __post_init__(self) -> None:
        if self.mask < 0:
            raise ValueError(f"Monomial mask must be nonnegative, got {self.mask}.")

    @classmethod
    def from_indices(cls, *indices: int) -> "Monomial":
        mask = 0
        for i in indices:
            if i < 0:
                raise ValueError(f"Variable index must be nonnegative, got {i}.")
            mask |= 1 << i
        return cls(mask)

    @classmethod
    def one(cls) -> "Monomial":
        """The constant monomial."""
        return cls(0)

    def indices(self) -> List[int]:
        return bit_indices(self.mask)

    @property
    def degree(self) -> int:
        return self.mask.bit_count()

    def evaluate(self, x: BitVector) -> bool:
        """AND of the input bits indexed by this monomial."""
        if self.mask and self.mask.bit_length() > len(x):
            raise IndexError(
                f"Monomial uses variable {self.mask.bit_length() - 1} but input has length {len(x)}."
            )
        return (x.bits & self.mask) == self.mask

    def __mul__(self, other: "Monomial") -> "Monomial":
        if not isinstance(other, Monomial):
            return NotImplemented
        return Monomial(self.mask | other.mask)

    def to_string_monomial(self) -> str:
        if not self.mask:
            return "1"
        return "*".join(f"x{i}" for i in self.indices())

    def to_latex_string_monomial(self, labeling: "PolynomialLabeling") -> str:
        if not self.mask:
            return "1"
        return " ".join(labeling.latex_label(i) for i in self.indices())

    def __str__(self) -> str:
        return self.to_string_monomial()


__all__ = ["Monomial"]
