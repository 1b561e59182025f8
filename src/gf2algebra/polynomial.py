"""Sparse monomial-based representation of vector-valued GF(2) polynomials.

Output bit ``j`` of the function is the XOR, over every monomial whose
contribution vector has bit ``j`` set, of the AND of the input bits that
monomial names.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

from .bitvector import BitVector
from .errors import DimensionMismatchError, DuplicateMonomialError
from .monomial import Monomial
from .randomness import RandomBits, resolve

RANDOM_FUNCTION_MONOMIALS = 16
RANDOM_FUNCTION_MAX_DEGREE = 3


class PolynomialFunctionRepresentationGF2:
    """Immutable ``(input_length, output_length, monomials, contributions)`` record."""

    def __init__(
        self,
        input_length: int,
        output_length: int,
        monomials: Sequence[Monomial],
        contributions: Sequence[BitVector],
    ) -> None:
        if input_length < 0 or output_length < 0:
            raise ValueError(
                f"Lengths must be nonnegative, got input={input_length} output={output_length}."
            )
        if len(monomials) != len(contributions):
            raise ValueError(
                f"{len(monomials)} monomials but {len(contributions)} contributions."
            )
        for c in contributions:
            if len(c) != output_length:
                raise DimensionMismatchError(
                    f"Contribution of length {len(c)} does not match output length {output_length}."
                )
        seen = set()
        for m in monomials:
            if m.mask.bit_length() > input_length:
                raise DimensionMismatchError(
                    f"Monomial {m} uses variables beyond input length {input_length}."
                )
            if m in seen:
                raise DuplicateMonomialError(f"Monomial {m} appears more than once.")
            seen.add(m)
        self._input_length = int(input_length)
        self._output_length = int(output_length)
        self._monomials: Tuple[Monomial, ...] = tuple(monomials)
        self._contributions: Tuple[BitVector, ...] = tuple(c.copy() for c in contributions)

    @property
    def input_length(self) -> int:
        return self._input_length

    @property
    def output_length(self) -> int:
        return self._output_length

    @property
    def monomials(self) -> Tuple[Monomial, ...]:
        return self._monomials

    @property
    def contributions(self) -> Tuple[BitVector, ...]:
        # Copies keep the record immutable.
        return tuple(c.copy() for c in self._contributions)

    def terms(self):
        """Iterate (monomial, contribution bits) pairs without copying."""
        for m, c in zip(self._monomials, self._contributions):
            yield m, c.bits

    def map_view(self) -> Dict[Monomial, BitVector]:
        return {m: c.copy() for m, c in zip(self._monomials, self._contributions)}

    def apply(self, x: BitVector, rhs: Optional[BitVector] = None) -> BitVector:
        """Evaluate on ``x`` (or on ``x`` concatenated with ``rhs``)."""
        if rhs is not None:
            x = x.concatenate(rhs)
        if len(x) != self._input_length:
            raise DimensionMismatchError(
                f"Input of length {len(x)} does not match input length {self._input_length}."
            )
        acc = 0
        for m, bits in self.terms():
            if m.evaluate(x):
                acc ^= bits
        return BitVector(self._output_length, acc)

    __call__ = apply

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, PolynomialFunctionRepresentationGF2):
            return NotImplemented
        if self._output_length != other._output_length:
            return False
        if self._input_length != other._input_length:
            return False
        this_map = self.map_view()
        other_map = other.map_view()
        for monomial, contribution in this_map.items():
            if other_map.get(monomial) != contribution:
                return False
        return len(this_map) == len(other_map)

    def __hash__(self) -> int:
        terms = frozenset((m.mask, c.bits) for m, c in self.map_view().items())
        return hash((self._input_length, self._output_length, terms))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(input_length={self._input_length}, "
            f"output_length={self._output_length}, monomials={len(self._monomials)})"
        )

    def __str__(self) -> str:
        from .render import to_string

        return to_string(self)

    @classmethod
    def builder(cls, input_length: int, output_length: int) -> "Builder":
        return Builder(input_length, output_length, factory=cls)

    @classmethod
    def random_function(
        cls, input_len: int, output_len: int, rng: Optional[RandomBits] = None
    ):
        """Random function with up to 16 monomials of degree <= 3, for tests and benchmarks."""
        rng = resolve(rng)
        builder = cls.builder(input_len, output_len)
        for _ in range(RANDOM_FUNCTION_MONOMIALS):
            contribution = rng.random_vector(output_len)
            builder.set_monomial_contribution(
                rng.random_monomial(input_len, RANDOM_FUNCTION_MAX_DEGREE), contribution
            )
        return builder.build()


class Builder:
    """Accumulates monomial contributions before snapshotting them with build()."""

    def __init__(self, input_length: int, output_length: int, *, factory=None) -> None:
        self.input_length = input_length
        self.output_length = output_length
        self._factory = factory or PolynomialFunctionRepresentationGF2
        self._monomials: Dict[Monomial, BitVector] = {}

    def add_monomial(self, monomial: Monomial) -> None:
        if monomial in self._monomials:
            raise DuplicateMonomialError(f"Monomial {monomial} already exists.")
        self._monomials[monomial] = BitVector(self.output_length)

    def add_monomial_contribution(self, monomial: Monomial, output_bit: int) -> None:
        term = self._monomials.get(monomial)
        if term is None:
            term = BitVector(self.output_length)
            term.set(output_bit)
            self._monomials[monomial] = term
        else:
            term.set(output_bit)

    def set_monomial_contribution(self, monomial: Monomial, contribution: BitVector) -> None:
        if len(contribution) != self.output_length:
            raise DimensionMismatchError(
                f"Contribution of length {len(contribution)} does not match output length {self.output_length}."
            )
        self._monomials[monomial] = contribution.copy()

    def __len__(self) -> int:
        return len(self._monomials)

    def build(self):
        monomials = list(self._monomials)
        contributions = [self._monomials[m] for m in monomials]
        return self._factory(self.input_length, self.output_length, monomials, contributions)


__all__ = [
    "PolynomialFunctionRepresentationGF2",
    "Builder",
    "RANDOM_FUNCTION_MONOMIALS",
    "RANDOM_FUNCTION_MAX_DEGREE",
]
