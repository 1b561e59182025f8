"""Polynomial functions over GF(2) that can be composed algebraically."""

from __future__ import annotations

from typing import Dict, List, Sequence

from .bitvector import BitVector
from .errors import DimensionMismatchError
from .gf2 import bit_indices
from .monomial import Monomial
from .polynomial import PolynomialFunctionRepresentationGF2


def _multiply_polynomials(lhs: Sequence[int], rhs: Sequence[int]) -> List[int]:
    """Product of two scalar GF(2) polynomials given as lists of monomial masks."""
    acc: Dict[int, int] = {}
    for a in lhs:
        for b in rhs:
            key = a | b
            acc[key] = acc.get(key, 0) ^ 1
    return [mask for mask, coeff in acc.items() if coeff]


class PolynomialFunctionGF2(PolynomialFunctionRepresentationGF2):
    """Stage function: evaluable and directly composable with other polynomial functions."""

    @classmethod
    def from_terms(cls, input_length: int, output_length: int, terms: Dict[int, int]):
        """Build from a {monomial mask: contribution bits} dict, dropping zero terms."""
        monomials = []
        contributions = []
        for mask in sorted(terms):
            bits = terms[mask]
            if bits:
                monomials.append(Monomial(mask))
                contributions.append(BitVector(output_length, bits))
        return cls(input_length, output_length, monomials, contributions)

    @classmethod
    def identity(cls, n: int):
        return cls.from_terms(n, n, {1 << i: 1 << i for i in range(n)})

    @classmethod
    def from_matrix(cls, matrix):
        """Linear function x -> matrix @ x; column k becomes the contribution of x_k."""
        terms: Dict[int, int] = {}
        for i, row in enumerate(matrix.bitrows()):
            for k in bit_indices(row):
                terms[1 << k] = terms.get(1 << k, 0) | (1 << i)
        return cls.from_terms(matrix.n_cols, matrix.n_rows, terms)

    @property
    def degree(self) -> int:
        return max((m.degree for m in self.monomials), default=0)

    def is_linear(self) -> bool:
        return all(m.degree == 1 for m, bits in self.terms() if bits)

    def _output_polynomials(self) -> List[List[int]]:
        """Per output bit, the monomial masks it XORs together."""
        rows: List[List[int]] = [[] for _ in range(self.output_length)]
        for m, bits in self.terms():
            for j in bit_indices(bits):
                rows[j].append(m.mask)
        return rows

    def compose(self, inner: PolynomialFunctionRepresentationGF2):
        """Return h with h(x) == self(inner(x)), by substituting inner's outputs."""
        if inner.output_length != self.input_length:
            raise DimensionMismatchError(
                f"Input length of outer function ({self.input_length}) must match "
                f"output length of inner function ({inner.output_length})."
            )
        inner_rows = PolynomialFunctionGF2._output_polynomials(inner)
        products: Dict[int, List[int]] = {}
        terms: Dict[int, int] = {}
        for m, bits in self.terms():
            if not bits:
                continue
            expanded = products.get(m.mask)
            if expanded is None:
                expanded = [0]
                for j in m.indices():
                    expanded = _multiply_polynomials(expanded, inner_rows[j])
                    if not expanded:
                        break
                products[m.mask] = expanded
            for mask in expanded:
                terms[mask] = terms.get(mask, 0) ^ bits
        return self.from_terms(inner.input_length, self.output_length, terms)

    def __add__(self, other: PolynomialFunctionRepresentationGF2):
        if not isinstance(other, PolynomialFunctionRepresentationGF2):
            return NotImplemented
        if (self.input_length, self.output_length) != (other.input_length, other.output_length):
            raise DimensionMismatchError(
                f"Cannot add a {self.input_length}->{self.output_length} function to a "
                f"{other.input_length}->{other.output_length} function."
            )
        terms: Dict[int, int] = {}
        for f in (self, other):
            for m, bits in f.terms():
                terms[m.mask] = terms.get(m.mask, 0) ^ bits
        return self.from_terms(self.input_length, self.output_length, terms)

    __xor__ = __add__


__all__ = ["PolynomialFunctionGF2"]
