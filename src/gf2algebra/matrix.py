"""GF(2) linear-algebra engine over BitMatrix.

All operations except the bit-level setters return new matrices; elimination
runs on copies of the int bit-rows, so a failed inversion never touches the
matrix it was called on.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional

from .bitmatrix import BitMatrix
from .bitvector import BitVector
from .errors import DimensionMismatchError, SingularMatrixError
from .gf2 import (
    bit_indices,
    gf2_rank,
    multiply_bitrows,
    nullspace_basis_from_rref,
    parity,
    rref_bitrows,
    rref_with_transform,
    transpose_bitrows,
)
from .polynomial import PolynomialFunctionRepresentationGF2
from .randomness import RandomBits, resolve

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InversionResult:
    """Outcome of an inversion attempt: the inverse, or a singular marker."""

    matrix: Optional["EnhancedBitMatrix"]
    singular: bool

    def unwrap(self) -> "EnhancedBitMatrix":
        if self.singular or self.matrix is None:
            raise SingularMatrixError("Matrix is singular and cannot be inverted.")
        return self.matrix


class EnhancedBitMatrix(BitMatrix):
    @classmethod
    def identity(cls, n: int) -> "EnhancedBitMatrix":
        return cls.from_bitrows([1 << i for i in range(n)], n)

    @classmethod
    def random_matrix(
        cls, n_rows: int, n_cols: int, rng: Optional[RandomBits] = None
    ) -> "EnhancedBitMatrix":
        rng = resolve(rng)
        return cls.from_bitrows([rng.random_bits(n_cols) for _ in range(n_rows)], n_cols)

    @classmethod
    def random_sqr_matrix(cls, n: int, rng: Optional[RandomBits] = None) -> "EnhancedBitMatrix":
        return cls.random_matrix(n, n, rng)

    @classmethod
    def random_invertible(
        cls, n: int, rng: Optional[RandomBits] = None, *, max_attempts: int = 100
    ) -> "EnhancedBitMatrix":
        """Draw random n x n matrices until one is invertible."""
        rng = resolve(rng)
        for attempt in range(1, max_attempts + 1):
            m = cls.random_sqr_matrix(n, rng)
            if not m.try_inverse().singular:
                return m
            logger.debug("random %dx%d draw %d was singular", n, n, attempt)
        raise SingularMatrixError(
            f"No invertible {n}x{n} matrix found in {max_attempts} attempts."
        )

    @classmethod
    def square_matrix_from_bit_vector(cls, v: BitVector) -> "EnhancedBitMatrix":
        """Pack an n*n bit vector row-major into an n x n matrix."""
        n = _exact_sqrt(len(v))
        mask = (1 << n) - 1
        return cls.from_bitrows([(v.bits >> (i * n)) & mask for i in range(n)], n)

    def to_bit_vector(self) -> BitVector:
        """Inverse of square_matrix_from_bit_vector."""
        if not self.is_square():
            raise DimensionMismatchError(
                f"Only square matrices pack into a bit vector, got {self.n_rows}x{self.n_cols}."
            )
        n = self.n_cols
        bits = 0
        for i, row in enumerate(self.bitrows()):
            bits |= row << (i * n)
        return BitVector(n * n, bits)

    def is_identity(self) -> bool:
        return self.is_square() and all(row == 1 << i for i, row in enumerate(self.bitrows()))

    def rank(self) -> int:
        return gf2_rank(self.bitrows(), self.n_cols)

    def transpose(self) -> "EnhancedBitMatrix":
        return self.from_bitrows(transpose_bitrows(self.bitrows(), self.n_cols), self.n_rows)

    def multiply(self, other):
        """Product with a matrix, a vector, or a polynomial function (pushforward)."""
        if isinstance(other, BitMatrix):
            if self.n_cols != other.n_rows:
                raise DimensionMismatchError(
                    f"Left matrix has {self.n_cols} columns but right matrix has {other.n_rows} rows."
                )
            return self.from_bitrows(multiply_bitrows(self.bitrows(), other.bitrows()), other.n_cols)
        if isinstance(other, BitVector):
            if len(other) != self.n_cols:
                raise DimensionMismatchError(
                    f"Matrix has {self.n_cols} columns but vector has length {len(other)}."
                )
            x = other.bits
            bits = 0
            for i, row in enumerate(self.bitrows()):
                if parity(row & x):
                    bits |= 1 << i
            return BitVector(self.n_rows, bits)
        if isinstance(other, PolynomialFunctionRepresentationGF2):
            return self._multiply_function(other)
        raise TypeError(f"Cannot multiply {self.__class__.__name__} by {type(other).__name__}.")

    def __matmul__(self, other):
        if not isinstance(other, (BitMatrix, BitVector, PolynomialFunctionRepresentationGF2)):
            return NotImplemented
        return self.multiply(other)

    def _multiply_function(self, f: PolynomialFunctionRepresentationGF2):
        # Linear over GF(2): push each contribution vector through the matrix.
        if self.n_cols != f.output_length:
            raise DimensionMismatchError(
                f"Matrix has {self.n_cols} columns but function output length is {f.output_length}."
            )
        monomials = []
        contributions = []
        for m, c in zip(f.monomials, f.contributions):
            pushed = self.multiply(c)
            if not pushed.is_zero():
                monomials.append(m)
                contributions.append(pushed)
        return type(f)(f.input_length, self.n_rows, monomials, contributions)

    def try_inverse(self) -> InversionResult:
        """Gauss-Jordan inversion that reports singularity instead of raising."""
        if not self.is_square():
            raise DimensionMismatchError(
                f"Only square matrices can be inverted, got {self.n_rows}x{self.n_cols}."
            )
        n = self.n_cols
        reduced, transform, pivots = rref_with_transform(self.bitrows(), n)
        if len(pivots) < n:
            logger.debug("singular %dx%d matrix: rank %d", n, n, len(pivots))
            return InversionResult(None, True)
        return InversionResult(self.from_bitrows(transform, n), False)

    def inverse(self) -> "EnhancedBitMatrix":
        return self.try_inverse().unwrap()

    def _independent_rows(self) -> List[int]:
        # Pivot columns of the transpose index a maximal independent set of rows.
        _, pivots = rref_bitrows(transpose_bitrows(self.bitrows(), self.n_cols), self.n_rows)
        return pivots

    def left_inverse(self) -> "EnhancedBitMatrix":
        """L (n_cols x n_rows) with L @ self == identity(n_cols); needs full column rank."""
        n = self.n_cols
        rows = self._independent_rows()
        if len(rows) < n:
            raise SingularMatrixError(
                f"Matrix {self.n_rows}x{n} has column rank {len(rows)} < {n}; no left inverse."
            )
        source = self.bitrows()
        sub = self.from_bitrows([source[r] for r in rows], n)
        sub_inv = sub.inverse().bitrows()
        left = []
        for row in sub_inv:
            bits = 0
            for k in bit_indices(row):
                bits |= 1 << rows[k]
            left.append(bits)
        return self.from_bitrows(left, self.n_rows)

    def right_inverse(self) -> "EnhancedBitMatrix":
        """R (n_cols x n_rows) with self @ R == identity(n_rows); needs full row rank."""
        try:
            return self.transpose().left_inverse().transpose()
        except SingularMatrixError as exc:
            raise SingularMatrixError(
                f"Matrix {self.n_rows}x{self.n_cols} does not have full row rank; no right inverse."
            ) from exc

    def right_generalized_inverse(self) -> "EnhancedBitMatrix":
        """G with self @ G @ self == self; self @ G is the identity under full row rank."""
        reduced, transform, pivots = rref_with_transform(self.bitrows(), self.n_cols)
        if len(pivots) < self.n_rows:
            logger.debug(
                "generalized inverse of rank-deficient %dx%d matrix (rank %d)",
                self.n_rows,
                self.n_cols,
                len(pivots),
            )
        g = [0] * self.n_cols
        for i, col in enumerate(pivots):
            g[col] = transform[i]
        return self.from_bitrows(g, self.n_rows)

    def left_generalized_inverse(self) -> "EnhancedBitMatrix":
        """G with self @ G @ self == self; G @ self is the identity under full column rank."""
        return self.transpose().right_generalized_inverse().transpose()

    def get_nullspace_basis(self) -> "EnhancedBitMatrix":
        """Rows form a basis of {x : self @ x == 0}; there are n_cols - rank of them."""
        rref_rows, pivots = rref_bitrows(self.bitrows(), self.n_cols)
        basis = nullspace_basis_from_rref(rref_rows, pivots, self.n_cols)
        return self.from_bitrows(basis, self.n_cols)

    nullspace = get_nullspace_basis

    def get_left_nullifying_matrix(self) -> "EnhancedBitMatrix":
        """N (n_cols x n_rows) with N @ self == 0, built from the nullspace of the transpose."""
        basis = self.transpose().get_nullspace_basis().bitrows()
        k = len(basis)
        rows = basis[: self.n_cols]
        for i in range(len(rows), self.n_cols):
            if k == 0:
                rows.append(0)
            elif k == 1:
                rows.append(basis[0])
            else:
                rows.append(basis[i % k] ^ basis[(i + 1) % k])
        return self.from_bitrows(rows, self.n_rows)


def _exact_sqrt(length: int) -> int:
    n = math.isqrt(length)
    if n * n != length:
        raise DimensionMismatchError(f"Vector length {length} is not a perfect square.")
    return n


def bit_vector_from_square_matrix(m: EnhancedBitMatrix) -> BitVector:
    return m.to_bit_vector()


__all__ = ["EnhancedBitMatrix", "InversionResult", "bit_vector_from_square_matrix"]
