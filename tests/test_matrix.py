"""Tests for the GF(2) matrix engine."""

from __future__ import annotations

import pytest

from gf2algebra.bitmatrix import BitMatrix
from gf2algebra.bitvector import BitVector
from gf2algebra.errors import DimensionMismatchError, SingularMatrixError
from gf2algebra.functions import PolynomialFunctionGF2
from gf2algebra.matrix import EnhancedBitMatrix, bit_vector_from_square_matrix
from gf2algebra.randomness import RandomBits


def test_inverse_and_multiply() -> None:
    rng = RandomBits(7)
    for _ in range(100):
        m = EnhancedBitMatrix.random_sqr_matrix(10, rng)
        mcpy = m.copy()
        result = m.try_inverse()
        if result.singular:
            continue
        assert m == mcpy
        assert result.matrix.multiply(m) == EnhancedBitMatrix.identity(10)
        assert m.inverse() == result.matrix
        break
    else:
        pytest.fail("100 singular matrices drawn in a row")


def test_inverse_of_singular_matrix_raises_and_leaves_matrix_untouched() -> None:
    m = EnhancedBitMatrix.from_bitrows([0b011, 0b110, 0b101], 3)
    before = m.copy()
    with pytest.raises(SingularMatrixError):
        m.inverse()
    assert m == before
    assert m.try_inverse().singular


def test_inverse_requires_square() -> None:
    with pytest.raises(DimensionMismatchError):
        EnhancedBitMatrix(2, 3).inverse()


def test_random_invertible() -> None:
    m = EnhancedBitMatrix.random_invertible(8, RandomBits(3))
    assert (m @ m.inverse()).is_identity()


def test_random_invertible_gives_up() -> None:
    with pytest.raises(SingularMatrixError):
        EnhancedBitMatrix.random_invertible(1, _ZeroBits(), max_attempts=3)


class _ZeroBits(RandomBits):
    def random_bits(self, n: int) -> int:
        return 0


def test_vector_multiply() -> None:
    # 1 0 1 1
    # 0 1 0 1
    row1 = BitVector.from_indices(4, [0, 2, 3])
    row2 = BitVector.from_indices(4, [1, 3])
    m = EnhancedBitMatrix.from_rows([row1, row2])

    v1 = BitVector.from_indices(4, [0, 1, 3])
    v2 = BitVector.from_indices(4, [0, 2])
    v3 = BitVector.from_indices(4, [1, 2])

    r1 = m.multiply(v1)
    r2 = m.multiply(v2)
    r3 = m.multiply(v3)
    assert len(r1) == len(r2) == len(r3) == 2
    assert not r1.get(0) and not r1.get(1)
    assert not r2.get(0) and not r2.get(1)
    assert r3.get(0) and r3.get(1)


def test_vector_multiply_dimension_mismatch() -> None:
    m = EnhancedBitMatrix(2, 4)
    with pytest.raises(DimensionMismatchError):
        m.multiply(BitVector(3))
    with pytest.raises(DimensionMismatchError):
        m.multiply(EnhancedBitMatrix(3, 2))


def test_from_rows_requires_equal_lengths() -> None:
    with pytest.raises(DimensionMismatchError):
        EnhancedBitMatrix.from_rows([BitVector(3), BitVector(4)])


def test_transpose() -> None:
    rng = RandomBits(11)
    for shape in ((63, 65), (65, 63)):
        m = EnhancedBitMatrix.random_matrix(*shape, rng=rng)
        mt = m.transpose()
        assert mt.shape == (shape[1], shape[0])
        for row in range(m.n_rows):
            for col in range(m.n_cols):
                assert m.get(row, col) == mt.get(col, row)
        assert mt.transpose() == m


def test_zero() -> None:
    m = EnhancedBitMatrix(4, 6)
    assert m.is_zero()
    m.set(1, 5)
    assert not m.is_zero()
    with pytest.raises(IndexError):
        m.set(4, 0)
    with pytest.raises(IndexError):
        m.get(0, 6)


def test_identity() -> None:
    assert EnhancedBitMatrix.identity(5).is_identity()
    assert not EnhancedBitMatrix(5, 5).is_identity()
    assert not EnhancedBitMatrix(2, 3).is_identity()


def test_bitmatrix_addition_and_scale() -> None:
    a = BitMatrix.from_bitrows([0b01, 0b11], 2)
    b = BitMatrix.from_bitrows([0b11, 0b11], 2)
    assert (a + b).bitrows() == [0b10, 0b00]
    assert a.scale(0).is_zero()
    assert a.scale(1) == a
    with pytest.raises(DimensionMismatchError):
        a + BitMatrix(3, 2)


def test_nullifying() -> None:
    rng = RandomBits(5)
    m = EnhancedBitMatrix.random_matrix(210, 105, rng)
    n = m.get_left_nullifying_matrix()
    assert n.n_rows == m.n_cols
    assert n.n_cols == m.n_rows
    assert n.multiply(m).is_zero()


def test_nullifying_pads_when_left_nullspace_is_small() -> None:
    # 3x3 of rank 2: the left nullspace has dimension 1 but 3 rows are needed.
    m = EnhancedBitMatrix.from_bitrows([0b011, 0b110, 0b101], 3)
    n = m.get_left_nullifying_matrix()
    assert n.shape == (3, 3)
    assert (n @ m).is_zero()
    assert not n.is_zero()


def test_nullspace() -> None:
    rng = RandomBits(9)
    m = EnhancedBitMatrix.random_matrix(65, 210, rng)
    basis = m.get_nullspace_basis()
    assert basis.n_rows == m.n_cols - m.rank()
    assert basis.n_rows > 0
    assert m.multiply(basis.transpose()).is_zero()
    for v in basis.rows():
        assert m.multiply(v).is_zero()


def test_nullspace_of_full_column_rank_is_empty() -> None:
    m = EnhancedBitMatrix.identity(6)
    assert m.nullspace().n_rows == 0
    assert m.nullspace().n_cols == 6


def test_generalized_inverse() -> None:
    rng = RandomBits(13)
    m = EnhancedBitMatrix.random_matrix(65, 257, rng)
    assert EnhancedBitMatrix.identity(65) == m.multiply(m.right_generalized_inverse())

    m = EnhancedBitMatrix.random_matrix(257, 65, rng)
    assert EnhancedBitMatrix.identity(65) == m.left_generalized_inverse().multiply(m)


def test_generalized_inverse_of_rank_deficient_matrix() -> None:
    m = EnhancedBitMatrix.from_bitrows([0b0110, 0b0011, 0b0101, 0b1111], 4)
    assert m.rank() == 3
    g = m.right_generalized_inverse()
    assert g.shape == (4, 4)
    assert m @ g @ m == m
    h = m.left_generalized_inverse()
    assert m @ h @ m == m


def test_polynomial_function_multiply() -> None:
    rng = RandomBits(17)
    f = PolynomialFunctionGF2.random_function(256, 256, rng)
    for n_rows in (256, 512, 128):
        m = EnhancedBitMatrix.random_matrix(n_rows, 256, rng)
        pushed = m.multiply(f)
        assert isinstance(pushed, PolynomialFunctionGF2)
        assert pushed.input_length == 256
        assert pushed.output_length == n_rows
        v = rng.random_vector(256)
        assert pushed.apply(v) == m.multiply(f.apply(v))


def test_polynomial_function_multiply_dimension_mismatch() -> None:
    f = PolynomialFunctionGF2.random_function(8, 8, RandomBits(1))
    with pytest.raises(DimensionMismatchError):
        EnhancedBitMatrix(4, 7).multiply(f)


def test_square_matrix_from_bit_vector() -> None:
    expected = RandomBits(19).random_vector(256)
    m = EnhancedBitMatrix.square_matrix_from_bit_vector(expected)
    assert m.shape == (16, 16)
    assert bit_vector_from_square_matrix(m) == expected
    assert m.get(1, 0) == expected.get(16)
    with pytest.raises(DimensionMismatchError):
        EnhancedBitMatrix.square_matrix_from_bit_vector(BitVector(10))


def test_left_inverse() -> None:
    rng = RandomBits(23)
    for _ in range(10):
        for _attempt in range(1000):
            m = EnhancedBitMatrix.random_matrix(256, 128, rng)
            try:
                m_inv = m.left_inverse()
            except SingularMatrixError:
                continue
            assert m_inv.shape == (128, 256)
            assert m_inv.multiply(m).is_identity()
            break
        else:
            pytest.fail("no full column rank matrix drawn")


def test_right_inverse() -> None:
    rng = RandomBits(29)
    for _ in range(10):
        for _attempt in range(1000):
            m = EnhancedBitMatrix.random_matrix(128, 256, rng)
            try:
                m_inv = m.right_inverse()
            except SingularMatrixError:
                continue
            assert m_inv.shape == (256, 128)
            assert m.multiply(m_inv).is_identity()
            break
        else:
            pytest.fail("no full row rank matrix drawn")


def test_one_sided_inverses_reject_rank_deficiency() -> None:
    tall = EnhancedBitMatrix.from_bitrows([0b11, 0b11, 0b11], 2)
    with pytest.raises(SingularMatrixError):
        tall.left_inverse()
    with pytest.raises(SingularMatrixError):
        EnhancedBitMatrix(2, 4).right_inverse()
    with pytest.raises(SingularMatrixError):
        EnhancedBitMatrix(2, 3).left_inverse()
