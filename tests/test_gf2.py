"""Tests for GF(2) linear algebra helpers."""

from gf2algebra.gf2 import (
    bit_indices,
    gf2_rank,
    multiply_bitrows,
    nullspace_basis_from_rref,
    parity,
    row_from_bits,
    rref_bitrows,
    rref_with_transform,
    transpose_bitrows,
)


def test_rank_identity():
    rows = [0b001, 0b010, 0b100]
    assert gf2_rank(rows, 3) == 3


def test_rank_duplicate_rows():
    rows = [0b101, 0b101, 0b101]
    assert gf2_rank(rows, 3) == 1


def test_rank_with_zero_row():
    rows = [0b1100, 0b0110, 0]
    assert gf2_rank(rows, 4) == 2


def test_bit_helpers():
    assert bit_indices(0b101001) == [0, 3, 5]
    assert row_from_bits([1, 0, 1, 1]) == 0b1101
    assert parity(0b111) == 1
    assert parity(0b11) == 0


def test_rref_bitrows_pivots():
    rref_rows, pivots = rref_bitrows([0b011, 0b110, 0b101], 3)
    # Third row is the sum of the first two.
    assert pivots == [0, 1]
    assert rref_rows == [0b101, 0b110]


def test_rref_with_transform_records_row_operations():
    rows = [0b0110, 0b0011, 0b0101, 0b1000]
    reduced, transform, pivots = rref_with_transform(rows, 4)
    assert len(reduced) == len(rows)
    assert multiply_bitrows(transform, rows) == reduced
    assert all(r == 0 for r in reduced[len(pivots):])


def test_nullspace_basis_is_annihilated():
    rows = [0b1101, 0b0110]
    rref_rows, pivots = rref_bitrows(rows, 4)
    basis = nullspace_basis_from_rref(rref_rows, pivots, 4)
    assert len(basis) == 4 - len(pivots)
    for v in basis:
        for row in rows:
            assert parity(row & v) == 0


def test_transpose_bitrows():
    rows = [0b011, 0b100]
    assert transpose_bitrows(rows, 3) == [0b01, 0b01, 0b10]
    assert transpose_bitrows(transpose_bitrows(rows, 3), 2) == rows
