"""Small GF(2) linear algebra helpers using int bitsets (LSB = column 0)."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple


def bit_indices(row: int) -> List[int]:
    """Return the indices of set bits in ascending order."""
    indices: List[int] = []
    while row:
        lsb = row & -row
        indices.append(lsb.bit_length() - 1)
        row -= lsb
    return indices


def row_from_bits(bits: Iterable[int]) -> int:
    """Pack a sequence of bits into an int bitset (LSB = column 0)."""
    row = 0
    for i, b in enumerate(bits):
        if b:
            row |= 1 << i
    return row


def parity(x: int) -> int:
    return x.bit_count() & 1


def gf2_rank(rows: List[int], n_cols: int) -> int:
    """Compute rank over GF(2) via Gaussian elimination."""
    work = rows[:]
    rank = 0
    row_idx = 0
    for col in range(n_cols):
        pivot = None
        for r in range(row_idx, len(work)):
            if (work[r] >> col) & 1:
                pivot = r
                break
        if pivot is None:
            continue
        work[row_idx], work[pivot] = work[pivot], work[row_idx]
        for r in range(len(work)):
            if r != row_idx and ((work[r] >> col) & 1):
                work[r] ^= work[row_idx]
        rank += 1
        row_idx += 1
        if row_idx == len(work):
            break
    return rank


def rref_bitrows(rows: Sequence[int], n_cols: int) -> Tuple[List[int], List[int]]:
    """
    Reduced row echelon form over GF(2) for a matrix represented as bit-rows.

    Returns (rref_rows, pivots), where:
      - rref_rows is a list of nonzero rows (bitmasks), in pivot order
      - pivots is a list of pivot column indices (0-based), same length as rref_rows
    """
    reduced, _transform, pivots = rref_with_transform(rows, n_cols)
    return reduced[: len(pivots)], pivots


def rref_with_transform(
    rows: Sequence[int], n_cols: int
) -> Tuple[List[int], List[int], List[int]]:
    """
    Gauss-Jordan elimination that also records the row operations applied.

    Returns (reduced, transform, pivots) with transform @ rows == reduced over
    GF(2). All len(rows) rows are kept; rows past len(pivots) are zero. The
    transform rows are bitsets of width len(rows).
    """
    if n_cols < 0:
        raise ValueError("n_cols must be nonnegative")
    m = len(rows)
    # Augment each row with its identity row above column n_cols.
    mat = [int(r) | (1 << (n_cols + i)) for i, r in enumerate(rows)]
    low_mask = (1 << n_cols) - 1

    pivots: List[int] = []
    r = 0
    for c in range(n_cols):
        if r >= m:
            break
        bit = 1 << c
        pivot_row = None
        for i in range(r, m):
            if mat[i] & bit:
                pivot_row = i
                break
        if pivot_row is None:
            continue
        if pivot_row != r:
            mat[r], mat[pivot_row] = mat[pivot_row], mat[r]
        pivots.append(c)

        pivot_val = mat[r]
        for i in range(m):
            if i != r and (mat[i] & bit):
                mat[i] ^= pivot_val
        r += 1

    reduced = [row & low_mask for row in mat]
    transform = [row >> n_cols for row in mat]
    return reduced, transform, pivots


def nullspace_basis_from_rref(
    rref_rows: Sequence[int], pivots: Sequence[int], n_cols: int
) -> List[int]:
    """
    Given an RREF(H) over GF(2), return a basis of ker(H) as bitmasks of length n_cols.

    For a free column f, the basis vector has x_f = 1, and for each pivot row
    the pivot variable is set according to the row's coefficient in column f.
    """
    pivot_set = set(pivots)
    basis: List[int] = []
    for f in range(n_cols):
        if f in pivot_set:
            continue
        v = 1 << f
        bit_f = 1 << f
        for row, pcol in zip(rref_rows, pivots):
            if row & bit_f:
                v |= 1 << pcol
        basis.append(v)
    return basis


def transpose_bitrows(rows: Sequence[int], n_cols: int) -> List[int]:
    """Transpose a len(rows) x n_cols bit-row matrix."""
    out = [0] * n_cols
    for i, row in enumerate(rows):
        bit = 1 << i
        for j in bit_indices(row):
            out[j] |= bit
    return out


def multiply_bitrows(lhs: Sequence[int], rhs: Sequence[int]) -> List[int]:
    """Product lhs @ rhs over GF(2); row i is the XOR of rhs rows selected by lhs[i]."""
    out: List[int] = []
    for row in lhs:
        acc = 0
        for k in bit_indices(row):
            acc ^= rhs[k]
        out.append(acc)
    return out


__all__ = [
    "bit_indices",
    "row_from_bits",
    "parity",
    "gf2_rank",
    "rref_bitrows",
    "rref_with_transform",
    "nullspace_basis_from_rref",
    "transpose_bitrows",
    "multiply_bitrows",
]
