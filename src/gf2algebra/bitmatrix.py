"""Rectangular binary matrices stored as rows of BitVector."""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

from .bitvector import BitVector
from .errors import DimensionMismatchError


class BitMatrix:
    """Zero-initialized ``n_rows`` x ``n_cols`` matrix over GF(2).

    The shape is fixed after construction; mutation only flips bits in place.
    """

    def __init__(self, n_rows: int, n_cols: int) -> None:
        if n_rows < 0 or n_cols < 0:
            raise ValueError(f"Matrix dimensions must be nonnegative, got {n_rows}x{n_cols}.")
        self._n_cols = int(n_cols)
        self._rows: List[BitVector] = [BitVector(self._n_cols) for _ in range(int(n_rows))]

    @classmethod
    def from_rows(
        cls, rows: Sequence[BitVector], n_cols: Optional[int] = None
    ) -> "BitMatrix":
        """Build from row vectors, which must all share one length (copied)."""
        if n_cols is None:
            n_cols = len(rows[0]) if rows else 0
        for i, row in enumerate(rows):
            if len(row) != n_cols:
                raise DimensionMismatchError(
                    f"Row {i} has length {len(row)}, expected {n_cols}."
                )
        return cls.from_bitrows([row.bits for row in rows], n_cols)

    @classmethod
    def from_bitrows(cls, rows: Sequence[int], n_cols: int) -> "BitMatrix":
        m = cls(0, n_cols)
        m._rows = [BitVector(n_cols, r) for r in rows]
        return m

    @property
    def n_rows(self) -> int:
        return len(self._rows)

    @property
    def n_cols(self) -> int:
        return self._n_cols

    @property
    def shape(self) -> Tuple[int, int]:
        return self.n_rows, self._n_cols

    def is_square(self) -> bool:
        return self.n_rows == self._n_cols

    def _check_row(self, row: int) -> None:
        if row < 0 or row >= self.n_rows:
            raise IndexError(f"Row index {row} out of range for {self.n_rows} rows.")

    def row(self, index: int) -> BitVector:
        self._check_row(index)
        return self._rows[index].copy()

    def rows(self) -> Iterator[BitVector]:
        for r in self._rows:
            yield r.copy()

    def bitrows(self) -> List[int]:
        return [r.bits for r in self._rows]

    def get(self, row: int, col: int) -> bool:
        self._check_row(row)
        return self._rows[row].get(col)

    def set(self, row: int, col: int) -> None:
        self._check_row(row)
        self._rows[row].set(col)

    def clear(self, row: int, col: int) -> None:
        self._check_row(row)
        self._rows[row].clear(col)

    def flip(self, row: int, col: int) -> None:
        self._check_row(row)
        self._rows[row].flip(col)

    def is_zero(self) -> bool:
        return all(r.is_zero() for r in self._rows)

    def copy(self):
        return self.from_bitrows(self.bitrows(), self._n_cols)

    def __add__(self, other: "BitMatrix"):
        if not isinstance(other, BitMatrix):
            return NotImplemented
        if self.shape != other.shape:
            raise DimensionMismatchError(
                f"Matrix dimensions don't match ({self.n_rows}x{self.n_cols} vs. "
                f"{other.n_rows}x{other.n_cols})."
            )
        return self.from_bitrows(
            [a ^ b for a, b in zip(self.bitrows(), other.bitrows())], self._n_cols
        )

    __xor__ = __add__

    def scale(self, bit: int):
        """Scalar multiply by a GF(2) element."""
        if bit & 1:
            return self.copy()
        return self.from_bitrows([0] * self.n_rows, self._n_cols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitMatrix):
            return NotImplemented
        return self.shape == other.shape and self.bitrows() == other.bitrows()

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "\n".join(r.to_string() for r in self._rows)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.n_rows}x{self.n_cols})"


__all__ = ["BitMatrix"]
