"""Fixed-length binary vectors backed by an int bitset (LSB = index 0)."""

from __future__ import annotations

from typing import Iterable, Iterator, List

from .errors import DimensionMismatchError
from .gf2 import bit_indices, parity, row_from_bits


class BitVector:
    """Mutable GF(2) vector with a length fixed at creation."""

    __slots__ = ("_length", "_bits")

    def __init__(self, length: int, bits: int = 0) -> None:
        if length < 0:
            raise ValueError(f"BitVector length must be nonnegative, got {length}.")
        bits = int(bits)
        if bits < 0 or bits >> length:
            raise ValueError(f"Bits {bits:#x} do not fit in a vector of length {length}.")
        self._length = int(length)
        self._bits = bits

    @classmethod
    def from_bits(cls, bits: Iterable[int]) -> "BitVector":
        values = list(bits)
        return cls(len(values), row_from_bits(values))

    @classmethod
    def from_indices(cls, length: int, indices: Iterable[int]) -> "BitVector":
        v = cls(length)
        for i in indices:
            v.set(i)
        return v

    @classmethod
    def from_string(cls, text: str) -> "BitVector":
        """Parse '0'/'1' characters; character i is bit i."""
        text = text.strip()
        if any(ch not in "01" for ch in text):
            raise ValueError(f"Invalid bit string {text!r}; expected only '0' and '1'.")
        return cls.from_bits(int(ch) for ch in text)

    @property
    def length(self) -> int:
        return self._length

    @property
    def bits(self) -> int:
        return self._bits

    def __len__(self) -> int:
        return self._length

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self._length:
            raise IndexError(f"Bit index {index} out of range for length {self._length}.")

    def get(self, index: int) -> bool:
        self._check_index(index)
        return bool((self._bits >> index) & 1)

    def set(self, index: int) -> None:
        self._check_index(index)
        self._bits |= 1 << index

    def clear(self, index: int) -> None:
        self._check_index(index)
        self._bits &= ~(1 << index)

    def flip(self, index: int) -> None:
        self._check_index(index)
        self._bits ^= 1 << index

    def put(self, index: int, value: bool) -> None:
        if value:
            self.set(index)
        else:
            self.clear(index)

    def __getitem__(self, index: int) -> bool:
        return self.get(index)

    def __iter__(self) -> Iterator[bool]:
        for i in range(self._length):
            yield bool((self._bits >> i) & 1)

    def indices(self) -> List[int]:
        return bit_indices(self._bits)

    def bit_count(self) -> int:
        return self._bits.bit_count()

    def is_zero(self) -> bool:
        return self._bits == 0

    def copy(self) -> "BitVector":
        return BitVector(self._length, self._bits)

    def _check_same_length(self, other: "BitVector") -> None:
        if self._length != other._length:
            raise DimensionMismatchError(
                f"Vector lengths don't match ({self._length} vs. {other._length})."
            )

    def __xor__(self, other: "BitVector") -> "BitVector":
        if not isinstance(other, BitVector):
            return NotImplemented
        self._check_same_length(other)
        return BitVector(self._length, self._bits ^ other._bits)

    __add__ = __xor__

    def __ixor__(self, other: "BitVector") -> "BitVector":
        if not isinstance(other, BitVector):
            return NotImplemented
        self._check_same_length(other)
        self._bits ^= other._bits
        return self

    def __and__(self, other: "BitVector") -> "BitVector":
        if not isinstance(other, BitVector):
            return NotImplemented
        self._check_same_length(other)
        return BitVector(self._length, self._bits & other._bits)

    def scale(self, bit: int) -> "BitVector":
        """Scalar multiply by a GF(2) element."""
        return BitVector(self._length, self._bits if bit & 1 else 0)

    def dot(self, other: "BitVector") -> bool:
        """Inner product over GF(2)."""
        self._check_same_length(other)
        return bool(parity(self._bits & other._bits))

    def concatenate(self, other: "BitVector") -> "BitVector":
        """Return self followed by other."""
        return BitVector(self._length + other._length, self._bits | (other._bits << self._length))

    def to_string(self) -> str:
        return "".join("1" if b else "0" for b in self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self._length == other._length and self._bits == other._bits

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BitVector({self.to_string()!r})"

    def __str__(self) -> str:
        return self.to_string()


def concatenate(lhs: BitVector, rhs: BitVector) -> BitVector:
    """Concatenate lhs then rhs into one vector."""
    return lhs.concatenate(rhs)


__all__ = ["BitVector", "concatenate"]
