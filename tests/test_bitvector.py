from __future__ import annotations

import pytest

from gf2algebra.bitvector import BitVector, concatenate
from gf2algebra.errors import DimensionMismatchError


def test_construction_and_access() -> None:
    v = BitVector.from_indices(6, [0, 3, 5])
    assert len(v) == 6
    assert v.get(0) and v.get(3) and v.get(5)
    assert not v.get(1)
    assert v.to_string() == "100101"
    assert BitVector.from_string("100101") == v
    assert list(v) == [True, False, False, True, False, True]


def test_set_clear_flip_put() -> None:
    v = BitVector(4)
    assert v.is_zero()
    v.set(2)
    v.flip(1)
    v.put(3, True)
    v.clear(2)
    assert v.indices() == [1, 3]
    assert v.bit_count() == 2


def test_bounds_checked() -> None:
    v = BitVector(3)
    with pytest.raises(IndexError):
        v.get(3)
    with pytest.raises(IndexError):
        v.set(-1)
    with pytest.raises(ValueError):
        BitVector(-1)
    with pytest.raises(ValueError):
        BitVector(2, 0b100)
    with pytest.raises(ValueError):
        BitVector.from_string("01x")


def test_xor_and_scale_dot() -> None:
    a = BitVector.from_string("1100")
    b = BitVector.from_string("1010")
    assert (a ^ b).to_string() == "0110"
    assert (a + b) == (a ^ b)
    assert (a & b).to_string() == "1000"
    assert a.scale(1) == a
    assert a.scale(0).is_zero()
    assert a.dot(b) is True
    with pytest.raises(DimensionMismatchError):
        a ^ BitVector(3)


def test_copy_is_independent() -> None:
    a = BitVector.from_string("101")
    b = a.copy()
    b.flip(1)
    assert a.to_string() == "101"
    assert b.to_string() == "111"


def test_concatenate_puts_lhs_first() -> None:
    lhs = BitVector.from_string("10")
    rhs = BitVector.from_string("011")
    assert concatenate(lhs, rhs).to_string() == "10011"


def test_unhashable() -> None:
    with pytest.raises(TypeError):
        hash(BitVector(2))
