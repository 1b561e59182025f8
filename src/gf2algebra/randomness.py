"""Injectable random-bit source for random matrices, vectors and monomials.

Not a cryptographic generator: draws come from :class:`random.Random`, so a
seed makes every construction reproducible under test.
"""

from __future__ import annotations

import random
from typing import Optional

from .bitvector import BitVector
from .monomial import Monomial


class RandomBits:
    def __init__(self, seed: Optional[int] = None, *, rng: Optional[random.Random] = None) -> None:
        if rng is not None and seed is not None:
            raise ValueError("Pass either seed or rng, not both.")
        self.rng = rng if rng is not None else random.Random(seed)

    def random_bit(self) -> bool:
        return bool(self.rng.getrandbits(1))

    def random_bits(self, n: int) -> int:
        if n < 0:
            raise ValueError(f"Bit count must be nonnegative, got {n}.")
        return self.rng.getrandbits(n) if n else 0

    def random_vector(self, n: int) -> BitVector:
        return BitVector(n, self.random_bits(n))

    def random_monomial(self, input_length: int, max_degree: int) -> Monomial:
        """Monomial of degree 1..max_degree over distinct variables < input_length."""
        if input_length < 0 or max_degree < 0:
            raise ValueError("input_length and max_degree must be nonnegative")
        top = min(max_degree, input_length)
        if top == 0:
            return Monomial.one()
        degree = self.rng.randint(1, top)
        return Monomial.from_indices(*self.rng.sample(range(input_length), degree))


def resolve(rng: Optional[RandomBits]) -> RandomBits:
    """Return rng, or a fresh unseeded source when none is injected."""
    return rng if rng is not None else RandomBits()


__all__ = ["RandomBits", "resolve"]
