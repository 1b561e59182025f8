"""Ordered pipelines of polynomial functions over GF(2).

Input is fed to the first stage; each later stage consumes the output of the
one before it, and the last stage's output is the pipeline's output. Stages
are treated as immutable values and may be shared between pipelines.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, Optional, Tuple

from .bitvector import BitVector
from .errors import DimensionMismatchError

logger = logging.getLogger(__name__)


class CompoundPolynomialFunctionGF2:
    """Double-ended pipeline; ``prefix``/``suffix`` edit in place, ``compose`` returns a new one.

    A stage is anything exposing ``input_length``, ``output_length`` and
    ``apply(x)``; stages that also expose ``compose(inner)`` support
    :meth:`compose_head_directly`.
    """

    def __init__(self, functions: Iterable = ()) -> None:
        self._functions = deque(functions)

    @property
    def functions(self) -> Tuple:
        return tuple(self._functions)

    @property
    def input_length(self) -> int:
        if not self._functions:
            return 0
        return self._functions[0].input_length

    @property
    def output_length(self) -> int:
        if not self._functions:
            return 0
        return self._functions[-1].output_length

    def count(self) -> int:
        return len(self._functions)

    def __len__(self) -> int:
        return len(self._functions)

    def validate_for_compose(self, inner) -> None:
        # A pipeline whose input length is 0 (e.g. empty) accepts any inner function.
        if self.input_length != 0 and self.input_length != inner.output_length:
            raise DimensionMismatchError(
                f"Input length of outer function ({self.input_length}) must match "
                f"output length of inner function ({inner.output_length})."
            )

    def compose(self, inner) -> "CompoundPolynomialFunctionGF2":
        """New pipeline computing self(inner(x)); inner may be a stage or a pipeline."""
        self.validate_for_compose(inner)
        if isinstance(inner, CompoundPolynomialFunctionGF2):
            result = CompoundPolynomialFunctionGF2(inner._functions)
            result._functions.extend(self._functions)
        else:
            result = self.copy()
            result._functions.appendleft(inner)
        logger.debug("composed pipeline has %d stages", len(result))
        return result

    def prefix(self, inner) -> "CompoundPolynomialFunctionGF2":
        self.validate_for_compose(inner)
        self._functions.appendleft(inner)
        return self

    def suffix(self, outer) -> "CompoundPolynomialFunctionGF2":
        # Checked even when empty: output_length is then 0.
        if self.output_length != outer.input_length:
            raise DimensionMismatchError(
                f"Function being appended must have input length {self.output_length}, "
                f"got {outer.input_length}."
            )
        self._functions.append(outer)
        return self

    def copy(self) -> "CompoundPolynomialFunctionGF2":
        return CompoundPolynomialFunctionGF2(self._functions)

    def apply(self, x: BitVector, rhs: Optional[BitVector] = None) -> BitVector:
        if rhs is not None:
            if len(x) + len(rhs) != self.input_length:
                raise DimensionMismatchError(
                    "Vectors provided for evaluation must have the same total length "
                    f"as the function expects as input ({len(x)} + {len(rhs)} != {self.input_length})."
                )
            x = x.concatenate(rhs)
        result = x
        for f in self._functions:
            result = f.apply(result)
        return result

    __call__ = apply

    def compose_head_directly(self, inner) -> None:
        """Replace the first stage f with f.compose(inner) instead of adding a stage."""
        if not self._functions:
            raise ValueError("Cannot compose the head of an empty pipeline.")
        head = self._functions[0]
        if not callable(getattr(head, "compose", None)):
            raise TypeError(
                f"Head stage {type(head).__name__} does not support direct composition."
            )
        self._functions[0] = head.compose(inner)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(stages={len(self)}, "
            f"input_length={self.input_length}, output_length={self.output_length})"
        )


__all__ = ["CompoundPolynomialFunctionGF2"]
