"""gf2algebra: GF(2) matrix algebra and multivariate polynomial functions."""

import logging

from .bitmatrix import BitMatrix
from .bitvector import BitVector, concatenate
from .compound import CompoundPolynomialFunctionGF2
from .errors import DimensionMismatchError, DuplicateMonomialError, SingularMatrixError
from .functions import PolynomialFunctionGF2
from .gf2 import gf2_rank
from .matrix import EnhancedBitMatrix, InversionResult, bit_vector_from_square_matrix
from .monomial import Monomial
from .polynomial import Builder, PolynomialFunctionRepresentationGF2
from .randomness import RandomBits
from .render import PolynomialLabeling, to_latex_string, to_string

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "BitVector",
    "BitMatrix",
    "concatenate",
    "EnhancedBitMatrix",
    "InversionResult",
    "bit_vector_from_square_matrix",
    "Monomial",
    "RandomBits",
    "PolynomialFunctionRepresentationGF2",
    "Builder",
    "PolynomialFunctionGF2",
    "CompoundPolynomialFunctionGF2",
    "PolynomialLabeling",
    "to_string",
    "to_latex_string",
    "gf2_rank",
    "DimensionMismatchError",
    "SingularMatrixError",
    "DuplicateMonomialError",
]
