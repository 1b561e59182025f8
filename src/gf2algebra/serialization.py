"""JSON wire form of polynomial functions.

The four field names below are the compatibility contract with persisted data.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Type

from .bitvector import BitVector
from .functions import PolynomialFunctionGF2
from .monomial import Monomial
from .polynomial import PolynomialFunctionRepresentationGF2

INPUT_LENGTH_PROPERTY = "input-length"
OUTPUT_LENGTH_PROPERTY = "output-length"
MONOMIALS_PROPERTY = "monomials"
CONTRIBUTIONS_PROPERTY = "contributions"


def to_dict(f: PolynomialFunctionRepresentationGF2) -> Dict[str, Any]:
    return {
        INPUT_LENGTH_PROPERTY: f.input_length,
        OUTPUT_LENGTH_PROPERTY: f.output_length,
        MONOMIALS_PROPERTY: [m.indices() for m in f.monomials],
        CONTRIBUTIONS_PROPERTY: [c.to_string() for c in f.contributions],
    }


def from_dict(
    data: Dict[str, Any], cls: Optional[Type[PolynomialFunctionRepresentationGF2]] = None
):
    cls = cls or PolynomialFunctionGF2
    missing = [
        key
        for key in (
            INPUT_LENGTH_PROPERTY,
            OUTPUT_LENGTH_PROPERTY,
            MONOMIALS_PROPERTY,
            CONTRIBUTIONS_PROPERTY,
        )
        if key not in data
    ]
    if missing:
        raise ValueError(f"Missing fields in polynomial payload: {', '.join(missing)}.")
    try:
        input_length = int(data[INPUT_LENGTH_PROPERTY])
        output_length = int(data[OUTPUT_LENGTH_PROPERTY])
        monomials = [Monomial.from_indices(*(int(i) for i in m)) for m in data[MONOMIALS_PROPERTY]]
        contributions = []
        for raw in data[CONTRIBUTIONS_PROPERTY]:
            if not isinstance(raw, str):
                raise TypeError(f"contribution {raw!r} must be a bit string")
            contributions.append(BitVector.from_string(raw))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid polynomial payload: {exc}") from exc
    return cls(input_length, output_length, monomials, contributions)


def dumps(f: PolynomialFunctionRepresentationGF2, **kwargs: Any) -> str:
    return json.dumps(to_dict(f), **kwargs)


def loads(text: str, cls: Optional[Type[PolynomialFunctionRepresentationGF2]] = None):
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("Polynomial payload must be a JSON object.")
    return from_dict(data, cls)


def write_json(path: str | Path, f: PolynomialFunctionRepresentationGF2) -> None:
    path = Path(path)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(to_dict(f), fh, indent=2, sort_keys=True)
        fh.write("\n")


def read_json(path: str | Path, cls: Optional[Type[PolynomialFunctionRepresentationGF2]] = None):
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        return loads(fh.read(), cls)


__all__ = [
    "INPUT_LENGTH_PROPERTY",
    "OUTPUT_LENGTH_PROPERTY",
    "MONOMIALS_PROPERTY",
    "CONTRIBUTIONS_PROPERTY",
    "to_dict",
    "from_dict",
    "dumps",
    "loads",
    "write_json",
    "read_json",
]
